"""Ok / Err result type returned by the service layer.

INVARIANT: a Result is exactly one of ``Ok(value)`` or ``Err(message)``.
Routers turn it into the wire shape their endpoint serves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a payload."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a user-facing message."""

    message: str


Result = Union[Ok[T], Err]
