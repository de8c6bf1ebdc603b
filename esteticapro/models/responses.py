"""Response models for the hub API.

Two wire shapes are served, chosen per endpoint:

- data envelope ``{ data: T | None, error: str | None }``
- status envelope ``{ success: bool, ... }`` (the subscription price)

Handlers never build these by hand; they receive a ``Result`` from the
service layer and convert it with the ``from_result`` constructors below.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from esteticapro.models.result import Err, Ok, Result

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    """JSON data envelope: exactly one of ``data`` / ``error`` is set."""

    data: T | None = None
    error: str | None = None

    @classmethod
    def from_result(cls, result: Result) -> "DataEnvelope":
        if isinstance(result, Ok):
            return cls(data=result.value, error=None)
        return cls(data=None, error=result.message)


class SuccessFlag(BaseModel):
    """Payload returned by a completed sign-out."""

    success: bool = True


class AutoRenewalConfig(BaseModel):
    """Public payment configuration exposed to the client."""

    model_config = ConfigDict(populate_by_name=True)

    auto_renewal: bool = Field(serialization_alias="autoRenewal")


class PriceQuote(BaseModel):
    """Status envelope for the subscription price."""

    success: bool
    price: float

    @classmethod
    def from_result(cls, result: Result, fallback: float) -> "PriceQuote":
        if isinstance(result, Err):
            return cls(success=False, price=fallback)
        return cls(success=True, price=result.value)
