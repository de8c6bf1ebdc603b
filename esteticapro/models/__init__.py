"""Public models for the hub API."""

from esteticapro.models.responses import (
    AutoRenewalConfig,
    DataEnvelope,
    PriceQuote,
    SuccessFlag,
)
from esteticapro.models.result import Err, Ok, Result

__all__ = [
    "AutoRenewalConfig",
    "DataEnvelope",
    "Err",
    "Ok",
    "PriceQuote",
    "Result",
    "SuccessFlag",
]
