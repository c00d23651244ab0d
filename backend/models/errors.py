# Role: Central error taxonomy. Keeps the system consistent across:
# fetch attempts (transport/shape), retrieval outcomes, resolver failures, and orchestrator input checks.

from enum import Enum


class ErrorKind(str, Enum):
    # Attempt level: recovered locally by falling through to the fallback mirror.
    TRANSPORT = "transport"
    SHAPE = "shape"

    # Retrieval level
    SOURCES_UNAVAILABLE = "sources_unavailable"
    RATE_NOT_FOUND = "rate_not_found"
    INVALID_RATE = "invalid_rate"

    # Input level: detected before any network call.
    INVALID_AMOUNT = "invalid_amount"
    SAME_CURRENCY = "same_currency"
    MISSING_CURRENCY = "missing_currency"


class ConversionError(str, Enum):
    INVALID_AMOUNT = "invalid_amount"
    SAME_CURRENCY = "same_currency"
    MISSING_CURRENCY = "missing_currency"
    SOURCES_UNAVAILABLE = "sources_unavailable"
    RATE_NOT_FOUND = "rate_not_found"
    INVALID_RATE = "invalid_rate"

    @classmethod
    def from_kind(cls, kind: ErrorKind) -> "ConversionError":
        # Attempt-level kinds never escape the fetcher; treat them as unavailability if they do.
        if kind in {ErrorKind.TRANSPORT, ErrorKind.SHAPE}:
            return cls.SOURCES_UNAVAILABLE
        return cls(kind.value)


USER_MESSAGES = {
    ConversionError.INVALID_AMOUNT: "Please enter a valid number for the amount.",
    ConversionError.SAME_CURRENCY: "Base and target currencies cannot be the same.",
    ConversionError.MISSING_CURRENCY: "Please select both a base and a target currency.",
    ConversionError.SOURCES_UNAVAILABLE: "Unable to fetch conversion rates. Please try again later.",
    ConversionError.RATE_NOT_FOUND: "Target currency rate not found.",
    ConversionError.INVALID_RATE: "The provider returned an invalid rate for this currency pair.",
}

CATALOG_UNAVAILABLE_MESSAGE = "Unable to fetch currency data. Please try again later."
