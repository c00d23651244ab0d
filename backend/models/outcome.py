# Role: Result values threaded through fetcher -> clients -> orchestrator. Failures are plain values
# (ok=False + kind + reason), so "both mirrors failed" is something callers can inspect and test.

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from backend.models.currency import ConversionResult
from backend.models.errors import ConversionError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class RetrievalOutcome(Generic[T]):
    ok: bool
    data: Optional[T] = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    # "primary" or "fallback" on success
    source: Optional[str] = None

    @classmethod
    def success(cls, data: T, source: Optional[str] = None) -> "RetrievalOutcome[T]":
        return cls(ok=True, data=data, source=source)

    @classmethod
    def failure(cls, reason: str, kind: ErrorKind) -> "RetrievalOutcome[T]":
        return cls(ok=False, error=reason, kind=kind)


@dataclass(frozen=True)
class ConversionOutcome:
    ok: bool
    result: Optional[ConversionResult] = None
    error: Optional[ConversionError] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, result: ConversionResult) -> "ConversionOutcome":
        return cls(ok=True, result=result)

    @classmethod
    def failure(cls, error: ConversionError, message: str) -> "ConversionOutcome":
        return cls(ok=False, error=error, message=message)
