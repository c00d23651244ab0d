# Role: Payload gatekeeper. Checks that a decoded provider response has the expected shape before anything
# downstream trusts it. Never raises; returns a ValidationResult whose reason names the failed precondition.
# The catalog and rate-table paths share this one contract.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

NOT_AN_OBJECT = "not-an-object"
MISSING_KEY = "missing-key"
EMPTY_MAPPING = "empty-mapping"
INVALID_VALUE = "invalid-value"


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: Optional[str] = None


_VALID = ValidationResult(ok=True)


@dataclass(frozen=True)
class PayloadShape:
    """
    Shape descriptor:
      - PayloadShape(non_empty=True)          -> non-empty mapping with string keys
      - PayloadShape(required_key="eur")      -> mapping whose "eur" value is itself a mapping
      - PayloadShape(value_type=str)          -> every value must be a str
    """

    required_key: Optional[str] = None
    non_empty: bool = False
    value_type: Optional[type] = None

    def __call__(self, payload: Any) -> ValidationResult:
        return validate_payload(payload, self)


def validate_payload(payload: Any, shape: PayloadShape) -> ValidationResult:
    # 1) Must be a non-null mapping with string keys
    # 2) Must be non-empty if the shape says so
    # 3) Must contain the required key, and that key's value must be a non-null mapping
    # 4) Every value must have the expected type, if the shape names one

    if not isinstance(payload, Mapping):
        return ValidationResult(ok=False, reason=NOT_AN_OBJECT)

    if any(not isinstance(key, str) for key in payload):
        return ValidationResult(ok=False, reason=f"{NOT_AN_OBJECT}: non-string key")

    if shape.non_empty and not payload:
        return ValidationResult(ok=False, reason=EMPTY_MAPPING)

    if shape.required_key is not None:
        if shape.required_key not in payload:
            return ValidationResult(ok=False, reason=f"{MISSING_KEY}: {shape.required_key}")
        if not isinstance(payload[shape.required_key], Mapping):
            return ValidationResult(ok=False, reason=f"{NOT_AN_OBJECT}: {shape.required_key}")

    if shape.value_type is not None:
        for key, value in payload.items():
            if not isinstance(value, shape.value_type):
                return ValidationResult(ok=False, reason=f"{INVALID_VALUE}: {key}")

    return _VALID


def catalog_shape() -> PayloadShape:
    # Key line: values are display names; a rate table served at the catalog URL must not pass.
    return PayloadShape(non_empty=True, value_type=str)


def rate_table_shape(base_code: str) -> PayloadShape:
    # Key line: an empty inner table is structurally valid; the resolver reports the missing pair instead.
    return PayloadShape(required_key=base_code.strip().lower())
