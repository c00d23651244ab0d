"""Tests for provider payload validation."""

import pytest

from backend.core.validator import (
    EMPTY_MAPPING,
    INVALID_VALUE,
    MISSING_KEY,
    NOT_AN_OBJECT,
    PayloadShape,
    catalog_shape,
    rate_table_shape,
    validate_payload,
)


@pytest.mark.parametrize("payload", [None, [], "eur", 1.5, ["eur", "usd"]])
def test_non_mapping_is_rejected(payload):
    result = validate_payload(payload, PayloadShape())
    assert not result.ok
    assert result.reason == NOT_AN_OBJECT


def test_catalog_shape_rejects_empty_mapping():
    result = catalog_shape()({})
    assert not result.ok
    assert result.reason == EMPTY_MAPPING


def test_catalog_shape_accepts_code_to_name_mapping():
    assert catalog_shape()({"eur": "Euro", "usd": "US Dollar"}).ok


def test_rate_table_shape_requires_base_key():
    result = rate_table_shape("EUR")({"usd": {"eur": 0.9}})
    assert not result.ok
    assert result.reason.startswith(MISSING_KEY)
    assert "eur" in result.reason


def test_rate_table_shape_requires_nested_mapping():
    result = rate_table_shape("eur")({"eur": None})
    assert not result.ok
    assert result.reason.startswith(NOT_AN_OBJECT)


def test_rate_table_shape_allows_empty_inner_table():
    # A structurally valid but empty table is reported later as a missing pair.
    assert rate_table_shape("eur")({"date": "2024-01-01", "eur": {}}).ok


def test_non_string_keys_are_rejected():
    result = validate_payload({1: "one"}, PayloadShape())
    assert not result.ok
    assert result.reason.startswith(NOT_AN_OBJECT)


def test_catalog_shape_rejects_rate_table_payload():
    result = catalog_shape()({"date": "2024-01-01", "eur": {"usd": 1.1}})
    assert not result.ok
    assert result.reason == f"{INVALID_VALUE}: eur"


def test_value_type_applies_to_every_value():
    shape = PayloadShape(value_type=str)
    assert shape({"eur": "Euro", "usd": "US Dollar"}).ok
    assert shape({"eur": "Euro", "xyz": None}).reason == f"{INVALID_VALUE}: xyz"
