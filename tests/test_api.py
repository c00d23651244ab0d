"""Tests for the HTTP adapters."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from backend.api import deps
from backend.main import app
from backend.models.currency import Currency
from backend.models.errors import CATALOG_UNAVAILABLE_MESSAGE, ErrorKind
from backend.models.outcome import RetrievalOutcome
from backend.tools.catalog_client import CatalogClient
from backend.tools.rate_client import RateClient


@pytest.fixture
def client(monkeypatch):
    rate_client = MagicMock(spec=RateClient)
    catalog_client = MagicMock(spec=CatalogClient)
    monkeypatch.setattr(deps.flow_controller, "rate_client", rate_client)
    monkeypatch.setattr(deps.flow_controller, "catalog_client", catalog_client)
    with TestClient(app) as c:
        c.rate_client = rate_client
        c.catalog_client = catalog_client
        yield c


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_convert_success(client):
    client.rate_client.resolve_rate.return_value = RetrievalOutcome.success(1.1, source="primary")

    resp = client.post(
        "/convert", json={"session_id": "s1", "amount": "10", "base_currency": "eur", "target_currency": "usd"}
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["converted_amount"] == "11.00"
    assert body["base_currency"] == "EUR"
    assert body["target_currency"] == "USD"
    assert body["error_code"] is None


def test_convert_invalid_amount_is_reported_in_schema(client):
    resp = client.post(
        "/convert", json={"session_id": "s2", "amount": "abc", "base_currency": "EUR", "target_currency": "USD"}
    )

    body = resp.json()
    assert resp.status_code == 200
    assert body["ok"] is False
    assert body["error_code"] == "invalid_amount"
    assert body["error_message"] == "Please enter a valid number for the amount."
    client.rate_client.resolve_rate.assert_not_called()


def test_state_snapshot_after_failure_and_swap(client):
    client.rate_client.resolve_rate.return_value = RetrievalOutcome.failure(
        "both sources unavailable", ErrorKind.SOURCES_UNAVAILABLE
    )
    client.post("/convert", json={"session_id": "s3", "amount": 5, "base_currency": "EUR", "target_currency": "USD"})

    snap = client.get("/state/s3").json()
    assert snap["loading"] is False
    assert snap["phase"] == "failed"
    assert snap["error"]["code"] == "sources_unavailable"

    swapped = client.post("/state/s3/swap").json()
    assert swapped["base_currency"] == "USD"
    assert swapped["target_currency"] == "EUR"


def test_currencies_listing(client):
    client.catalog_client.load_catalog.return_value = RetrievalOutcome.success(
        (Currency(code="EUR", display_name="EUR - Euro"),), source="primary"
    )

    resp = client.get("/currencies")

    assert resp.status_code == 200
    assert resp.json() == [{"code": "EUR", "display_name": "EUR - Euro"}]


def test_currencies_unavailable(client):
    client.catalog_client.load_catalog.return_value = RetrievalOutcome.failure(
        CATALOG_UNAVAILABLE_MESSAGE, ErrorKind.SOURCES_UNAVAILABLE
    )

    resp = client.get("/currencies")

    assert resp.status_code == 503
    assert resp.json()["detail"] == CATALOG_UNAVAILABLE_MESSAGE


def test_currencies_are_recorded_on_the_session(client):
    client.catalog_client.load_catalog.return_value = RetrievalOutcome.success(
        (Currency(code="USD", display_name="USD - US Dollar"),), source="fallback"
    )

    resp = client.get("/currencies", params={"session_id": "cat"})

    assert resp.status_code == 200
    state = deps.state_manager.get_or_create("cat")
    assert [c.code for c in state.currencies] == ["USD"]
    assert state.catalog_error is None


def test_convert_large_amount_is_not_a_server_error(client):
    client.rate_client.resolve_rate.return_value = RetrievalOutcome.success(1.1, source="primary")

    resp = client.post(
        "/convert", json={"session_id": "big", "amount": "1e30", "base_currency": "EUR", "target_currency": "USD"}
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["converted_amount"] == "1100000000000000000000000000000.00"


def test_convert_absurd_amount_is_invalid(client):
    resp = client.post(
        "/convert", json={"session_id": "huge", "amount": "1e1000", "base_currency": "EUR", "target_currency": "USD"}
    )

    assert resp.status_code == 200
    assert resp.json()["error_code"] == "invalid_amount"


def test_expired_session_is_evicted(client, monkeypatch):
    client.post("/convert", json={"session_id": "old", "amount": "abc", "base_currency": "EUR", "target_currency": "USD"})
    assert client.get("/state/old").json()["phase"] == "failed"

    deps.state_manager.get_or_create("old").updated_at = datetime.now(timezone.utc) - timedelta(hours=2)
    monkeypatch.setattr(deps.state_manager, "_sweep_interval", timedelta(0))

    snap = client.get("/state/old").json()

    assert snap["phase"] == "idle"
    assert snap["amount"] == ""
    assert snap["error"] is None
