"""Tests for the terminal rate listing."""

from unittest.mock import MagicMock

import cli
from backend.core.flow_controller import FlowController
from backend.models.currency import RateTable
from backend.models.errors import ErrorKind
from backend.models.outcome import RetrievalOutcome
from backend.models.state import ConverterState
from backend.tools.catalog_client import CatalogClient
from backend.tools.rate_client import RateClient

TABLE = RateTable(base_currency="EUR", rates={"usd": 1.1, "gbp": 0.85}, date="2024-01-01")


def _flow(outcome):
    rate_client = MagicMock(spec=RateClient)
    rate_client.fetch_rate_table.return_value = outcome
    return FlowController(rate_client=rate_client, catalog_client=MagicMock(spec=CatalogClient)), rate_client


def test_rates_lists_table_for_selected_base(capsys):
    flow, rate_client = _flow(RetrievalOutcome.success(TABLE, source="primary"))

    cli._print_rates(flow, ConverterState(), "")

    out = capsys.readouterr().out
    rate_client.fetch_rate_table.assert_called_once_with("EUR")
    assert "EUR rates (2024-01-01, primary source)" in out
    assert "GBP: 0.85" in out
    assert "USD: 1.1" in out
    assert "(2 rates)" in out


def test_rates_single_target_uses_lookup(capsys):
    flow, rate_client = _flow(RetrievalOutcome.success(TABLE, source="fallback"))

    cli._print_rates(flow, ConverterState(), " eur usd")

    out = capsys.readouterr().out
    rate_client.fetch_rate_table.assert_called_once_with("EUR")
    assert "1 EUR = 1.1 USD" in out


def test_rates_unknown_target(capsys):
    flow, _ = _flow(RetrievalOutcome.success(TABLE, source="primary"))

    cli._print_rates(flow, ConverterState(), "EUR JPY")

    assert "No rate for JPY" in capsys.readouterr().out


def test_rates_reports_unavailable_sources(capsys):
    flow, _ = _flow(RetrievalOutcome.failure("both sources unavailable", ErrorKind.SOURCES_UNAVAILABLE))

    cli._print_rates(flow, ConverterState(), "GBP")

    assert "Error: both sources unavailable" in capsys.readouterr().out
