# backend/core/flow_controller.py
# Role: Orchestrator for one conversion request. It glues together:
# input validation, rate resolution (with mirror failover), arithmetic, and persistence onto ConverterState.
# The presentation layer only needs load_catalog(), submit_conversion() and state.loading.

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Optional

from backend.core.calculator import convert
from backend.models.currency import ConversionRequest, ConversionResult
from backend.models.errors import USER_MESSAGES, ConversionError
from backend.models.outcome import ConversionOutcome, RetrievalOutcome
from backend.models.state import ConverterState, LastError, Phase
from backend.tools.catalog_client import CatalogClient
from backend.tools.rate_client import RateClient
from backend.utils.currency import normalize_code, parse_amount

logger = logging.getLogger(__name__)


class FlowController:
    def __init__(
        self,
        rate_client: Optional[RateClient] = None,
        catalog_client: Optional[CatalogClient] = None,
    ) -> None:
        # Key line: dependencies are injectable for testing/mocking.
        self.rate_client = rate_client or RateClient()
        self.catalog_client = catalog_client or CatalogClient()
        self._lock = threading.Lock()

    # ----------------------------
    # Catalog
    # ----------------------------
    def load_catalog(self, state: ConverterState) -> RetrievalOutcome:
        outcome = self.catalog_client.load_catalog()
        if outcome.ok:
            state.currencies = list(outcome.data)
            state.catalog_error = None
        else:
            state.catalog_error = outcome.error
        self._touch(state)
        return outcome

    # ----------------------------
    # Selection helpers
    # ----------------------------
    def select_pair(self, state: ConverterState, base_currency: str, target_currency: str) -> None:
        state.base_currency = normalize_code(base_currency) or state.base_currency
        state.target_currency = normalize_code(target_currency) or state.target_currency
        self._touch(state)

    def swap_currencies(self, state: ConverterState) -> None:
        state.base_currency, state.target_currency = state.target_currency, state.base_currency
        self._touch(state)

    # ----------------------------
    # Conversion
    # ----------------------------
    def submit_conversion(
        self,
        state: ConverterState,
        amount: Any,
        base_currency: Optional[str] = None,
        target_currency: Optional[str] = None,
    ) -> ConversionOutcome:
        # 1) Validating: amount + pair (no network)
        # 2) Resolving: rate via RateClient (loading=True)
        # 3) Computing: Decimal arithmetic
        # 4) Done/Failed: persist result or last error, always release loading

        base = normalize_code(base_currency) if base_currency is not None else state.base_currency
        target = normalize_code(target_currency) if target_currency is not None else state.target_currency

        with self._lock:
            state.request_seq += 1
            ticket = state.request_seq
            state.amount = "" if amount is None else str(amount)
            state.base_currency = base
            state.target_currency = target
            state.phase = Phase.VALIDATING
            state.loading = False
            state.error = None
            state.last_result = None

        value = parse_amount(amount)
        if value is None:
            return self._fail(state, ticket, ConversionError.INVALID_AMOUNT)
        if not base or not target:
            return self._fail(state, ticket, ConversionError.MISSING_CURRENCY)
        if base == target:
            return self._fail(state, ticket, ConversionError.SAME_CURRENCY)

        request = ConversionRequest(amount=value, base_currency=base, target_currency=target)

        self._enter(state, ticket, Phase.RESOLVING, loading=True)
        try:
            rate_outcome = self.rate_client.resolve_rate(request.base_currency, request.target_currency)
            if not rate_outcome.ok:
                return self._fail(state, ticket, ConversionError.from_kind(rate_outcome.kind), rate_outcome.error)

            self._enter(state, ticket, Phase.COMPUTING, loading=True)
            result = ConversionResult(
                amount=request.amount,
                base_currency=request.base_currency,
                target_currency=request.target_currency,
                rate=rate_outcome.data,
                converted_amount=convert(request.amount, rate_outcome.data),
            )

            with self._lock:
                if ticket == state.request_seq:
                    state.last_result = result
                    state.phase = Phase.DONE
            logger.info("Converted %s (rate %s, %s source)", result.describe(), result.rate, rate_outcome.source)
            return ConversionOutcome.success(result)
        finally:
            # Key line: loading never stays stuck, even when the resolver raises unexpectedly.
            with self._lock:
                if ticket == state.request_seq:
                    state.loading = False
                    if state.phase in {Phase.RESOLVING, Phase.COMPUTING}:
                        state.phase = Phase.FAILED
                    self._touch(state)

    # ----------------------------
    # Internals
    # ----------------------------
    def _enter(self, state: ConverterState, ticket: int, phase: Phase, *, loading: bool) -> None:
        with self._lock:
            if ticket == state.request_seq:
                state.phase = phase
                state.loading = loading

    def _fail(
        self,
        state: ConverterState,
        ticket: int,
        error: ConversionError,
        reason: Optional[str] = None,
    ) -> ConversionOutcome:
        message = USER_MESSAGES[error]
        if reason:
            logger.warning("Conversion failed: %s (%s)", error.value, reason)
        with self._lock:
            if ticket == state.request_seq:
                state.phase = Phase.FAILED
                state.loading = False
                state.error = LastError(code=error, message=message)
                self._touch(state)
        return ConversionOutcome.failure(error, message)

    def _touch(self, state: ConverterState) -> None:
        state.updated_at = datetime.now(timezone.utc)
