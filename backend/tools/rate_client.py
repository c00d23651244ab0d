# Role: External tool adapter for exchange rates. Fetches the per-base rate table from either mirror and
# extracts a single target rate. A missing pair is reported separately from an unreachable provider:
# both mirrors serve the same dataset, so retrying would not help.

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional, Tuple

from backend.core.validator import rate_table_shape
from backend.models.currency import RateTable
from backend.models.errors import ErrorKind
from backend.models.outcome import RetrievalOutcome
from backend.tools.failover import FailoverFetcher
from backend.utils.endpoints import rate_table_urls

logger = logging.getLogger(__name__)

RATE_NOT_FOUND = "target currency rate not found"
INVALID_RATE = "invalid rate value"


def _is_valid_rate(value: Any) -> bool:
    # Key line: bool is an int subclass in Python; JSON true must not pass as rate 1.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


class RateClient:
    def __init__(self, fetcher: Optional[FailoverFetcher] = None) -> None:
        self.fetcher = fetcher or FailoverFetcher()

    def _fetch_raw(self, base_currency: str) -> Tuple[RetrievalOutcome[Any], str]:
        base = base_currency.strip().lower()
        urls = rate_table_urls(base)
        return self.fetcher.fetch(urls.primary, urls.fallback, rate_table_shape(base)), base

    def fetch_rate_table(self, base_currency: str) -> RetrievalOutcome[RateTable]:
        outcome, base = self._fetch_raw(base_currency)
        if not outcome.ok:
            return RetrievalOutcome.failure(outcome.error, outcome.kind)

        raw: Mapping[str, Any] = outcome.data[base]
        # Entries with unusable values are dropped from the listing; resolve_rate reports them explicitly.
        rates = {str(code).lower(): float(rate) for code, rate in raw.items() if _is_valid_rate(rate)}
        date = outcome.data.get("date")
        table = RateTable(base_currency=base.upper(), rates=rates, date=date if isinstance(date, str) else None)
        return RetrievalOutcome.success(table, source=outcome.source)

    def resolve_rate(self, base_currency: str, target_currency: str) -> RetrievalOutcome[float]:
        # 1) Fetch + validate the base table (failover handled by the fetcher)
        # 2) Look up the target code case-insensitively
        # 3) Reject missing / non-positive / non-numeric rates with distinct reasons

        outcome, base = self._fetch_raw(base_currency)
        if not outcome.ok:
            return RetrievalOutcome.failure(outcome.error, outcome.kind)

        target = target_currency.strip().lower()
        raw: Mapping[str, Any] = outcome.data[base]
        matches = [value for code, value in raw.items() if str(code).lower() == target]
        if not matches:
            logger.info("No %s rate in %s table (%s source)", target, base, outcome.source)
            return RetrievalOutcome.failure(RATE_NOT_FOUND, ErrorKind.RATE_NOT_FOUND)

        rate = matches[0]
        if not _is_valid_rate(rate):
            logger.warning("Invalid %s->%s rate value: %r", base, target, rate)
            return RetrievalOutcome.failure(INVALID_RATE, ErrorKind.INVALID_RATE)

        logger.debug("Resolved %s->%s = %s (%s source)", base, target, rate, outcome.source)
        return RetrievalOutcome.success(float(rate), source=outcome.source)
