# Role: External tool adapter for the currency catalog. Fetches the code -> name mapping from either mirror and
# returns Currency values ready for pickers/listings. Never performs UI side effects; callers surface failures.

from __future__ import annotations

import logging
from typing import Optional, Tuple

from backend.core.validator import catalog_shape
from backend.models.currency import Currency
from backend.models.errors import CATALOG_UNAVAILABLE_MESSAGE
from backend.models.outcome import RetrievalOutcome
from backend.tools.failover import FailoverFetcher
from backend.utils.endpoints import catalog_urls

logger = logging.getLogger(__name__)


class CatalogClient:
    def __init__(self, fetcher: Optional[FailoverFetcher] = None) -> None:
        self.fetcher = fetcher or FailoverFetcher()

    def load_catalog(self) -> RetrievalOutcome[Tuple[Currency, ...]]:
        urls = catalog_urls()
        outcome = self.fetcher.fetch(urls.primary, urls.fallback, catalog_shape())
        if not outcome.ok:
            return RetrievalOutcome.failure(CATALOG_UNAVAILABLE_MESSAGE, outcome.kind)

        currencies = {}
        for key, name in outcome.data.items():
            code = key.strip().upper()
            if not code:
                continue
            # Key line: display label mirrors the picker format "<CODE> - <name>".
            label = name.strip()
            currencies[code] = Currency(code=code, display_name=f"{code} - {label}" if label else code)

        logger.info("Loaded %d currencies from %s source", len(currencies), outcome.source)
        return RetrievalOutcome.success(tuple(currencies[c] for c in sorted(currencies)), source=outcome.source)
