# Role: Generic two-mirror retrieval. Tries the primary URL, falls through to the fallback URL exactly once
# when the primary fails at the transport level or its payload is rejected by the validator.
# Stateless apart from the injected HTTP session, so one instance can serve every caller.

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import requests

import backend.config as config
from backend.core.validator import ValidationResult
from backend.models.errors import ErrorKind
from backend.models.outcome import RetrievalOutcome

logger = logging.getLogger(__name__)

Validate = Callable[[Any], ValidationResult]

BOTH_SOURCES_UNAVAILABLE = "both sources unavailable"


class FailoverFetcher:
    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> None:
        # Key line: session is injectable for testing/mocking; requests.get semantics otherwise.
        self._session = session
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout if self._timeout is not None else config.HTTP_TIMEOUT_SECONDS

    def fetch(self, primary_url: str, fallback_url: str, validate: Validate) -> RetrievalOutcome[Any]:
        # 1) Primary attempt
        # 2) On transport/shape failure -> single fallback attempt
        # 3) Fallback failure -> "both sources unavailable" (never a merged/partial payload)

        primary = self._attempt(primary_url, validate)
        if primary.ok:
            return RetrievalOutcome.success(primary.data, source="primary")

        logger.warning("Primary source failed (%s: %s), trying fallback %s", primary.kind.value, primary.error, fallback_url)

        fallback = self._attempt(fallback_url, validate)
        if fallback.ok:
            return RetrievalOutcome.success(fallback.data, source="fallback")

        logger.error(
            "Both sources failed: primary=%s (%s), fallback=%s (%s)",
            primary_url,
            primary.error,
            fallback_url,
            fallback.error,
        )
        return RetrievalOutcome.failure(BOTH_SOURCES_UNAVAILABLE, ErrorKind.SOURCES_UNAVAILABLE)

    def _attempt(self, url: str, validate: Validate) -> RetrievalOutcome[Any]:
        # Role: one GET + decode + validate. Transport errors include timeouts, non-2xx and undecodable bodies.
        try:
            getter = self._session.get if self._session is not None else requests.get
            r = getter(url, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as e:
            return RetrievalOutcome.failure(f"request failed: {e}", ErrorKind.TRANSPORT)
        except ValueError as e:
            return RetrievalOutcome.failure(f"undecodable payload: {e}", ErrorKind.TRANSPORT)

        verdict = validate(payload)
        if not verdict.ok:
            return RetrievalOutcome.failure(f"invalid payload: {verdict.reason}", ErrorKind.SHAPE)

        logger.debug("Fetched %s (%d top-level keys)", url, len(payload))
        return RetrievalOutcome.success(payload)
