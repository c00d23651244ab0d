# Role: URL builders for the two provider mirrors. Both mirrors serve the same files under the same path;
# only the host differs. Snapshot date and API version come from backend.config.

from __future__ import annotations

from typing import NamedTuple, Optional

import backend.config as config

PRIMARY_TEMPLATE = "https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@{date}/{version}/{endpoint}"
FALLBACK_TEMPLATE = "https://{date}.currency-api.pages.dev/{version}/{endpoint}"


class MirrorUrls(NamedTuple):
    primary: str
    fallback: str


def mirror_urls(endpoint: str, *, date: Optional[str] = None, version: Optional[str] = None) -> MirrorUrls:
    date = date or config.CURRENCY_API_DATE
    version = version or config.CURRENCY_API_VERSION
    endpoint = endpoint.lstrip("/")
    return MirrorUrls(
        primary=PRIMARY_TEMPLATE.format(date=date, version=version, endpoint=endpoint),
        fallback=FALLBACK_TEMPLATE.format(date=date, version=version, endpoint=endpoint),
    )


def catalog_urls(*, date: Optional[str] = None) -> MirrorUrls:
    return mirror_urls("currencies.json", date=date)


def rate_table_urls(base_currency: str, *, date: Optional[str] = None) -> MirrorUrls:
    # Key line: the provider publishes one file per base currency, named by its lower-case code.
    return mirror_urls(f"currencies/{base_currency.strip().lower()}.json", date=date)
