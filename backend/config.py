# Role: Central configuration module. Loads .env into environment variables and computes runtime settings
# (DEBUG, log level, provider snapshot/version, HTTP timeout). Importers read backend.config.<NAME> at call time
# so values stay correct even if load_env() runs after import.

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

DEBUG: bool = False
LOG_LEVEL: str = "INFO"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

HTTP_TIMEOUT_SECONDS: float = 15.0
CURRENCY_API_DATE: str = "latest"
CURRENCY_API_VERSION: str = "v1"

DEFAULT_BASE_CURRENCY: str = "EUR"
DEFAULT_TARGET_CURRENCY: str = "USD"

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    # Key line: timeouts must stay finite and positive.
    return value if 0 < value < float("inf") else default


def _env_str(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip()
    return value or default


def load_env() -> None:
    """
    Load .env into os.environ, then recompute every setting and (re)configure logging.
    """
    global DEBUG, LOG_LEVEL, HTTP_TIMEOUT_SECONDS, CURRENCY_API_DATE, CURRENCY_API_VERSION
    global DEFAULT_BASE_CURRENCY, DEFAULT_TARGET_CURRENCY

    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}

    level = _env_str("LOG_LEVEL", "INFO").upper()
    LOG_LEVEL = "DEBUG" if DEBUG else (level if level in _VALID_LEVELS else "INFO")

    HTTP_TIMEOUT_SECONDS = _env_float("CURRENCY_HTTP_TIMEOUT", 15.0)
    CURRENCY_API_DATE = _env_str("CURRENCY_API_DATE", "latest")
    CURRENCY_API_VERSION = _env_str("CURRENCY_API_VERSION", "v1")

    DEFAULT_BASE_CURRENCY = _env_str("DEFAULT_BASE_CURRENCY", "EUR").upper()
    DEFAULT_TARGET_CURRENCY = _env_str("DEFAULT_TARGET_CURRENCY", "USD").upper()

    configure_logging()


def configure_logging() -> None:
    # Role: one root handler for the whole process; force=True so a second load_env() applies the new level.
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT, force=True)
