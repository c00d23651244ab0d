# Role: Per-session state container. Holds the user's current selections, the loaded currency list,
# and the orchestrator's "flow memory": phase, loading flag, last result and last error.

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

import backend.config as config
from backend.models.currency import ConversionResult, Currency
from backend.models.errors import ConversionError


class Phase(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    RESOLVING = "resolving"
    COMPUTING = "computing"
    DONE = "done"
    FAILED = "failed"


class LastError(BaseModel):
    code: ConversionError
    message: str


class ConverterState(BaseModel):
    session_id: str = "local"

    amount: str = ""
    base_currency: str = Field(default_factory=lambda: config.DEFAULT_BASE_CURRENCY)
    target_currency: str = Field(default_factory=lambda: config.DEFAULT_TARGET_CURRENCY)

    currencies: List[Currency] = Field(default_factory=list)
    catalog_error: Optional[str] = None

    phase: Phase = Phase.IDLE
    # Key line: true only while resolving/computing; the orchestrator releases it on every exit path.
    loading: bool = False

    last_result: Optional[ConversionResult] = None
    error: Optional[LastError] = None

    # Key line: ticket of the newest submission; older overlapping submissions must not overwrite it.
    request_seq: int = 0

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
