# Role: In-memory session store. Owns lifecycle of ConverterState objects:
# create/get by session_id and cleanup of expired sessions. Nothing is persisted across process restarts.

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from typing import Dict

from backend.models.state import ConverterState


class StateManager:
    def __init__(self, session_ttl_minutes: int = 60, sweep_interval_seconds: int = 60) -> None:
        self._states: Dict[str, ConverterState] = {}
        self._ttl = timedelta(minutes=session_ttl_minutes)
        self._sweep_interval = timedelta(seconds=sweep_interval_seconds)
        self._last_sweep = datetime.now(timezone.utc)
        # Key line: FastAPI runs sync endpoints in a threadpool, so the map itself needs a lock.
        self._lock = threading.Lock()

    def get_or_create(self, session_id: str) -> ConverterState:
        # 1) Sweep expired sessions (at most once per sweep interval)
        # 2) Reuse existing state or initialize a fresh one
        now = datetime.now(timezone.utc)
        with self._lock:
            if now - self._last_sweep >= self._sweep_interval:
                self._sweep(now)

            state = self._states.get(session_id)
            if state is None:
                state = ConverterState(session_id=session_id)
                self._states[session_id] = state
            return state

    def cleanup_expired(self) -> int:
        # Role: drop inactive sessions to avoid unbounded growth (best for long-running servers).
        with self._lock:
            return self._sweep(datetime.now(timezone.utc))

    def _sweep(self, now: datetime) -> int:
        # Sessions with a request in flight are kept even if stale. Caller holds the lock.
        to_delete = [sid for sid, st in self._states.items() if (now - st.updated_at) > self._ttl and not st.loading]
        for sid in to_delete:
            del self._states[sid]
        self._last_sweep = now
        return len(to_delete)
