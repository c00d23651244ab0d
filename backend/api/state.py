# Role: Transparency endpoints for the UI. Exposes the current state snapshot by session_id
# (loading flag, phase, selections, last result/error) plus the swap action.

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from backend.api.deps import flow_controller, state_manager
from backend.models.state import ConverterState

router = APIRouter(tags=["state"])


class StateSnapshot(BaseModel):
    session_id: str
    phase: str
    loading: bool
    amount: str
    base_currency: str
    target_currency: str
    last_result: Optional[dict]
    error: Optional[dict]


def _snapshot(state: ConverterState) -> StateSnapshot:
    return StateSnapshot(
        session_id=state.session_id,
        phase=state.phase.value,
        loading=state.loading,
        amount=state.amount,
        base_currency=state.base_currency,
        target_currency=state.target_currency,
        last_result=state.last_result.model_dump(mode="json") if state.last_result else None,
        error=state.error.model_dump(mode="json") if state.error else None,
    )


@router.get("/state/{session_id}", response_model=StateSnapshot)
def get_state(session_id: str) -> StateSnapshot:
    return _snapshot(state_manager.get_or_create(session_id))


@router.post("/state/{session_id}/swap", response_model=StateSnapshot)
def swap(session_id: str) -> StateSnapshot:
    state = state_manager.get_or_create(session_id)
    flow_controller.swap_currencies(state)
    return _snapshot(state)
