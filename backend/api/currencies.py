# Role: Catalog endpoint. Feeds the UI pickers; a 503 carries the user-facing message when both mirrors fail.
# With a session_id the loaded catalog (or its error) is also recorded on that session's state.

from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from backend.api.deps import flow_controller, state_manager
from backend.models.state import ConverterState

router = APIRouter(tags=["currencies"])


class CurrencyItem(BaseModel):
    code: str
    display_name: str


@router.get("/currencies", response_model=List[CurrencyItem])
def list_currencies(session_id: Optional[str] = None) -> List[CurrencyItem]:
    state = state_manager.get_or_create(session_id) if session_id else ConverterState()
    outcome = flow_controller.load_catalog(state)
    if not outcome.ok:
        raise HTTPException(status_code=503, detail=state.catalog_error)
    return [CurrencyItem(code=c.code, display_name=c.display_name) for c in state.currencies]
