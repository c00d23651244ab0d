# Role: Thin HTTP adapter for conversions. Validates request/response shapes and delegates the whole request
# to FlowController (business logic lives in core, not in the API layer). Conversion failures are part of the
# stable response schema, not HTTP errors.

from decimal import Decimal
from typing import Optional, Union

from fastapi import APIRouter
from pydantic import BaseModel

from backend.api.deps import flow_controller, state_manager

router = APIRouter(tags=["convert"])


class ConvertRequest(BaseModel):
    session_id: str
    amount: Union[str, int, float, None] = None
    base_currency: Optional[str] = None
    target_currency: Optional[str] = None


class ConvertResponse(BaseModel):
    session_id: str
    ok: bool
    amount: str
    base_currency: str
    target_currency: str
    rate: Optional[float] = None
    converted_amount: Optional[Decimal] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None


@router.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest) -> ConvertResponse:
    # 1) Resolve the session state
    # 2) Forward the raw user input to the orchestrator
    # 3) Return result or error in one schema for UI/clients
    state = state_manager.get_or_create(req.session_id)
    outcome = flow_controller.submit_conversion(state, req.amount, req.base_currency, req.target_currency)

    result = outcome.result
    return ConvertResponse(
        session_id=req.session_id,
        ok=outcome.ok,
        amount=state.amount,
        base_currency=state.base_currency,
        target_currency=state.target_currency,
        rate=result.rate if result else None,
        converted_amount=result.converted_amount if result else None,
        error_code=outcome.error.value if outcome.error else None,
        error_message=outcome.message,
    )
