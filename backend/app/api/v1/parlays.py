from __future__ import annotations

from fastapi import APIRouter, HTTPException

from app.config import settings
from app.schemas.parlays import OddsErrorResponse, ParlayCalculateRequest, ParlayCalculateResponse
from app.services.parlay_calculator import evaluate_parlay
from app.utils.odds_math import format_payout

router = APIRouter(prefix="/parlay", tags=["parlays"])


@router.post("", response_model=ParlayCalculateResponse)
async def calculate(request: ParlayCalculateRequest) -> ParlayCalculateResponse:
    outcome = evaluate_parlay(request.odds, request.wager)
    if not outcome.is_valid:
        error = OddsErrorResponse(
            error=outcome.error.value,
            message=outcome.message,
            invalid_indices=outcome.invalid_indices,
        )
        raise HTTPException(status_code=422, detail=error.model_dump())

    result = outcome.result
    return ParlayCalculateResponse(
        american=result.combined_american,
        decimal=result.combined_decimal,
        payout=result.payout,
        payout_display=format_payout(result.payout, settings.payout_decimal_places) if result.payout is not None else None,
        legs=result.leg_decimals,
    )
