from __future__ import annotations

import math

from fastapi import APIRouter, HTTPException, Query

from app.schemas.odds import OddsConversionResponse
from app.schemas.parlays import OddsErrorResponse
from app.services.parlay_calculator import ERROR_MESSAGES
from app.utils.odds_math import OddsError, OddsErrorCode, decimal_to_american, parse_american_to_decimal

router = APIRouter(prefix="/odds", tags=["odds"])


def _unprocessable(code: OddsErrorCode) -> HTTPException:
    error = OddsErrorResponse(error=code.value, message=ERROR_MESSAGES[code])
    return HTTPException(status_code=422, detail=error.model_dump())


@router.get("/american-to-decimal", response_model=OddsConversionResponse)
async def american_to_decimal(odds: str = Query(...)) -> OddsConversionResponse:
    try:
        decimal_odds = parse_american_to_decimal(odds)
        if decimal_odds is None:
            raise _unprocessable(OddsErrorCode.NO_VALID_ENTRIES)
    except OddsError as exc:
        raise _unprocessable(exc.code) from exc
    # "-0" parses to infinite decimal odds, which JSON cannot carry.
    if not math.isfinite(decimal_odds):
        raise _unprocessable(OddsErrorCode.DEGENERATE_ODDS)
    return OddsConversionResponse(american=odds.strip(), decimal=decimal_odds)


@router.get("/decimal-to-american", response_model=OddsConversionResponse)
async def decimal_to_american_odds(odds: float = Query(...)) -> OddsConversionResponse:
    try:
        american = decimal_to_american(odds)
    except OddsError as exc:
        raise _unprocessable(exc.code) from exc
    return OddsConversionResponse(american=american, decimal=odds)
