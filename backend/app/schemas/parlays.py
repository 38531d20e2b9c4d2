from __future__ import annotations

from pydantic import BaseModel


class ParlayCalculateRequest(BaseModel):
    odds: list[str]
    wager: str | None = None


class ParlayCalculateResponse(BaseModel):
    american: str
    decimal: float
    payout: float | None = None
    payout_display: str | None = None
    legs: list[float] = []


class OddsErrorResponse(BaseModel):
    error: str
    message: str
    invalid_indices: list[int] = []
