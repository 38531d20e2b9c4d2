from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from app.utils.odds_math import (
    DegenerateOddsError,
    NotNumericOddsError,
    OddsError,
    OddsErrorCode,
    calculate_parlay_odds,
    calculate_payout,
    decimal_to_american,
    parse_american_to_decimal,
    parse_number,
)

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    OddsErrorCode.NOT_NUMERIC: "Odds must be a number such as +150 or -200.",
    OddsErrorCode.INVALID_ENTRIES: "One or more odds inputs are invalid.",
    OddsErrorCode.NO_VALID_ENTRIES: "Enter at least one odd to calculate a parlay.",
    OddsErrorCode.INVALID_WAGER: "Wager must be a number.",
    OddsErrorCode.DEGENERATE_ODDS: "These odds cannot be expressed in American format.",
}


class InvalidEntriesError(OddsError):
    code = OddsErrorCode.INVALID_ENTRIES

    def __init__(self, invalid_indices: list[int]) -> None:
        super().__init__(f"Invalid odds at rows {invalid_indices}")
        self.invalid_indices = invalid_indices


class NoValidEntriesError(OddsError):
    code = OddsErrorCode.NO_VALID_ENTRIES

    def __init__(self) -> None:
        super().__init__("No odds were entered")


class InvalidWagerError(OddsError):
    code = OddsErrorCode.INVALID_WAGER

    def __init__(self, raw: str) -> None:
        super().__init__(f"Wager must be a finite number, got {raw!r}")
        self.raw = raw


@dataclass
class ParlayResult:
    combined_american: str
    combined_decimal: float
    payout: float | None = None
    leg_decimals: list[float] = field(default_factory=list)


@dataclass
class ParlayOutcome:
    result: ParlayResult | None = None
    error: OddsErrorCode | None = None
    invalid_indices: list[int] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.error] if self.error is not None else ""


def parse_wager(raw_wager: str | None) -> float | None:
    """Empty wager means no wager; anything else must be a finite number."""
    if raw_wager is None or not raw_wager.strip():
        return None
    value = parse_number(raw_wager)
    if value is None:
        raise InvalidWagerError(raw_wager)
    return value


def _parse_legs(raw_odds: Sequence[str]) -> list[float]:
    decimals: list[float] = []
    invalid: list[int] = []
    for index, raw in enumerate(raw_odds):
        try:
            decimal_odds = parse_american_to_decimal(raw)
        except NotNumericOddsError:
            invalid.append(index)
            continue
        if decimal_odds is not None:
            decimals.append(decimal_odds)

    if invalid:
        raise InvalidEntriesError(invalid)
    if not decimals:
        raise NoValidEntriesError()
    return decimals


def calculate_parlay(raw_odds: Sequence[str], raw_wager: str | None = None) -> ParlayResult:
    """Combine American odds rows into one parlay price, with payout when a wager is given.

    Blank rows are skipped. Any non-blank row that is not a number rejects the
    whole slip; there is no partial result.
    """
    leg_decimals = _parse_legs(raw_odds)
    combined_decimal = calculate_parlay_odds(leg_decimals)
    combined_american = decimal_to_american(combined_decimal)

    wager = parse_wager(raw_wager)
    payout = None
    if wager is not None:
        payout = calculate_payout(combined_decimal, wager)
        if not math.isfinite(payout):
            raise InvalidWagerError(raw_wager)

    logger.debug(
        "parlay calculated: legs=%s combined_decimal=%s combined_american=%s payout=%s",
        len(leg_decimals),
        combined_decimal,
        combined_american,
        payout,
    )
    return ParlayResult(
        combined_american=combined_american,
        combined_decimal=combined_decimal,
        payout=payout,
        leg_decimals=leg_decimals,
    )


def evaluate_parlay(raw_odds: Sequence[str], raw_wager: str | None = None) -> ParlayOutcome:
    try:
        result = calculate_parlay(raw_odds, raw_wager)
    except InvalidEntriesError as exc:
        logger.warning("parlay rejected: error=%s invalid_indices=%s", exc.code.value, exc.invalid_indices)
        return ParlayOutcome(error=exc.code, invalid_indices=exc.invalid_indices)
    except (NoValidEntriesError, InvalidWagerError, DegenerateOddsError) as exc:
        logger.warning("parlay rejected: error=%s detail=%s", exc.code.value, exc.message)
        return ParlayOutcome(error=exc.code)
    return ParlayOutcome(result=result)
