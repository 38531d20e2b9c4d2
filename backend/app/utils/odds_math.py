from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from math import prod

# Full-string decimal literal; rejects "inf", "nan", "1_000" and trailing junk.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class OddsErrorCode(str, Enum):
    NOT_NUMERIC = "not_numeric"
    INVALID_ENTRIES = "invalid_entries"
    NO_VALID_ENTRIES = "no_valid_entries"
    INVALID_WAGER = "invalid_wager"
    DEGENERATE_ODDS = "degenerate_odds"


class OddsError(ValueError):
    code: OddsErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotNumericOddsError(OddsError):
    code = OddsErrorCode.NOT_NUMERIC

    def __init__(self, raw: str) -> None:
        super().__init__(f"American odds must be numeric, got {raw!r}")
        self.raw = raw


class DegenerateOddsError(OddsError):
    code = OddsErrorCode.DEGENERATE_ODDS

    def __init__(self, decimal_odds: float) -> None:
        super().__init__(f"Decimal odds {decimal_odds!r} have no American equivalent")
        self.decimal_odds = decimal_odds


class OddsSign(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    UNSPECIFIED = "unspecified"


@dataclass(frozen=True)
class ParsedAmerican:
    sign: OddsSign
    magnitude: float


def parse_number(raw: str) -> float | None:
    """Parse a trimmed decimal literal. Returns None when it is not a number."""
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def parse_american(raw: str) -> ParsedAmerican | None:
    """Split an American odds string into sign and magnitude. "" -> None, "+150" -> (POSITIVE, 150)"""
    text = raw.strip()
    if not text:
        return None
    value = parse_number(text)
    if value is None:
        raise NotNumericOddsError(raw)

    # The written first character decides the branch, not the parsed value.
    if text[0] == "+":
        sign = OddsSign.POSITIVE
    elif text[0] == "-":
        sign = OddsSign.NEGATIVE
    else:
        sign = OddsSign.UNSPECIFIED
    return ParsedAmerican(sign=sign, magnitude=abs(value))


def american_to_decimal(parsed: ParsedAmerican) -> float:
    """Convert parsed American odds to decimal. +150 -> 2.5, -200 -> 1.5, 100 -> 2.0"""
    if parsed.sign == OddsSign.NEGATIVE:
        if parsed.magnitude == 0:
            return math.inf
        return (100 / parsed.magnitude) + 1
    return (parsed.magnitude / 100) + 1


def parse_american_to_decimal(raw: str) -> float | None:
    parsed = parse_american(raw)
    if parsed is None:
        return None
    return american_to_decimal(parsed)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def decimal_to_american_value(decimal_odds: float) -> int:
    """Convert decimal odds to signed American odds. 2.5 -> 150, 1.5 -> -200"""
    if not math.isfinite(decimal_odds) or decimal_odds <= 1:
        raise DegenerateOddsError(decimal_odds)
    if decimal_odds >= 2:
        return round_half_up((decimal_odds - 1) * 100)
    return round_half_up(-100 / (decimal_odds - 1))


def decimal_to_american(decimal_odds: float) -> str:
    """Convert decimal odds to display text. 2.5 -> +150, 1.5 -> -200"""
    american = decimal_to_american_value(decimal_odds)
    if decimal_odds >= 2:
        return f"+{american}"
    return str(american)


def calculate_parlay_odds(decimal_odds_list: list[float]) -> float:
    """Product of decimal odds for all legs."""
    if not decimal_odds_list:
        raise ValueError("At least one leg is required")
    return prod(decimal_odds_list)


def calculate_payout(decimal_odds: float, wager: float) -> float:
    """Total return including stake."""
    return decimal_odds * wager


def format_payout(payout: float, places: int = 2) -> str:
    return f"{payout:.{places}f}"
