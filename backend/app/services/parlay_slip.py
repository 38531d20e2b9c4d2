from __future__ import annotations

from dataclasses import dataclass, field

from app.services.parlay_calculator import ParlayOutcome, ParlayResult, evaluate_parlay
from app.utils.odds_math import OddsErrorCode


@dataclass
class SlipState:
    rows: list[str] = field(default_factory=lambda: [""])
    wager: str = ""
    result: ParlayResult | None = None
    error: OddsErrorCode | None = None
    error_message: str = ""
    invalid_rows: list[int] = field(default_factory=list)


class ParlaySlip:
    """Ordered odds rows and wager as entered by a user, recalculated on demand."""

    def __init__(self, rows: list[str] | None = None, wager: str = "") -> None:
        self.state = SlipState(rows=list(rows) if rows is not None else [""], wager=wager)

    @property
    def rows(self) -> list[str]:
        return list(self.state.rows)

    @property
    def result(self) -> ParlayResult | None:
        return self.state.result

    @property
    def error(self) -> OddsErrorCode | None:
        return self.state.error

    @property
    def error_message(self) -> str:
        return self.state.error_message

    @property
    def invalid_rows(self) -> list[int]:
        return list(self.state.invalid_rows)

    @staticmethod
    def placeholder(index: int) -> str:
        return f"Odd #{index + 1} (e.g., +150, -200)"

    def add_row(self, value: str = "") -> int:
        self.state.rows.append(value)
        return len(self.state.rows) - 1

    def remove_row(self, index: int) -> None:
        if not 0 <= index < len(self.state.rows):
            raise IndexError(f"row {index} out of range")
        del self.state.rows[index]
        self._clear_outcome()

    def set_row(self, index: int, value: str) -> None:
        if not 0 <= index < len(self.state.rows):
            raise IndexError(f"row {index} out of range")
        self.state.rows[index] = value

    def set_wager(self, value: str) -> None:
        self.state.wager = value

    def _clear_outcome(self) -> None:
        self.state.result = None
        self.state.error = None
        self.state.error_message = ""
        self.state.invalid_rows = []

    def reset(self) -> None:
        self.state = SlipState()

    def calculate(self) -> ParlayOutcome:
        outcome = evaluate_parlay(list(self.state.rows), self.state.wager)
        self.state.result = outcome.result
        self.state.error = outcome.error
        self.state.error_message = outcome.message
        self.state.invalid_rows = list(outcome.invalid_indices)
        return outcome
