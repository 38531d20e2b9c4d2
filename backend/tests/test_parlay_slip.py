import pytest

from app.services.parlay_slip import ParlaySlip
from app.utils.odds_math import OddsErrorCode


def test_new_slip_has_one_blank_row():
    slip = ParlaySlip()
    assert slip.rows == [""]
    assert slip.result is None
    assert slip.error is None


def test_add_set_and_calculate():
    slip = ParlaySlip()
    slip.set_row(0, "+150")
    index = slip.add_row()
    slip.set_row(index, "-200")
    slip.set_wager("100")

    outcome = slip.calculate()

    assert outcome.is_valid
    assert slip.result.combined_american == "+275"
    assert slip.result.payout == pytest.approx(375.0)


def test_error_clears_previous_result():
    slip = ParlaySlip(rows=["+150"])
    slip.calculate()
    assert slip.result is not None

    slip.add_row("abc")
    slip.calculate()

    assert slip.result is None
    assert slip.error == OddsErrorCode.INVALID_ENTRIES
    assert slip.invalid_rows == [1]
    assert slip.error_message == "One or more odds inputs are invalid."


def test_remove_row():
    slip = ParlaySlip(rows=["+150", "abc", "-110"])
    slip.remove_row(1)
    assert slip.rows == ["+150", "-110"]
    assert slip.calculate().is_valid

    with pytest.raises(IndexError):
        slip.remove_row(5)


def test_removing_every_row_leaves_empty_slip():
    slip = ParlaySlip()
    slip.remove_row(0)
    assert slip.rows == []
    assert slip.calculate().error == OddsErrorCode.NO_VALID_ENTRIES


def test_reset():
    slip = ParlaySlip(rows=["+150", "+200"], wager="50")
    slip.calculate()
    slip.reset()
    assert slip.rows == [""]
    assert slip.state.wager == ""
    assert slip.result is None


def test_rows_are_not_shared_with_caller():
    rows = ["+150"]
    slip = ParlaySlip(rows=rows)
    slip.add_row("-110")
    assert rows == ["+150"]
    slip.rows.append("junk")
    assert slip.rows == ["+150", "-110"]


def test_placeholder():
    assert ParlaySlip.placeholder(0) == "Odd #1 (e.g., +150, -200)"


def test_remove_row_clears_stale_outcome():
    slip = ParlaySlip(rows=["+150", "abc"])
    slip.calculate()
    assert slip.error == OddsErrorCode.INVALID_ENTRIES

    slip.remove_row(1)

    assert slip.error is None
    assert slip.error_message == ""
    assert slip.invalid_rows == []
    assert slip.result is None
    assert slip.calculate().is_valid
