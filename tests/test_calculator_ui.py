import logging

import pandas as pd
import pytest

from config import create_test_config
from core.constants import FIELD_AVERAGE, FIELD_PRICE, FIELD_SHARES, FIELD_TARGET, TABLE_COLUMNS
from services.averaging import Position, Purchase, Target, compute_table, compute_target
from ui.calculator import (
    RESULT_STATE_KEY,
    _clear_inputs,
    build_result_message,
    build_summary,
    build_table_row,
    outcomes_to_dataframe,
    render_calculator,
)
from ui.formatting import fmt_currency, fmt_shares


class TestFormatting:
    def test_fmt_currency(self):
        assert fmt_currency(1800) == "$1,800.00"
        assert fmt_currency(9.0) == "$9.00"
        assert fmt_currency(9.12345, precision=3) == "$9.123"
        assert fmt_currency(None) == "—"
        assert fmt_currency(float("nan")) == "—"

    def test_fmt_shares(self):
        assert fmt_shares(1234) == "1,234"
        assert fmt_shares(2.9) == "2"
        assert fmt_shares(None) == "—"


class TestResultText:
    def test_computed_message(self, position, purchase):
        outcome = compute_target(position, purchase, Target(9.0))
        assert build_result_message(outcome, 8.0) == (
            "To reach target average of $9.00, buy 100 shares at $8.00"
        )

    def test_already_achieved_message(self, position, purchase):
        outcome = compute_target(position, purchase, Target(11.0))
        message = build_result_message(outcome, 8.0)
        assert "$10.00" in message and "$11.00" in message
        assert "no purchase needed" in message

    def test_impossible_message(self, position):
        outcome = compute_target(position, Purchase(9.5), Target(9.0))
        assert build_result_message(outcome, 9.5) == (
            "A target average of $9.00 cannot be reached by buying at $9.50"
        )

    def test_summary(self, position, purchase):
        outcome = compute_target(position, purchase, Target(9.0))
        assert build_summary(outcome) == {
            "Shares to Buy": "100",
            "Total Shares After": "200",
            "Total Cost After": "$1,800.00",
            "New Average After": "$9.00",
        }


class TestTable:
    def test_rows_by_feasibility(self, position, purchase):
        rows = compute_table(position, purchase, [Target(9.0), Target(11.0), Target(7.0)])
        assert build_table_row(rows[0]) == ["$9.00", "100", "$800.00", "$9.00"]
        assert build_table_row(rows[1]) == ["$11.00", "Already achieved", "$0.00", "$10.00"]
        assert build_table_row(rows[2]) == ["$7.00", "Not possible", "-", "-"]

    def test_dataframe(self):
        rows = compute_table(
            Position(50, 10.0), Purchase(8.0), [Target(t) for t in (9.00, 8.75, 8.50, 8.25)]
        )
        df = outcomes_to_dataframe(rows)
        assert list(df.columns) == TABLE_COLUMNS
        assert df["Target Average"].tolist() == ["$9.00", "$8.75", "$8.50", "$8.25"]
        assert df["Shares to Buy"].tolist() == ["50", "84", "150", "350"]
        assert df.iloc[0]["Purchase Cost"] == "$400.00"
        assert df.iloc[3]["Purchase Cost"] == "$2,800.00"

    def test_empty_dataframe(self):
        df = outcomes_to_dataframe([])
        assert isinstance(df, pd.DataFrame)
        assert df.empty
        assert list(df.columns) == TABLE_COLUMNS


class TestRenderCalculator:
    def test_initial_render_shows_no_result(self, mock_streamlit):
        mock_streamlit.form_submit_button.return_value = False
        render_calculator(create_test_config())
        assert mock_streamlit.text_input.call_count == 0  # inputs are drawn on columns
        mock_streamlit.error.assert_not_called()
        mock_streamlit.success.assert_not_called()

    def test_submit_valid_inputs(self, mock_streamlit):
        mock_streamlit.form_submit_button.return_value = True
        mock_streamlit.session_state.update({
            FIELD_SHARES: "100",
            FIELD_AVERAGE: "10",
            FIELD_PRICE: "8",
            FIELD_TARGET: "9",
        })
        render_calculator(create_test_config())

        mock_streamlit.success.assert_called_once_with(
            "To reach target average of $9.00, buy 100 shares at $8.00"
        )
        df = mock_streamlit.dataframe.call_args[0][0]
        assert len(df) == 4
        assert mock_streamlit.session_state[RESULT_STATE_KEY].success is True

    def test_submit_invalid_inputs(self, mock_streamlit):
        mock_streamlit.form_submit_button.return_value = True
        mock_streamlit.session_state.update({
            FIELD_SHARES: "",
            FIELD_AVERAGE: "10",
            FIELD_PRICE: "8",
            FIELD_TARGET: "9",
        })
        render_calculator(create_test_config())
        mock_streamlit.error.assert_called_once_with("Current shares is required.")
        mock_streamlit.success.assert_not_called()

    def test_no_candidates_shows_caption(self, mock_streamlit):
        mock_streamlit.form_submit_button.return_value = True
        mock_streamlit.session_state.update({
            FIELD_SHARES: "100",
            FIELD_AVERAGE: "10",
            FIELD_PRICE: "8",
            FIELD_TARGET: "9",
        })
        render_calculator(create_test_config(candidate_targets=()))
        mock_streamlit.dataframe.assert_not_called()
        mock_streamlit.caption.assert_called_once()

    def test_clear_inputs(self, mock_streamlit):
        mock_streamlit.session_state.update({FIELD_SHARES: "100", RESULT_STATE_KEY: object()})
        _clear_inputs()
        assert mock_streamlit.session_state[FIELD_SHARES] == ""
        assert mock_streamlit.session_state[FIELD_TARGET] == ""
        assert RESULT_STATE_KEY not in mock_streamlit.session_state

    def test_clear_inputs_logs_under_app_logger(self, mock_streamlit, caplog):
        with caplog.at_level(logging.DEBUG, logger="avgcalc"):
            _clear_inputs()
        record = next(r for r in caplog.records if r.getMessage() == "Clearing calculator inputs")
        assert record.name == "avgcalc.ui.calculator"


@pytest.mark.parametrize("precision,expected", [(2, "$9.00"), (0, "$9")])
def test_table_respects_precision(position, purchase, precision, expected):
    row = build_table_row(compute_target(position, purchase, Target(9.0)), precision)
    assert row[0] == expected
