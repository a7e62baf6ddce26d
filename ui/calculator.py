"""Streamlit rendering for the average-down calculator.

The helpers above ``render_calculator`` are pure and build the strings and
tables shown on the page, so they can be tested without Streamlit.
"""

from typing import Dict, List

import pandas as pd
import streamlit as st

from config.calculator_config import CalculatorConfig, get_config
from core.constants import (
    FIELD_AVERAGE,
    FIELD_LABELS,
    FIELD_PRICE,
    FIELD_SHARES,
    FIELD_TARGET,
    INPUT_FIELDS,
    TABLE_COLUMNS,
    TEXT_ALREADY_ACHIEVED,
    TEXT_NOT_POSSIBLE,
    TEXT_PLACEHOLDER,
)
from infra.logging import get_logger
from services.averaging import Feasibility, Outcome
from services.calculator_service import CalculationResult, CalculatorService
from ui.formatting import fmt_currency, fmt_shares

logger = get_logger(__name__)

RESULT_STATE_KEY = "calculation_result"


def build_result_message(outcome: Outcome, buy_price: float, precision: int = 2) -> str:
    """Sentence describing what to buy for the user's own target."""
    target = fmt_currency(outcome.target_average, precision)
    price = fmt_currency(buy_price, precision)
    if outcome.feasibility is Feasibility.IMPOSSIBLE:
        return f"A target average of {target} cannot be reached by buying at {price}"
    if outcome.feasibility is Feasibility.ALREADY_ACHIEVED:
        current = fmt_currency(outcome.resulting_average, precision)
        return f"Your average of {current} already meets the target of {target}; no purchase needed"
    return (
        f"To reach target average of {target}, "
        f"buy {fmt_shares(outcome.shares_to_buy)} shares at {price}"
    )


def build_summary(outcome: Outcome, precision: int = 2) -> Dict[str, str]:
    """Four summary fields shown under the result sentence."""
    return {
        "Shares to Buy": fmt_shares(outcome.shares_to_buy),
        "Total Shares After": fmt_shares(outcome.total_shares),
        "Total Cost After": fmt_currency(outcome.total_cost, precision),
        "New Average After": fmt_currency(outcome.resulting_average, precision),
    }


def build_table_row(outcome: Outcome, precision: int = 2) -> List[str]:
    target = fmt_currency(outcome.target_average, precision)
    if outcome.feasibility is Feasibility.IMPOSSIBLE:
        return [target, TEXT_NOT_POSSIBLE, TEXT_PLACEHOLDER, TEXT_PLACEHOLDER]
    if outcome.feasibility is Feasibility.ALREADY_ACHIEVED:
        return [
            target,
            TEXT_ALREADY_ACHIEVED,
            fmt_currency(0, precision),
            fmt_currency(outcome.resulting_average, precision),
        ]
    return [
        target,
        fmt_shares(outcome.shares_to_buy),
        fmt_currency(outcome.purchase_cost, precision),
        fmt_currency(outcome.resulting_average, precision),
    ]


def outcomes_to_dataframe(outcomes: List[Outcome], precision: int = 2) -> pd.DataFrame:
    """Comparison table, one row per candidate target in input order."""
    rows = [build_table_row(o, precision) for o in outcomes]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def _clear_inputs() -> None:
    logger.debug("Clearing calculator inputs")
    for key in INPUT_FIELDS:
        st.session_state[key] = ""
    st.session_state.pop(RESULT_STATE_KEY, None)


def _render_result(result: CalculationResult, precision: int) -> None:
    outcome = result.outcome
    st.success(build_result_message(outcome, result.buy_price, precision))

    summary = build_summary(outcome, precision)
    for col, (label, value) in zip(st.columns(len(summary)), summary.items()):
        col.metric(label, value)

    st.subheader("Other Target Levels")
    if result.table:
        st.dataframe(outcomes_to_dataframe(result.table, precision), hide_index=True)
    else:
        st.caption("No comparison targets configured.")


def render_calculator(config: CalculatorConfig | None = None) -> None:
    """Render the calculator form and, after submission, its results."""
    config = config or get_config()
    service = CalculatorService(config)

    with st.form("calculator_form"):
        left, right = st.columns(2)
        left.text_input(FIELD_LABELS[FIELD_SHARES], key=FIELD_SHARES)
        left.text_input(FIELD_LABELS[FIELD_AVERAGE], key=FIELD_AVERAGE)
        right.text_input(FIELD_LABELS[FIELD_PRICE], key=FIELD_PRICE)
        right.text_input(FIELD_LABELS[FIELD_TARGET], key=FIELD_TARGET)
        submitted = st.form_submit_button("Calculate", type="primary")

    st.button("Clear", on_click=_clear_inputs, type="secondary")

    if submitted:
        result = service.calculate(
            st.session_state.get(FIELD_SHARES),
            st.session_state.get(FIELD_AVERAGE),
            st.session_state.get(FIELD_PRICE),
            st.session_state.get(FIELD_TARGET),
        )
        st.session_state[RESULT_STATE_KEY] = result

    result = st.session_state.get(RESULT_STATE_KEY)
    if result is None:
        return
    if not result.success:
        st.error(result.message)
        return
    _render_result(result, config.currency_precision)
