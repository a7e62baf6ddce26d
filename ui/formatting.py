"""Standardized formatting functions for calculator output."""

import math
from typing import Optional

import pandas as pd


def fmt_currency(value: Optional[float], precision: int = 2) -> str:
    """Standard currency formatting."""
    if value is None or pd.isna(value):
        return "—"
    return f"${value:,.{precision}f}"


def fmt_shares(value: Optional[float]) -> str:
    """Format share counts, dropping any fractional share."""
    if value is None or pd.isna(value):
        return "—"
    return f"{math.floor(value):,}"
