"""Centralized constants for the calculator application.

This module provides shared constants to eliminate duplication and ensure
consistency across the application.
"""

from __future__ import annotations

from typing import Final

# ===============================
# Input Field Names
# ===============================

FIELD_SHARES: Final[str] = "current_shares"
FIELD_AVERAGE: Final[str] = "current_average"
FIELD_PRICE: Final[str] = "buy_price"
FIELD_TARGET: Final[str] = "target_average"

# Validation order; the first failing field wins
INPUT_FIELDS: Final[list[str]] = [
    FIELD_SHARES,
    FIELD_AVERAGE,
    FIELD_PRICE,
    FIELD_TARGET,
]

FIELD_LABELS = {
    FIELD_SHARES: "Current shares",
    FIELD_AVERAGE: "Current average cost",
    FIELD_PRICE: "Purchase price",
    FIELD_TARGET: "Target average",
}

# ===============================
# Calculation Defaults
# ===============================

# Candidate target levels shown in the comparison table, highest first
DEFAULT_TARGET_LEVELS: Final[tuple[float, ...]] = (9.00, 8.75, 8.50, 8.25)

# Units in the last place treated as float noise when rounding share counts up
DEFAULT_ROUNDING_ULPS: Final[int] = 4

DEFAULT_CURRENCY_PRECISION: Final[int] = 2

# ===============================
# Environment Variable Names
# ===============================

ENV_TARGET_LEVELS: Final[str] = "AVG_TARGET_LEVELS"
ENV_CURRENCY_PRECISION: Final[str] = "AVG_CURRENCY_PRECISION"
ENV_ROUNDING_ULPS: Final[str] = "AVG_ROUNDING_ULPS"
ENV_LOG_LEVEL: Final[str] = "LOG_LEVEL"

# ===============================
# Error Messages
# ===============================

ERROR_MESSAGES = {
    "SHARES_NOT_POSITIVE": "Current shares must be greater than zero",
    "AVERAGE_NOT_POSITIVE": "Current average cost must be greater than zero",
    "PRICE_NOT_POSITIVE": "Purchase price must be greater than zero",
    "TARGET_NOT_POSITIVE": "Target average must be greater than zero",
    "TARGET_NOT_ABOVE_PRICE": "Target average must be greater than purchase price",
    "FIELD_REQUIRED": "{label} is required.",
    "FIELD_NOT_NUMERIC": "{label} must be a valid number.",
}

NOT_POSITIVE_MESSAGES = {
    FIELD_SHARES: ERROR_MESSAGES["SHARES_NOT_POSITIVE"],
    FIELD_AVERAGE: ERROR_MESSAGES["AVERAGE_NOT_POSITIVE"],
    FIELD_PRICE: ERROR_MESSAGES["PRICE_NOT_POSITIVE"],
    FIELD_TARGET: ERROR_MESSAGES["TARGET_NOT_POSITIVE"],
}

# ===============================
# Display Text
# ===============================

TEXT_NOT_POSSIBLE: Final[str] = "Not possible"
TEXT_ALREADY_ACHIEVED: Final[str] = "Already achieved"
TEXT_PLACEHOLDER: Final[str] = "-"

TABLE_COLUMNS: Final[list[str]] = [
    "Target Average",
    "Shares to Buy",
    "Purchase Cost",
    "Resulting Average",
]
