"""Consolidated validation utilities for calculator inputs.

Raw values come straight from form fields, so every parser accepts strings as
well as numbers. The first failing rule raises ``ValidationError`` carrying
the offending field.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from core.constants import (
    ERROR_MESSAGES,
    FIELD_AVERAGE,
    FIELD_LABELS,
    FIELD_PRICE,
    FIELD_SHARES,
    FIELD_TARGET,
    NOT_POSITIVE_MESSAGES,
)
from core.errors import ValidationError

RawNumber = Union[str, float, int, None]


@dataclass(frozen=True, slots=True)
class CalculatorInputs:
    """Parsed and validated calculator form values."""

    current_shares: float
    current_average: float
    buy_price: float
    target_average: float


def _label(field: str) -> str:
    return FIELD_LABELS.get(field, field)


def parse_number(raw: RawNumber, field: str) -> float:
    """Parse a raw form value into a finite float.

    Args:
        raw: Text or number entered by the user
        field: Field name used for error messages

    Returns:
        Parsed float value

    Raises:
        ValidationError: If the value is empty or not a finite number
    """
    if raw is None:
        raise ValidationError(ERROR_MESSAGES["FIELD_REQUIRED"].format(label=_label(field)), field)

    if isinstance(raw, bool):
        raise ValidationError(ERROR_MESSAGES["FIELD_NOT_NUMERIC"].format(label=_label(field)), field)

    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        cleaned = raw.replace("$", "").replace(",", "").strip()
        if not cleaned:
            raise ValidationError(ERROR_MESSAGES["FIELD_REQUIRED"].format(label=_label(field)), field)
        try:
            value = float(cleaned)
        except ValueError:
            raise ValidationError(ERROR_MESSAGES["FIELD_NOT_NUMERIC"].format(label=_label(field)), field)
    else:
        raise ValidationError(ERROR_MESSAGES["FIELD_NOT_NUMERIC"].format(label=_label(field)), field)

    if not math.isfinite(value):
        raise ValidationError(ERROR_MESSAGES["FIELD_NOT_NUMERIC"].format(label=_label(field)), field)
    return value


def validate_positive(raw: RawNumber, field: str) -> float:
    """Parse a raw value and require it to be greater than zero.

    Args:
        raw: Text or number entered by the user
        field: One of the input field names from core.constants

    Returns:
        Parsed positive float

    Raises:
        ValidationError: If the value is missing, non-numeric or not positive
    """
    value = parse_number(raw, field)
    if value <= 0:
        message = NOT_POSITIVE_MESSAGES.get(field, f"{_label(field)} must be greater than zero")
        raise ValidationError(message, field)
    return value


def validate_shares(raw: RawNumber) -> float:
    return validate_positive(raw, FIELD_SHARES)


def validate_average(raw: RawNumber) -> float:
    return validate_positive(raw, FIELD_AVERAGE)


def validate_price(raw: RawNumber) -> float:
    return validate_positive(raw, FIELD_PRICE)


def validate_target(raw: RawNumber, price: float | None = None) -> float:
    """Validate the target average, optionally against the purchase price.

    A target at or below the purchase price can never be reached by buying
    at that price.
    """
    target = validate_positive(raw, FIELD_TARGET)
    if price is not None and target <= price:
        raise ValidationError(ERROR_MESSAGES["TARGET_NOT_ABOVE_PRICE"], FIELD_TARGET)
    return target


def validate_calculator_inputs(
    current_shares: RawNumber,
    current_average: RawNumber,
    buy_price: RawNumber,
    target_average: RawNumber,
) -> CalculatorInputs:
    """Validate all four calculator fields in form order.

    Validation short-circuits: the first failing rule raises and later
    fields are not inspected.

    Raises:
        ValidationError: With ``field`` set to the offending input
    """
    shares = validate_shares(current_shares)
    average = validate_average(current_average)
    price = validate_price(buy_price)
    target = validate_target(target_average, price=price)
    return CalculatorInputs(
        current_shares=shares,
        current_average=average,
        buy_price=price,
        target_average=target,
    )
