"""
Configuration for the average-down calculator.

This module centralizes the values that were previously literals inside the
table generation code: the candidate target levels, display precision and
how much float noise to ignore when converting share counts to whole shares.
"""
from __future__ import annotations

import math
import os
from dataclasses import dataclass, field, replace
from typing import Optional

from dotenv import load_dotenv

from core.constants import (
    DEFAULT_CURRENCY_PRECISION,
    DEFAULT_ROUNDING_ULPS,
    DEFAULT_TARGET_LEVELS,
    ENV_CURRENCY_PRECISION,
    ENV_ROUNDING_ULPS,
    ENV_TARGET_LEVELS,
)
from core.error_utils import log_and_raise_domain_error
from core.errors import ConfigurationError
from infra.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CalculatorConfig:
    """Configuration for share calculation and result display."""

    # Comparison table rows, in display order
    candidate_targets: tuple[float, ...] = field(default=DEFAULT_TARGET_LEVELS)

    # Display configuration
    currency_precision: int = DEFAULT_CURRENCY_PRECISION

    # Share rounding
    rounding_ulps: int = DEFAULT_ROUNDING_ULPS


# Global default configuration instance
DEFAULT_CONFIG = CalculatorConfig()

_active_config: Optional[CalculatorConfig] = None


def parse_target_levels(raw: str) -> tuple[float, ...]:
    """Parse a comma-separated list of target levels.

    Args:
        raw: Text such as ``"9.00, 8.75, 8.50"``

    Returns:
        Tuple of positive floats in the order given

    Raises:
        ConfigurationError: If any entry is not a positive number
    """
    levels = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            value = float(part)
        except ValueError as exc:
            log_and_raise_domain_error(
                logger, exc, ConfigurationError, "parse_target_levels",
                custom_message=f"Invalid target level '{part}' in {ENV_TARGET_LEVELS}",
                variable=ENV_TARGET_LEVELS,
            )
        if not math.isfinite(value) or value <= 0:
            raise ConfigurationError(f"Target level must be a positive number, got '{part}'")
        levels.append(value)
    return tuple(levels)


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as exc:
        log_and_raise_domain_error(
            logger, exc, ConfigurationError, "read_env_int",
            custom_message=f"{name} must be an integer, got '{raw}'",
            variable=name,
        )
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got '{raw}'")
    return value


def load_config() -> CalculatorConfig:
    """
    Build a configuration from environment variables.

    A ``.env`` file is read unless running under pytest, so tests can
    control the environment with monkeypatch.

    Returns:
        New CalculatorConfig instance
    """
    if "PYTEST_CURRENT_TEST" not in os.environ:
        load_dotenv(override=False)

    raw_levels = os.getenv(ENV_TARGET_LEVELS)
    levels = DEFAULT_TARGET_LEVELS
    if raw_levels is not None and raw_levels.strip():
        levels = parse_target_levels(raw_levels)

    return CalculatorConfig(
        candidate_targets=levels,
        currency_precision=_read_int(ENV_CURRENCY_PRECISION, DEFAULT_CURRENCY_PRECISION),
        rounding_ulps=_read_int(ENV_ROUNDING_ULPS, DEFAULT_ROUNDING_ULPS),
    )


def get_config() -> CalculatorConfig:
    """
    Get the current configuration instance, loading it from the environment
    on first use.

    Returns:
        Current CalculatorConfig instance
    """
    global _active_config
    if _active_config is None:
        _active_config = load_config()
    return _active_config


def set_config(config: Optional[CalculatorConfig]) -> None:
    """
    Set a new configuration instance (primarily for testing).

    Passing ``None`` forces the next ``get_config`` call to reload from the
    environment.
    """
    global _active_config
    _active_config = config


def create_test_config(**overrides) -> CalculatorConfig:
    """
    Create a configuration instance with specific overrides for testing.

    Example:
        test_config = create_test_config(candidate_targets=(9.5, 9.0))
    """
    if "candidate_targets" in overrides:
        overrides["candidate_targets"] = tuple(overrides["candidate_targets"])
    return replace(DEFAULT_CONFIG, **overrides)
