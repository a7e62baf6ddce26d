"""Configuration package for the calculator.

Re-exports the calculator configuration helpers so callers can use
``from config import get_config``.
"""

from __future__ import annotations

from config.calculator_config import (
    DEFAULT_CONFIG,
    CalculatorConfig,
    create_test_config,
    get_config,
    load_config,
    parse_target_levels,
    set_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "CalculatorConfig",
    "create_test_config",
    "get_config",
    "load_config",
    "parse_target_levels",
    "set_config",
]
