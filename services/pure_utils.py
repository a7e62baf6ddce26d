"""Pure utility helpers extracted from service modules for easier unit testing."""
from __future__ import annotations

import math


def compute_cost(shares: float, price: float) -> float:
    return float(shares) * float(price)


def weighted_average(total_cost: float, total_shares: float) -> float:
    return float(total_cost) / float(total_shares)


def ceil_ignoring_noise(value: float, ulps: int) -> int:
    """Round up to a whole number, ignoring float noise just above an integer.

    A value at most ``ulps`` units in the last place above an integer rounds
    to that integer. Anything further above rounds up. Negative inputs clamp
    to zero.
    """
    value = max(0.0, float(value))
    slack = ulps * math.ulp(value)
    return max(0, math.ceil(value - slack))
