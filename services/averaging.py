"""Averaging engine: shares needed to move a position's average cost to a target.

With S shares held at average cost A, buying x more at price P gives a new
average of (S*A + x*P) / (S + x). Solving for a target T:

    x = S * (A - T) / (T - P)

Targets at or below P can never be reached, and targets at or above A need no
purchase. Both are reported as outcomes rather than errors. The engine holds
no state and performs no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from core.constants import DEFAULT_ROUNDING_ULPS
from services.pure_utils import ceil_ignoring_noise, compute_cost, weighted_average


class Feasibility(str, Enum):
    COMPUTED = "computed"
    ALREADY_ACHIEVED = "already_achieved"
    IMPOSSIBLE = "impossible"


@dataclass(frozen=True, slots=True)
class Position:
    """Current holdings and their cost basis."""

    shares: float
    average_cost: float

    @property
    def total_cost(self) -> float:
        return compute_cost(self.shares, self.average_cost)


@dataclass(frozen=True, slots=True)
class Purchase:
    price: float


@dataclass(frozen=True, slots=True)
class Target:
    average_cost: float


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of buying ``shares_to_buy`` more shares at the purchase price."""

    shares_to_buy: int
    total_shares: float
    total_cost: float
    resulting_average: float
    feasibility: Feasibility
    purchase_cost: float = 0.0
    target_average: Optional[float] = None

    @property
    def is_computed(self) -> bool:
        return self.feasibility is Feasibility.COMPUTED


def shares_required(
    position: Position,
    purchase: Purchase,
    target: Target,
    ulps: int = DEFAULT_ROUNDING_ULPS,
) -> tuple[int, Feasibility]:
    """Return the whole number of shares to buy and the feasibility class.

    The share count is rounded up so the resulting average never ends above
    the target.
    """
    s = position.shares
    a = position.average_cost
    p = purchase.price
    t = target.average_cost

    # Order matters when p >= a: such targets are reported as impossible
    if t <= p:
        return 0, Feasibility.IMPOSSIBLE
    if t >= a:
        return 0, Feasibility.ALREADY_ACHIEVED

    raw = s * (a - t) / (t - p)
    return ceil_ignoring_noise(raw, ulps), Feasibility.COMPUTED


def compute_outcome(
    position: Position,
    purchase: Purchase,
    shares_to_buy: int,
    feasibility: Feasibility = Feasibility.COMPUTED,
    target_average: Optional[float] = None,
) -> Outcome:
    purchase_cost = compute_cost(shares_to_buy, purchase.price)
    total_shares = position.shares + shares_to_buy
    total_cost = position.total_cost + purchase_cost
    # (S*A)/S does not always round-trip to A in floats
    if shares_to_buy == 0:
        resulting_average = position.average_cost
    else:
        resulting_average = weighted_average(total_cost, total_shares)
    return Outcome(
        shares_to_buy=shares_to_buy,
        total_shares=total_shares,
        total_cost=total_cost,
        resulting_average=resulting_average,
        feasibility=feasibility,
        purchase_cost=purchase_cost,
        target_average=target_average,
    )


def compute_target(
    position: Position,
    purchase: Purchase,
    target: Target,
    ulps: int = DEFAULT_ROUNDING_ULPS,
) -> Outcome:
    """Compute the outcome of reaching a single target average."""
    shares, feasibility = shares_required(position, purchase, target, ulps=ulps)
    return compute_outcome(
        position,
        purchase,
        shares,
        feasibility=feasibility,
        target_average=target.average_cost,
    )


def compute_table(
    position: Position,
    purchase: Purchase,
    candidate_targets: Iterable[Target],
    ulps: int = DEFAULT_ROUNDING_ULPS,
) -> list[Outcome]:
    """Compute one outcome per candidate target, preserving input order."""
    return [
        compute_target(position, purchase, target, ulps=ulps)
        for target in candidate_targets
    ]
