from dataclasses import dataclass, field
from typing import Optional

from config.calculator_config import CalculatorConfig, get_config
from core.error_utils import log_and_reraise, log_operation_success, log_validation_failure
from core.errors import ValidationError
from core.validation import RawNumber, validate_calculator_inputs
from infra.logging import get_logger
from services.averaging import (
    Feasibility,
    Outcome,
    Position,
    Purchase,
    Target,
    compute_table,
    compute_target,
)

logger = get_logger(__name__)

_STATUS_MESSAGES = {
    Feasibility.COMPUTED: "Shares to buy calculated",
    Feasibility.ALREADY_ACHIEVED: "Target average already achieved",
    Feasibility.IMPOSSIBLE: "Target average cannot be reached at this price",
}


@dataclass
class CalculationResult:
    success: bool
    message: str
    outcome: Optional[Outcome] = None
    table: list[Outcome] = field(default_factory=list)
    error_field: Optional[str] = None
    buy_price: Optional[float] = None


class CalculatorService:
    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or get_config()

    def candidate_targets(self) -> list[Target]:
        return [Target(level) for level in self.config.candidate_targets]

    def calculate(
        self,
        current_shares: RawNumber,
        current_average: RawNumber,
        buy_price: RawNumber,
        target_average: RawNumber,
    ) -> CalculationResult:
        """Validate raw form values and compute the target outcome and comparison table."""
        try:
            inputs = validate_calculator_inputs(
                current_shares, current_average, buy_price, target_average
            )
        except ValidationError as e:
            log_validation_failure(logger, e, "calculate")
            return CalculationResult(False, str(e), error_field=e.field)

        position = Position(shares=inputs.current_shares, average_cost=inputs.current_average)
        purchase = Purchase(price=inputs.buy_price)
        ulps = self.config.rounding_ulps

        try:
            outcome = compute_target(
                position, purchase, Target(inputs.target_average), ulps=ulps
            )
            table = compute_table(position, purchase, self.candidate_targets(), ulps=ulps)
        except Exception as e:
            log_and_reraise(
                logger, e, "calculate",
                current_shares=inputs.current_shares,
                current_average=inputs.current_average,
                buy_price=inputs.buy_price,
                target_average=inputs.target_average,
            )

        log_operation_success(
            logger, "calculate",
            shares_to_buy=outcome.shares_to_buy,
            feasibility=outcome.feasibility.value,
            table_rows=len(table),
        )
        return CalculationResult(
            True,
            _STATUS_MESSAGES[outcome.feasibility],
            outcome=outcome,
            table=table,
            buy_price=inputs.buy_price,
        )
