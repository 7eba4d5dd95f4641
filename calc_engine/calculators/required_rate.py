"""Required rate calculator

Periodic rate needed to grow a principal into a target amount over N
periods (retirement "rate" form).
"""

from dataclasses import dataclass

from calc_engine.calculators._inputs import (
    MAX_AMOUNT_LENGTH_DEFAULT,
    MAX_PERIOD_COUNT_DEFAULT,
    parse_amount,
    parse_periods,
)
from calc_engine.core.errors import CalculationError, ErrorKind
from calc_engine.core.math.compounding import RATE_DECIMAL_PLACES, solve_required_rate
from calc_engine.core.math.numerical_safeguards import fraction_to_percent, round_half_away
from calc_engine.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RequiredRateResult:
    """Result of a required-rate evaluation.

    periodic_rate is a fraction; rate_pct / rate_pct_rounded are for display.
    """

    ok: bool
    error_kind: ErrorKind | None

    periodic_rate: float | None
    rate_pct: float | None
    rate_pct_rounded: float | None

    details: str


@dataclass(frozen=True)
class RequiredRateConfig:
    """Required-rate calculator configuration."""

    max_amount_length: int = MAX_AMOUNT_LENGTH_DEFAULT
    max_period_count: int = MAX_PERIOD_COUNT_DEFAULT
    rate_decimal_places: int = RATE_DECIMAL_PLACES


class RequiredRateCalculator:
    """Inverse solve for the periodic rate from raw form input."""

    def __init__(self, config: RequiredRateConfig | None = None):
        self.config = config or RequiredRateConfig()

    def evaluate(
        self,
        raw_principal: str | float,
        raw_target: str | float,
        raw_periods: str | int,
    ) -> RequiredRateResult:
        """Solve (target / principal)^(1/N) - 1.

        Principal, target and periods must all be positive.
        """
        try:
            principal = parse_amount(raw_principal, "principal", self.config.max_amount_length)
            target = parse_amount(raw_target, "target_amount", self.config.max_amount_length)
            periods = parse_periods(raw_periods, self.config.max_period_count)

            periodic_rate = solve_required_rate(principal, target, periods)
        except CalculationError as e:
            logger.info("required_rate_rejected", error_kind=e.kind.value, details=str(e))
            return RequiredRateResult(
                ok=False,
                error_kind=e.kind,
                periodic_rate=None,
                rate_pct=None,
                rate_pct_rounded=None,
                details=str(e),
            )

        rate_pct = fraction_to_percent(periodic_rate)
        rate_pct_rounded = round_half_away(rate_pct, self.config.rate_decimal_places)
        logger.debug("required_rate_evaluated", period_count=periods)

        return RequiredRateResult(
            ok=True,
            error_kind=None,
            periodic_rate=periodic_rate,
            rate_pct=rate_pct,
            rate_pct_rounded=rate_pct_rounded,
            details=f"{rate_pct_rounded:.{self.config.rate_decimal_places}f}% per period",
        )
