"""Required capital calculator

Principal needed today to reach a target amount after N periods at a fixed
periodic rate (retirement "capital" form).
"""

from dataclasses import dataclass

from calc_engine.calculators._inputs import (
    MAX_AMOUNT_LENGTH_DEFAULT,
    MAX_PERIOD_COUNT_DEFAULT,
    parse_amount,
    parse_periods,
    parse_rate_pct,
)
from calc_engine.core.errors import CalculationError, ErrorKind
from calc_engine.core.math.compounding import solve_required_capital
from calc_engine.core.math.numerical_safeguards import round_to_whole
from calc_engine.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RequiredCapitalResult:
    """Result of a required-capital evaluation."""

    ok: bool
    error_kind: ErrorKind | None

    capital: float | None
    capital_rounded: int | None  # whole currency units

    details: str


@dataclass(frozen=True)
class RequiredCapitalConfig:
    """Required-capital calculator configuration."""

    max_amount_length: int = MAX_AMOUNT_LENGTH_DEFAULT
    max_period_count: int = MAX_PERIOD_COUNT_DEFAULT
    min_rate_pct: float | None = None
    max_rate_pct: float | None = None


class RequiredCapitalCalculator:
    """Inverse solve for the principal from raw form input."""

    def __init__(self, config: RequiredCapitalConfig | None = None):
        self.config = config or RequiredCapitalConfig()

    def evaluate(
        self,
        raw_target: str | float,
        raw_rate_pct: str | float,
        raw_periods: str | int,
    ) -> RequiredCapitalResult:
        """Solve target / (1 + r)^N."""
        try:
            target = parse_amount(raw_target, "target_amount", self.config.max_amount_length)
            periodic_rate = parse_rate_pct(
                raw_rate_pct, self.config.min_rate_pct, self.config.max_rate_pct
            )
            periods = parse_periods(raw_periods, self.config.max_period_count)

            capital = solve_required_capital(target, periodic_rate, periods)
        except CalculationError as e:
            logger.info("required_capital_rejected", error_kind=e.kind.value, details=str(e))
            return RequiredCapitalResult(
                ok=False,
                error_kind=e.kind,
                capital=None,
                capital_rounded=None,
                details=str(e),
            )

        capital_rounded = round_to_whole(capital)
        logger.debug("required_capital_evaluated", period_count=periods)

        return RequiredCapitalResult(
            ok=True,
            error_kind=None,
            capital=capital,
            capital_rounded=capital_rounded,
            details=f"{capital_rounded} required",
        )
