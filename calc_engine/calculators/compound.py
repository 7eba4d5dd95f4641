"""Compound interest calculator

Validation boundary of the compound-interest form.

Inputs (raw form text):
- principal: money amount, thousands separators allowed ("10,000,000")
- rate: percent per period ("3.5")
- periods: whole number of periods ("3")

Output: CompoundResult carrying a ProjectionSchedule, or an error variant.
"""

from dataclasses import dataclass

from calc_engine.calculators._inputs import (
    MAX_AMOUNT_LENGTH_DEFAULT,
    MAX_PERIOD_COUNT_DEFAULT,
    parse_amount,
    parse_periods,
    parse_rate_pct,
)
from calc_engine.core.domain.projection import FinancialInputs, ProjectionSchedule
from calc_engine.core.errors import CalculationError, ErrorKind
from calc_engine.core.math.compounding import build_schedule
from calc_engine.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CompoundResult:
    """Result of a compound-interest evaluation."""

    ok: bool
    error_kind: ErrorKind | None

    schedule: ProjectionSchedule | None

    # Details
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CompoundConfig:
    """Compound calculator configuration.

    Limits mirror the form's text fields.
    """

    max_principal_length: int = MAX_AMOUNT_LENGTH_DEFAULT
    max_period_count: int = MAX_PERIOD_COUNT_DEFAULT

    # Percent bounds (None = only the compounding domain r > -100% applies)
    min_rate_pct: float | None = None
    max_rate_pct: float | None = None


# =============================================================================
# CALCULATOR
# =============================================================================


class CompoundCalculator:
    """Forward compound-interest projection from raw form input."""

    def __init__(self, config: CompoundConfig | None = None):
        self.config = config or CompoundConfig()

    def evaluate(
        self,
        raw_principal: str | float,
        raw_rate_pct: str | float,
        raw_periods: str | int,
    ) -> CompoundResult:
        """Build the schedule for the given form input.

        Args:
            raw_principal: starting capital
            raw_rate_pct: periodic rate in percent
            raw_periods: number of periods

        Returns:
            CompoundResult (empty schedule for zero periods)
        """
        try:
            inputs = FinancialInputs(
                principal=parse_amount(
                    raw_principal, "principal", self.config.max_principal_length
                ),
                periodic_rate=parse_rate_pct(
                    raw_rate_pct, self.config.min_rate_pct, self.config.max_rate_pct
                ),
                period_count=parse_periods(raw_periods, self.config.max_period_count),
            )
            schedule = build_schedule(inputs)
        except CalculationError as e:
            logger.info("compound_rejected", error_kind=e.kind.value, details=str(e))
            return CompoundResult(
                ok=False,
                error_kind=e.kind,
                schedule=None,
                details=str(e),
            )

        logger.debug(
            "compound_evaluated",
            period_count=inputs.period_count,
            return_rate_applicable=inputs.principal > 0,
        )

        return CompoundResult(
            ok=True,
            error_kind=None,
            schedule=schedule,
            details=f"{len(schedule.periods)} periods",
        )
