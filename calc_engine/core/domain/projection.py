"""
Projection — value objects for compound-interest schedules

Immutable Pydantic models. A schedule is produced fresh on every request;
nothing persists between requests.
"""

from pydantic import BaseModel, Field


class FinancialInputs(BaseModel):
    """
    Inputs of a forward projection.

    periodic_rate is a fraction (3.5% → 0.035), never a percentage.
    """

    principal: float = Field(..., ge=0, allow_inf_nan=False, description="Starting capital")
    periodic_rate: float = Field(
        ..., gt=-1, allow_inf_nan=False, description="Growth per period as a fraction"
    )
    period_count: int = Field(..., ge=0, description="Number of compounding periods")

    model_config = {"frozen": True}


class PeriodResult(BaseModel):
    """
    One row of a projection schedule.

    Unrounded fields are authoritative; *_rounded fields are display values
    (whole currency units for money, 2 places for the rate).
    cumulative_return_rate is None when the principal is zero (rate not applicable).
    """

    period: int = Field(..., ge=1, description="1-based period index")

    accumulated_amount: float = Field(..., allow_inf_nan=False)
    accumulated_amount_rounded: int

    cumulative_interest: float = Field(..., allow_inf_nan=False)
    cumulative_interest_rounded: int

    cumulative_return_rate: float | None = Field(..., description="Interest / principal * 100")
    cumulative_return_rate_rounded: float | None

    model_config = {"frozen": True}

    @property
    def return_rate_applicable(self) -> bool:
        return self.cumulative_return_rate is not None


class ProjectionSchedule(BaseModel):
    """Inputs plus the ordered per-period results (length == period_count)."""

    inputs: FinancialInputs
    periods: tuple[PeriodResult, ...] = Field(default=())

    model_config = {"frozen": True}

    @property
    def final_period(self) -> PeriodResult | None:
        """Last row, or None for a zero-period schedule."""
        return self.periods[-1] if self.periods else None
