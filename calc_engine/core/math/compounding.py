"""
Compounding — Compound-Interest Projection & Inverse Solves

Forward projection of a principal over N periods at a fixed periodic rate,
plus the two closed-form inversions used by the retirement calculators.

FORMULAS:
    amount(i)      = principal × (1 + r)^i              i = 1..N
    interest(i)    = amount(i) − principal
    return_rate(i) = interest(i) / principal × 100      (cumulative, %)

    required capital: principal = target / (1 + r)^N
    required rate:    r = (target / principal)^(1/N) − 1

CRITICAL INVARIANTS:
1. Every period is computed from the closed-form exponential; display
   rounding is never fed back into the next period (no drift)
2. principal == 0 → return_rate is None (not applicable), never NaN/Inf
3. period_count == 0 → empty schedule, not an error
4. Domain: r > -1 (growth factor must stay positive)
5. Overflow is reported as InvalidInput, never as Inf

The cumulative return rate is measured against the original principal, not
period over period.
"""

from typing import Final

from calc_engine.core.domain.projection import (
    FinancialInputs,
    PeriodResult,
    ProjectionSchedule,
)
from calc_engine.core.errors import InvalidInput, UndefinedResult
from calc_engine.core.math.numerical_safeguards import (
    is_valid_float,
    round_half_away,
    round_to_whole,
    validate_finite,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# PARAMETERS
# =============================================================================

# Domain floor: periodic_rate must be strictly greater than this
RATE_DOMAIN_FLOOR: Final[float] = -1.0

# Display precision of the cumulative return rate (percent)
RATE_DECIMAL_PLACES: Final[int] = 2


# =============================================================================
# VALIDATION
# =============================================================================


def validate_rate(rate: float, name: str = "periodic_rate") -> float:
    """
    Check a periodic rate against the compounding domain.

    Args:
        rate: Rate as a fraction (0.035 for 3.5%)
        name: Parameter name for the error message

    Returns:
        rate, unchanged

    Raises:
        InvalidInput: rate is NaN/Inf or rate <= -1

    Examples:
        >>> validate_rate(0.035)
        0.035
        >>> validate_rate(-0.5)
        -0.5
    """
    validate_finite(rate, name)

    if rate <= RATE_DOMAIN_FLOOR:
        raise InvalidInput(
            f"{name} must be > {RATE_DOMAIN_FLOOR} (growth factor must stay positive), got {rate}"
        )

    return rate


def validate_period_count(period_count: int, name: str = "period_count") -> int:
    """
    Check that a period count is a non-negative integer.

    Raises:
        InvalidInput: bool, non-integer or negative count
    """
    if isinstance(period_count, bool) or not isinstance(period_count, int):
        raise InvalidInput(f"{name} must be an integer, got {period_count!r}")

    validate_non_negative(period_count, name)
    return period_count


# =============================================================================
# PRIMITIVES
# =============================================================================


def growth_factor(periodic_rate: float, periods: int) -> float:
    """
    (1 + r)^periods.

    Raises:
        InvalidInput: result overflows float range

    Examples:
        >>> growth_factor(0.0, 10)
        1.0
        >>> growth_factor(0.1, 2)
        1.2100000000000002
    """
    try:
        factor = (1.0 + periodic_rate) ** periods
    except OverflowError:
        raise InvalidInput(
            f"growth factor overflows for rate={periodic_rate}, periods={periods}"
        ) from None

    if not is_valid_float(factor):
        raise InvalidInput(f"growth factor overflows for rate={periodic_rate}, periods={periods}")

    return factor


def cumulative_return_rate(cumulative_interest: float, principal: float) -> float:
    """
    Cumulative interest as a percentage of the original principal.

    Args:
        cumulative_interest: amount(i) - principal
        principal: Original principal

    Returns:
        Percentage (unrounded), e.g. 3.5 for 3.5%

    Raises:
        UndefinedResult: principal is zero

    Examples:
        >>> cumulative_return_rate(350_000.0, 10_000_000.0)
        3.5
    """
    if principal == 0:
        raise UndefinedResult("cumulative return rate is undefined for zero principal")

    return cumulative_interest / principal * 100.0


def period_result(principal: float, periodic_rate: float, period: int) -> PeriodResult:
    """
    Compute one schedule row from the closed form.

    Args:
        principal: Validated principal (>= 0)
        periodic_rate: Validated rate (> -1)
        period: 1-based period index

    Returns:
        PeriodResult with unrounded and display values
    """
    if principal == 0:
        # Zero principal stays zero for any rate and horizon
        amount = 0.0
    else:
        amount = principal * growth_factor(periodic_rate, period)
    if not is_valid_float(amount):
        raise InvalidInput(f"accumulated amount overflows at period {period}")

    interest = amount - principal

    if principal > 0:
        rate_pct = cumulative_return_rate(interest, principal)
        rate_pct_rounded = round_half_away(rate_pct, RATE_DECIMAL_PLACES)
    else:
        # Rate not applicable: reported as None, never NaN
        rate_pct = None
        rate_pct_rounded = None

    return PeriodResult(
        period=period,
        accumulated_amount=amount,
        accumulated_amount_rounded=round_to_whole(amount),
        cumulative_interest=interest,
        cumulative_interest_rounded=round_to_whole(interest),
        cumulative_return_rate=rate_pct,
        cumulative_return_rate_rounded=rate_pct_rounded,
    )


# =============================================================================
# FORWARD PROJECTION
# =============================================================================


def project(principal: float, periodic_rate: float, period_count: int) -> list[PeriodResult]:
    """
    Compound-interest schedule for periods 1..period_count.

    Args:
        principal: Starting capital (>= 0)
        periodic_rate: Growth per period as a fraction (> -1)
        period_count: Number of periods (>= 0)

    Returns:
        Ordered list of PeriodResult, length == period_count

    Raises:
        InvalidInput: out-of-domain input or overflow

    Examples:
        >>> rows = project(10_000_000.0, 0.035, 3)
        >>> [row.accumulated_amount_rounded for row in rows]
        [10350000, 10712250, 11087179]
        >>> rows[-1].cumulative_return_rate_rounded
        10.87
        >>> project(100.0, 0.05, 0)
        []
    """
    validate_non_negative(principal, "principal")
    validate_rate(periodic_rate)
    validate_period_count(period_count)

    return [
        period_result(principal, periodic_rate, period)
        for period in range(1, period_count + 1)
    ]


def build_schedule(inputs: FinancialInputs) -> ProjectionSchedule:
    """
    Projection wrapped together with its inputs.

    Examples:
        >>> schedule = build_schedule(
        ...     FinancialInputs(principal=100.0, periodic_rate=0.1, period_count=2)
        ... )
        >>> schedule.final_period.accumulated_amount_rounded
        121
    """
    periods = project(inputs.principal, inputs.periodic_rate, inputs.period_count)
    return ProjectionSchedule(inputs=inputs, periods=tuple(periods))


# =============================================================================
# INVERSE SOLVES
# =============================================================================


def solve_required_capital(
    target_amount: float,
    periodic_rate: float,
    period_count: int,
) -> float:
    """
    Principal needed to reach target_amount after period_count periods.

    Closed form: principal = target / (1 + r)^N. The forward function is
    monotonic in the principal, so no iteration is needed.

    Args:
        target_amount: Desired final amount (>= 0)
        periodic_rate: Growth per period as a fraction (> -1)
        period_count: Number of periods (>= 0); 0 returns target_amount

    Returns:
        Required principal (unrounded)

    Raises:
        InvalidInput: out-of-domain input or overflow

    Examples:
        >>> round(solve_required_capital(121.0, 0.1, 2), 6)
        100.0
    """
    validate_non_negative(target_amount, "target_amount")
    validate_rate(periodic_rate)
    validate_period_count(period_count)

    factor = growth_factor(periodic_rate, period_count)
    if factor == 0:
        raise InvalidInput(
            f"growth factor underflows for rate={periodic_rate}, periods={period_count}"
        )

    principal = target_amount / factor

    if not is_valid_float(principal):
        raise InvalidInput(
            f"required capital overflows for target={target_amount}, rate={periodic_rate}"
        )

    return principal


def solve_required_rate(principal: float, target_amount: float, period_count: int) -> float:
    """
    Periodic rate needed to grow principal into target_amount.

    Closed form: r = (target / principal)^(1/N) − 1.

    Args:
        principal: Starting capital (> 0)
        target_amount: Desired final amount (> 0)
        period_count: Number of periods (> 0)

    Returns:
        Required periodic rate as a fraction (unrounded)

    Raises:
        InvalidInput: principal, target_amount or period_count not positive

    Examples:
        >>> round(solve_required_rate(10_000_000.0, 11_000_000.0, 2), 4)
        0.0488
    """
    validate_positive(principal, "principal")
    validate_positive(target_amount, "target_amount")
    validate_period_count(period_count)
    if period_count == 0:
        raise InvalidInput("period_count must be positive to solve for a rate, got 0")

    ratio = target_amount / principal
    if not is_valid_float(ratio):
        raise InvalidInput(f"target/principal ratio overflows: {target_amount} / {principal}")

    return ratio ** (1.0 / period_count) - 1.0
