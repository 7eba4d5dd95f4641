"""Raw form input → validated engine arguments.

Shared by the calculators. Every rejection raises InvalidInput.
"""

from typing import Final

from calc_engine.core.errors import InvalidInput
from calc_engine.core.math.compounding import validate_rate
from calc_engine.core.math.numerical_safeguards import (
    parse_count,
    parse_number,
    percent_to_fraction,
    validate_in_range,
    validate_non_negative,
)

# Text field limits of the forms ("999,999,999,999,999" is 19 characters)
MAX_AMOUNT_LENGTH_DEFAULT: Final[int] = 19
MAX_PERIOD_COUNT_DEFAULT: Final[int] = 99_999


def parse_amount(raw: str | float | int, name: str, max_length: int) -> float:
    """Non-negative money amount; string input is limited to max_length characters."""
    if isinstance(raw, str) and len(raw.strip()) > max_length:
        raise InvalidInput(f"{name} exceeds {max_length} characters: {raw!r}")

    amount = parse_number(raw, name)
    validate_non_negative(amount, name)
    return amount


def parse_periods(raw: str | float | int, max_count: int, name: str = "period_count") -> int:
    """Whole number of periods in [0, max_count]."""
    periods = parse_count(raw, name)
    validate_in_range(periods, name, max_value=max_count)
    return periods


def parse_rate_pct(
    raw: str | float | int,
    min_pct: float | None,
    max_pct: float | None,
    name: str = "rate",
) -> float:
    """Percentage input ("3.5") → validated fraction (0.035)."""
    rate_pct = parse_number(raw, name)
    validate_in_range(rate_pct, name, min_value=min_pct, max_value=max_pct)
    return validate_rate(percent_to_fraction(rate_pct), name)
