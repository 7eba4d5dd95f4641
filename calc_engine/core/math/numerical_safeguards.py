"""
Numerical Safeguards — Parsing, Validation & Display Rounding

Shared leaf utilities for both calculators:
- Parsing raw form input (strings with thousands separators) into floats
- NaN/Inf detection so invalid values never propagate
- Epsilon comparisons for float results
- Half-away-from-zero rounding for display values

CRITICAL INVARIANTS:
1. NaN/Inf never leave this module as a "valid" number
2. Every rejected input raises InvalidInput (never returns a sentinel)
3. Rounding is presentation only; callers keep the unrounded value
4. All operations are deterministic and reproducible
"""

import math
import sys
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final

from calc_engine.core.errors import InvalidInput

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Relative tolerance for float comparisons (round-trip conversions)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Absolute tolerance for float comparisons near zero
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Thousands separator accepted in raw input ("10,000,000")
THOUSANDS_SEPARATOR: Final[str] = ","

# Significant digits a float carries reliably; anything beyond is binary noise
DISPLAY_SIGNIFICANT_DIGITS: Final[int] = sys.float_info.dig


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if finite, False for NaN or Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Compare floats with machine-precision tolerance.

    Algorithm:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# PARSING
# =============================================================================


def parse_number(raw: str | float | int, name: str = "value") -> float:
    """
    Parse raw form input into a finite float.

    Thousands separators and surrounding whitespace are ignored, so
    "10,000,000" parses as 10000000.0. Numeric inputs pass through the
    same finite check.

    Args:
        raw: Raw input (string from a text field, or a number)
        name: Parameter name for the error message

    Returns:
        Parsed finite float

    Raises:
        InvalidInput: empty, non-numeric, NaN or Inf input

    Examples:
        >>> parse_number("10,000,000")
        10000000.0
        >>> parse_number(" 3.5 ")
        3.5
        >>> parse_number("abc")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidInput: ...
    """
    if isinstance(raw, bool):
        raise InvalidInput(f"{name} must be a number, got {raw!r}")

    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip().replace(THOUSANDS_SEPARATOR, "")
        # float() also accepts "1_000"; form input never should
        if not text or "_" in text:
            raise InvalidInput(f"{name} is not a number: {raw!r}")
        try:
            value = float(text)
        except ValueError:
            raise InvalidInput(f"{name} is not a number: {raw!r}") from None
    else:
        raise InvalidInput(f"{name} must be a number or string, got {type(raw).__name__}")

    if not is_valid_float(value):
        raise InvalidInput(f"{name} must be finite (not NaN/Inf), got {raw!r}")

    return value


def parse_count(raw: str | float | int, name: str = "count") -> int:
    """
    Parse raw form input into a non-negative integer.

    Integral floats ("3", "3.0", 3.0) are accepted; fractional values are not.

    Raises:
        InvalidInput: non-numeric, fractional or negative input
    """
    value = parse_number(raw, name)

    if not value.is_integer():
        raise InvalidInput(f"{name} must be a whole number, got {raw!r}")

    count = int(value)
    validate_non_negative(count, name)
    return count


# =============================================================================
# DISPLAY ROUNDING
# =============================================================================


def round_half_away(value: float, places: int) -> float:
    """
    Round to a fixed number of decimal places, half away from zero.

    The float is first read at DISPLAY_SIGNIFICANT_DIGITS significant digits,
    so 2.675 rounds to 2.68 (what the user typed, not its binary neighbour)
    and 11087178.749999998 rounds to 11087179. Values whose integer part
    plus the requested places need more digits than that are read with
    one extra digit, so no integer digit is ever dropped (1e15 + 0.5
    rounds to 1000000000000001).

    Args:
        value: Finite value to round
        places: Number of decimal places (>= 0)

    Returns:
        Rounded value

    Raises:
        InvalidInput: value is NaN/Inf or places is negative

    Examples:
        >>> round_half_away(1234.56785, 4)
        1234.5679
        >>> round_half_away(-0.125, 2)
        -0.13
        >>> round_half_away(2.5, 0)
        3.0
    """
    if places < 0:
        raise InvalidInput(f"places must be non-negative, got {places}")

    validate_finite(value, "value")

    # adjusted() + 1 is the number of integer digits
    digits = max(DISPLAY_SIGNIFICANT_DIGITS, Decimal(repr(value)).adjusted() + places + 2)
    context = Context(prec=digits + 1)

    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(f"{value:.{digits}g}").quantize(
        quantum, rounding=ROUND_HALF_UP, context=context
    )
    return float(rounded)


def round_to_whole(value: float) -> int:
    """
    Round to the nearest whole unit, half away from zero.

    Examples:
        >>> round_to_whole(10350000.4)
        10350000
        >>> round_to_whole(11087178.75)
        11087179
    """
    return int(round_half_away(value, 0))


# =============================================================================
# PERCENT <-> FRACTION
# =============================================================================


def percent_to_fraction(percent: float) -> float:
    """
    Percentage (3.5) → fraction (0.035).

    Rates are fractions everywhere inside the engine; percentages
    only exist at the presentation boundary.
    """
    return percent / 100.0


def fraction_to_percent(fraction: float) -> float:
    """Fraction (0.035) → percentage (3.5)."""
    return fraction * 100.0


# =============================================================================
# VALIDATION
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Validate that a value is a finite real number.

    Raises:
        InvalidInput: if value is not an int/float (bool, str, None), or NaN/Inf
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{name} must be a number, got {value!r}")

    if not is_valid_float(value):
        raise InvalidInput(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Validate that a value is strictly positive.

    Raises:
        InvalidInput: if value <= 0 or NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise InvalidInput(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Validate that a value is non-negative.

    Raises:
        InvalidInput: if value < 0 or NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise InvalidInput(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Validate that a value lies in [min_value, max_value].

    Raises:
        InvalidInput: if value is out of range or NaN/Inf
    """
    validate_finite(value, name)

    if min_value is not None and value < min_value:
        raise InvalidInput(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise InvalidInput(f"{name} must be <= {max_value}, got {value}")
