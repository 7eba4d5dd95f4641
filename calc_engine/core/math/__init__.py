"""
Core math modules for calc-engine

Pure numeric transforms: parsing and display rounding, unit conversion,
compound-interest projection and its inverse solves.
"""

# Numerical Safeguards
from calc_engine.core.math.numerical_safeguards import (
    # Epsilon constants
    DISPLAY_SIGNIFICANT_DIGITS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf checks
    is_close,
    is_valid_float,
    # Parsing
    parse_count,
    parse_number,
    # Display rounding
    round_half_away,
    round_to_whole,
    # Percent <-> fraction
    fraction_to_percent,
    percent_to_fraction,
    # Validation
    validate_finite,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# Conversion
from calc_engine.core.math.conversion import (
    CONVERSION_DECIMAL_PLACES,
    convert,
    convert_request,
    convert_value,
)

# Compounding
from calc_engine.core.math.compounding import (
    RATE_DECIMAL_PLACES,
    RATE_DOMAIN_FLOOR,
    build_schedule,
    cumulative_return_rate,
    growth_factor,
    period_result,
    project,
    solve_required_capital,
    solve_required_rate,
    validate_period_count,
    validate_rate,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "DISPLAY_SIGNIFICANT_DIGITS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf checks
    "is_close",
    "is_valid_float",
    # Numerical Safeguards — Parsing
    "parse_count",
    "parse_number",
    # Numerical Safeguards — Display rounding
    "round_half_away",
    "round_to_whole",
    # Numerical Safeguards — Percent <-> fraction
    "fraction_to_percent",
    "percent_to_fraction",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    # Conversion
    "CONVERSION_DECIMAL_PLACES",
    "convert",
    "convert_request",
    "convert_value",
    # Compounding
    "RATE_DECIMAL_PLACES",
    "RATE_DOMAIN_FLOOR",
    "build_schedule",
    "cumulative_return_rate",
    "growth_factor",
    "period_result",
    "project",
    "solve_required_capital",
    "solve_required_rate",
    "validate_period_count",
    "validate_rate",
]
