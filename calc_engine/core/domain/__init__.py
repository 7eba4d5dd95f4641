"""
Domain models and value objects.

Contains unit sets with their rate tables, and the immutable value objects
produced by conversions and projections.
"""

from calc_engine.core.domain.conversion import ConversionRequest, ConversionResult
from calc_engine.core.domain.projection import (
    FinancialInputs,
    PeriodResult,
    ProjectionSchedule,
)
from calc_engine.core.domain.units import (
    AREA_RATES,
    RATE_TABLES,
    UNIT_LABELS,
    WEIGHT_RATES,
    AreaUnit,
    Unit,
    WeightUnit,
    base_unit,
    parse_unit,
    rate_table,
    unit_factor,
    unit_label,
    units_of,
)

__all__ = [
    # Units module
    "AreaUnit",
    "WeightUnit",
    "Unit",
    "AREA_RATES",
    "WEIGHT_RATES",
    "RATE_TABLES",
    "UNIT_LABELS",
    "rate_table",
    "unit_factor",
    "unit_label",
    "base_unit",
    "units_of",
    "parse_unit",
    # Conversion models
    "ConversionRequest",
    "ConversionResult",
    # Projection models
    "FinancialInputs",
    "PeriodResult",
    "ProjectionSchedule",
]
