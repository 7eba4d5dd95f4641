"""
Units — Closed unit sets and their conversion rate tables

Each physical quantity has:
- a closed Enum of units (AreaUnit, WeightUnit)
- an immutable rate table: unit → how many base units equal one of this unit
- a Korean display label per unit

Conversions are routed through the base unit (factor == 1), so each table
is linear in the number of units.

INVARIANTS (checked at import time):
1. Exactly one unit per quantity has factor 1 (the base unit)
2. All factors are strictly positive finite numbers
3. Every enum member has a factor and a label
"""

import math
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from calc_engine.core.errors import UnknownUnit


# =============================================================================
# UNIT ENUMS
# =============================================================================


class AreaUnit(str, Enum):
    """Area units (base: square meter)."""

    SQUARE_METER = "m2"
    ARE = "a"
    HECTARE = "ha"
    SQUARE_KILOMETER = "km2"
    SQUARE_FOOT = "ft2"
    SQUARE_YARD = "yd2"
    ACRE = "ac"
    PYEONG = "py"
    DANBO = "danbo"
    JEONGBO = "jeongbo"


class WeightUnit(str, Enum):
    """Weight units (base: gram)."""

    MILLIGRAM = "mg"
    GRAM = "g"
    KILOGRAM = "kg"
    TONNE = "t"
    POUND = "lb"
    OUNCE = "oz"
    DON = "don"
    NYANG = "nyang"
    GEUN = "geun"
    GWAN = "gwan"


Unit = AreaUnit | WeightUnit


# =============================================================================
# RATE TABLES
# =============================================================================

AREA_RATES: Final[Mapping[AreaUnit, float]] = MappingProxyType({
    AreaUnit.SQUARE_METER: 1.0,
    AreaUnit.ARE: 100.0,
    AreaUnit.HECTARE: 10_000.0,
    AreaUnit.SQUARE_KILOMETER: 1e6,
    AreaUnit.SQUARE_FOOT: 0.092903,
    AreaUnit.SQUARE_YARD: 0.836127,
    AreaUnit.ACRE: 4046.86,
    AreaUnit.PYEONG: 3.306,
    AreaUnit.DANBO: 35.58,
    AreaUnit.JEONGBO: 356.0,
})

WEIGHT_RATES: Final[Mapping[WeightUnit, float]] = MappingProxyType({
    WeightUnit.MILLIGRAM: 0.001,
    WeightUnit.GRAM: 1.0,
    WeightUnit.KILOGRAM: 1000.0,
    WeightUnit.TONNE: 1e6,
    WeightUnit.POUND: 453.59237,
    WeightUnit.OUNCE: 28.349523125,
    WeightUnit.DON: 3.75,
    WeightUnit.NYANG: 37.5,
    WeightUnit.GEUN: 600.0,
    WeightUnit.GWAN: 3750.0,
})

# Registry: unit enum type → its rate table
RATE_TABLES: Final[Mapping[type, Mapping]] = MappingProxyType({
    AreaUnit: AREA_RATES,
    WeightUnit: WEIGHT_RATES,
})


# =============================================================================
# KOREAN LABELS
# =============================================================================

UNIT_LABELS: Final[Mapping[Unit, str]] = MappingProxyType({
    AreaUnit.SQUARE_METER: "제곱미터 (m²)",
    AreaUnit.ARE: "아르 (a)",
    AreaUnit.HECTARE: "헥타르 (ha)",
    AreaUnit.SQUARE_KILOMETER: "제곱킬로미터 (km²)",
    AreaUnit.SQUARE_FOOT: "제곱피트 (ft²)",
    AreaUnit.SQUARE_YARD: "제곱야드 (yd²)",
    AreaUnit.ACRE: "에이커 (ac)",
    AreaUnit.PYEONG: "평",
    AreaUnit.DANBO: "단보",
    AreaUnit.JEONGBO: "정보",
    WeightUnit.MILLIGRAM: "밀리그램 (mg)",
    WeightUnit.GRAM: "그램 (g)",
    WeightUnit.KILOGRAM: "킬로그램 (kg)",
    WeightUnit.TONNE: "톤 (t)",
    WeightUnit.POUND: "파운드 (lb)",
    WeightUnit.OUNCE: "온스 (oz)",
    WeightUnit.DON: "돈",
    WeightUnit.NYANG: "냥",
    WeightUnit.GEUN: "근",
    WeightUnit.GWAN: "관",
})


# =============================================================================
# LOOKUPS
# =============================================================================


def rate_table(unit_type: type) -> Mapping:
    """
    Rate table for a unit enum type.

    Raises:
        UnknownUnit: if unit_type is not a registered quantity
    """
    try:
        return RATE_TABLES[unit_type]
    except (KeyError, TypeError):
        raise UnknownUnit(f"Unregistered unit type: {unit_type!r}") from None


def unit_factor(unit: Unit) -> float:
    """
    Conversion factor: how many base units equal one `unit`.

    Raises:
        UnknownUnit: if unit is not a member of a registered unit set

    Examples:
        >>> unit_factor(AreaUnit.HECTARE)
        10000.0
    """
    table = rate_table(type(unit))
    return table[unit]


def unit_label(unit: Unit) -> str:
    """Korean display label for a unit."""
    unit_factor(unit)  # fail fast on unregistered units
    return UNIT_LABELS[unit]


def base_unit(unit_type: type) -> Unit:
    """The unit with factor 1 for a quantity."""
    table = rate_table(unit_type)
    return next(unit for unit, factor in table.items() if factor == 1.0)


def units_of(unit_type: type) -> tuple:
    """All units of a quantity, in declaration order."""
    rate_table(unit_type)
    return tuple(unit_type)


def parse_unit(unit_type: type, identifier: str | Unit) -> Unit:
    """
    Resolve a unit identifier ("km2") into the enum member.

    This is the single validation boundary for unit identifiers coming
    from the UI: anything outside the registered set fails fast.

    Args:
        unit_type: AreaUnit or WeightUnit
        identifier: String identifier or an enum member

    Returns:
        Enum member of unit_type

    Raises:
        UnknownUnit: identifier is not in the unit set

    Examples:
        >>> parse_unit(AreaUnit, "km2")
        <AreaUnit.SQUARE_KILOMETER: 'km2'>
    """
    rate_table(unit_type)

    if isinstance(identifier, Enum) and not isinstance(identifier, unit_type):
        raise UnknownUnit(
            f"{identifier!r} is not a {unit_type.__name__} "
            f"(mixed quantities cannot be converted)"
        )

    try:
        return unit_type(identifier)
    except ValueError:
        known = ", ".join(unit.value for unit in unit_type)
        raise UnknownUnit(
            f"Unknown {unit_type.__name__} {identifier!r} (known: {known})"
        ) from None


# =============================================================================
# TABLE SANITY
# =============================================================================


def _check_rate_table(unit_type: type, table: Mapping) -> None:
    missing = [unit for unit in unit_type if unit not in table]
    if missing:
        raise RuntimeError(f"{unit_type.__name__} rate table missing {missing}")

    for unit, factor in table.items():
        if not (math.isfinite(factor) and factor > 0):
            raise RuntimeError(f"{unit!r} factor must be positive finite, got {factor}")
        if unit not in UNIT_LABELS:
            raise RuntimeError(f"{unit!r} has no display label")

    base_units = [unit for unit, factor in table.items() if factor == 1.0]
    if len(base_units) != 1:
        raise RuntimeError(
            f"{unit_type.__name__} must have exactly one base unit, got {base_units}"
        )


for _unit_type, _table in RATE_TABLES.items():
    _check_rate_table(_unit_type, _table)
