"""
Conversion — Unit conversion through the base unit

FORMULA:
    base_value = magnitude × factor(from_unit)
    result     = base_value / factor(to_unit)

Routing through the base unit keeps each rate table linear in the number of
units and makes A → B → A return the original value up to float rounding.

CRITICAL INVARIANTS:
1. convert(m, A, A) == m exactly (no multiply/divide round trip)
2. Units of different quantities are never mixed (UnknownUnit)
3. NaN/Inf magnitudes are rejected (InvalidInput), never propagated
"""

from typing import Final

from calc_engine.core.domain.conversion import ConversionRequest, ConversionResult
from calc_engine.core.domain.units import Unit, unit_factor
from calc_engine.core.errors import InvalidInput, UnknownUnit
from calc_engine.core.math.numerical_safeguards import (
    is_valid_float,
    parse_number,
    round_half_away,
)

# Display precision of converted values
CONVERSION_DECIMAL_PLACES: Final[int] = 4


def convert_value(magnitude: float, from_unit: Unit, to_unit: Unit) -> float:
    """
    Convert a magnitude and return the unrounded value only.

    Args:
        magnitude: Finite magnitude in from_unit (number or numeric string)
        from_unit: Source unit
        to_unit: Target unit of the same quantity

    Returns:
        Magnitude expressed in to_unit (unrounded)

    Raises:
        InvalidInput: magnitude is non-numeric, NaN/Inf, or the result overflows
        UnknownUnit: a unit is unregistered or the units belong to different quantities

    Examples:
        >>> from calc_engine.core.domain.units import AreaUnit
        >>> convert_value(1.0, AreaUnit.SQUARE_KILOMETER, AreaUnit.SQUARE_METER)
        1000000.0
    """
    from_factor = unit_factor(from_unit)
    to_factor = unit_factor(to_unit)

    if type(from_unit) is not type(to_unit):
        raise UnknownUnit(
            f"Cannot convert {from_unit!r} to {to_unit!r}: units belong to different quantities"
        )

    value = parse_number(magnitude, "magnitude")

    if from_unit is to_unit:
        return value

    base_value = value * from_factor
    result = base_value / to_factor

    if not is_valid_float(result):
        raise InvalidInput(f"magnitude {value!r} is out of range for {to_unit.value}")

    return result


def convert(
    magnitude: float,
    from_unit: Unit,
    to_unit: Unit,
    decimal_places: int = CONVERSION_DECIMAL_PLACES,
) -> ConversionResult:
    """
    Convert a magnitude between two units of the same quantity.

    Args:
        magnitude: Finite magnitude in from_unit (number or numeric string)
        from_unit: Source unit
        to_unit: Target unit of the same quantity
        decimal_places: Display precision of value_rounded (default: 4)

    Returns:
        ConversionResult with both unrounded and display values

    Raises:
        InvalidInput: magnitude is non-numeric, NaN/Inf, or the result overflows
        UnknownUnit: a unit is unregistered or the units belong to different quantities

    Examples:
        >>> from calc_engine.core.domain.units import AreaUnit
        >>> result = convert(100.0, AreaUnit.SQUARE_METER, AreaUnit.SQUARE_METER)
        >>> result.value_rounded
        100.0
    """
    value = convert_value(magnitude, from_unit, to_unit)
    request = ConversionRequest(
        magnitude=parse_number(magnitude, "magnitude"),
        from_unit=from_unit,
        to_unit=to_unit,
    )

    return _conversion_result(request, value, decimal_places)


def convert_request(
    request: ConversionRequest,
    decimal_places: int = CONVERSION_DECIMAL_PLACES,
) -> ConversionResult:
    """
    Convert an already validated ConversionRequest.

    Raises:
        InvalidInput: the result overflows

    Examples:
        >>> request = ConversionRequest(magnitude=1.0, from_unit="km2", to_unit="m2")
        >>> convert_request(request).value
        1000000.0
    """
    value = convert_value(request.magnitude, request.from_unit, request.to_unit)
    return _conversion_result(request, value, decimal_places)


def _conversion_result(
    request: ConversionRequest, value: float, decimal_places: int
) -> ConversionResult:
    return ConversionResult(
        magnitude=request.magnitude,
        from_unit=request.from_unit,
        to_unit=request.to_unit,
        value=value,
        value_rounded=round_half_away(value, decimal_places),
        decimal_places=decimal_places,
    )
