"""
Tests for unit conversion through the base unit

Checked properties:
1. Concrete conversions (km² → m², identity, Korean units)
2. Identity: convert(m, A, A) == m exactly
3. Round trip A → B → A within 1e-9 relative
4. Monotonicity in the magnitude
5. Error taxonomy: InvalidInput / UnknownUnit
"""

import itertools

import pytest

from calc_engine.core.domain.conversion import ConversionRequest
from calc_engine.core.domain.units import (
    AreaUnit,
    WeightUnit,
    unit_factor,
)
from calc_engine.core.errors import InvalidInput, UnknownUnit
from calc_engine.core.math.conversion import (
    CONVERSION_DECIMAL_PLACES,
    convert,
    convert_request,
    convert_value,
)

AREA_PAIRS = list(itertools.product(AreaUnit, repeat=2))
WEIGHT_PAIRS = list(itertools.product(WeightUnit, repeat=2))
MAGNITUDES = [0.0, 1.0, 123.456, 1e6]
ASCENDING_PAIRS = [
    (a, b) for a, b in AREA_PAIRS + WEIGHT_PAIRS if unit_factor(a) < unit_factor(b)
]


# =============================================================================
# CONCRETE SCENARIOS
# =============================================================================


class TestConvertScenarios:
    """Concrete conversions"""

    def test_square_kilometer_to_square_meter(self):
        """1 km² = 1,000,000.0000 m²"""
        result = convert(1.0, AreaUnit.SQUARE_KILOMETER, AreaUnit.SQUARE_METER)
        assert result.value == 1_000_000.0
        assert result.value_rounded == 1_000_000.0
        assert result.decimal_places == CONVERSION_DECIMAL_PLACES == 4

    def test_base_unit_to_itself(self):
        """100 m² → m² = 100.0000"""
        result = convert(100.0, AreaUnit.SQUARE_METER, AreaUnit.SQUARE_METER)
        assert result.value == 100.0
        assert result.value_rounded == 100.0

    def test_korean_area_units(self):
        assert convert_value(1.0, AreaUnit.PYEONG, AreaUnit.SQUARE_METER) == 3.306
        assert convert_value(1.0, AreaUnit.HECTARE, AreaUnit.ARE) == 100.0
        assert convert_value(3.306, AreaUnit.SQUARE_METER, AreaUnit.PYEONG) == pytest.approx(1.0)

    def test_korean_weight_units(self):
        assert convert_value(1.0, WeightUnit.GEUN, WeightUnit.DON) == 160.0
        assert convert_value(1.0, WeightUnit.GWAN, WeightUnit.KILOGRAM) == 3.75
        assert convert_value(1.0, WeightUnit.KILOGRAM, WeightUnit.GRAM) == 1000.0

    def test_small_result_rounds_to_zero_for_display(self):
        """Display value is rounded, the authoritative value is not"""
        result = convert(1.0, AreaUnit.SQUARE_METER, AreaUnit.SQUARE_KILOMETER)
        assert result.value == pytest.approx(1e-6)
        assert result.value_rounded == 0.0

    def test_custom_decimal_places(self):
        result = convert(1.0, AreaUnit.SQUARE_FOOT, AreaUnit.SQUARE_METER, decimal_places=2)
        assert result.value == 0.092903
        assert result.value_rounded == 0.09

    def test_string_magnitude(self):
        """Numeric strings are validated by the engine"""
        result = convert("1,000", AreaUnit.ARE, AreaUnit.HECTARE)
        assert result.magnitude == 1000.0
        assert result.value == 10.0

    def test_summary(self):
        result = convert(1.0, AreaUnit.SQUARE_KILOMETER, AreaUnit.SQUARE_METER)
        assert result.summary() == "1 제곱킬로미터 (km²) = 1000000.0000 제곱미터 (m²)"

    def test_summary_fractional_magnitude(self):
        result = convert(2.5, WeightUnit.KILOGRAM, WeightUnit.GRAM)
        assert result.summary() == "2.5 킬로그램 (kg) = 2500.0000 그램 (g)"

    def test_convert_request(self):
        """A validated request converts the same way as convert"""
        request = ConversionRequest(magnitude=2.0, from_unit="py", to_unit="m2")
        result = convert_request(request)
        assert result.value == pytest.approx(6.612)
        assert result.value_rounded == 6.612
        assert result == convert(2.0, AreaUnit.PYEONG, AreaUnit.SQUARE_METER)


# =============================================================================
# PROPERTIES
# =============================================================================


class TestConvertProperties:
    """Identity, round trip, monotonicity"""

    @pytest.mark.parametrize("unit", list(AreaUnit) + list(WeightUnit))
    @pytest.mark.parametrize("magnitude", MAGNITUDES + [0.1, 7.77777])
    def test_identity_exact(self, unit, magnitude):
        assert convert_value(magnitude, unit, unit) == magnitude

    @pytest.mark.parametrize("from_unit,to_unit", AREA_PAIRS + WEIGHT_PAIRS)
    def test_round_trip(self, from_unit, to_unit):
        for magnitude in MAGNITUDES:
            there = convert_value(magnitude, from_unit, to_unit)
            back = convert_value(there, to_unit, from_unit)
            assert back == pytest.approx(magnitude, rel=1e-9, abs=1e-12)

    @pytest.mark.parametrize("from_unit,to_unit", ASCENDING_PAIRS)
    def test_monotonic_in_magnitude(self, from_unit, to_unit):
        results = [convert_value(m, from_unit, to_unit) for m in (1.0, 2.0, 10.0, 1000.0)]
        assert results == sorted(results)
        assert len(set(results)) == len(results)


# =============================================================================
# ERRORS
# =============================================================================


class TestConvertErrors:
    """InvalidInput and UnknownUnit"""

    @pytest.mark.parametrize("magnitude", ["abc", "", float("nan"), float("inf"), None])
    def test_invalid_magnitude(self, magnitude):
        with pytest.raises(InvalidInput):
            convert(magnitude, AreaUnit.SQUARE_METER, AreaUnit.ARE)

    def test_mixed_quantities(self):
        with pytest.raises(UnknownUnit, match="different quantities"):
            convert(1.0, AreaUnit.SQUARE_METER, WeightUnit.GRAM)

    def test_raw_string_unit(self):
        with pytest.raises(UnknownUnit):
            convert(1.0, "m2", AreaUnit.ARE)  # type: ignore[arg-type]

    def test_unit_checked_before_magnitude(self):
        """Integration bugs surface even with bad user input"""
        with pytest.raises(UnknownUnit):
            convert("abc", "m2", "a")  # type: ignore[arg-type]

    def test_overflow_rejected(self):
        with pytest.raises(InvalidInput, match="out of range"):
            convert(1e305, AreaUnit.SQUARE_KILOMETER, AreaUnit.SQUARE_FOOT)
