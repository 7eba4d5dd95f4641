"""
Sanity tests for unit sets and rate tables

Checks:
1. Exactly one base unit per quantity, all factors positive and finite
2. Rate tables are immutable
3. Identifier parsing fails fast outside the registered set
4. Units of different quantities are never mixed
"""

import math

import pytest

from calc_engine.core.domain.units import (
    AREA_RATES,
    RATE_TABLES,
    UNIT_LABELS,
    WEIGHT_RATES,
    AreaUnit,
    WeightUnit,
    base_unit,
    parse_unit,
    rate_table,
    unit_factor,
    unit_label,
    units_of,
)
from calc_engine.core.errors import ErrorKind, UnknownUnit


class TestRateTables:
    """Tests for the rate table invariants"""

    @pytest.mark.parametrize("unit_type", [AreaUnit, WeightUnit])
    def test_exactly_one_base_unit(self, unit_type) -> None:
        """Exactly one unit per quantity has factor 1"""
        table = RATE_TABLES[unit_type]
        assert [u for u, f in table.items() if f == 1.0] == [base_unit(unit_type)]

    @pytest.mark.parametrize("unit_type", [AreaUnit, WeightUnit])
    def test_factors_positive_finite(self, unit_type) -> None:
        for factor in RATE_TABLES[unit_type].values():
            assert math.isfinite(factor)
            assert factor > 0

    @pytest.mark.parametrize("unit_type", [AreaUnit, WeightUnit])
    def test_every_unit_has_factor_and_label(self, unit_type) -> None:
        for unit in unit_type:
            assert unit in RATE_TABLES[unit_type]
            assert UNIT_LABELS[unit]

    def test_base_units(self) -> None:
        assert base_unit(AreaUnit) is AreaUnit.SQUARE_METER
        assert base_unit(WeightUnit) is WeightUnit.GRAM

    def test_known_factors(self) -> None:
        """Factors from the area and weight forms"""
        assert AREA_RATES[AreaUnit.HECTARE] == 10_000.0
        assert AREA_RATES[AreaUnit.SQUARE_KILOMETER] == 1e6
        assert AREA_RATES[AreaUnit.PYEONG] == 3.306
        assert AREA_RATES[AreaUnit.JEONGBO] == 356.0
        assert WEIGHT_RATES[WeightUnit.DON] == 3.75
        assert WEIGHT_RATES[WeightUnit.GEUN] == 600.0
        assert WEIGHT_RATES[WeightUnit.KILOGRAM] == 1000.0

    def test_tables_immutable(self) -> None:
        """Rate tables cannot be mutated"""
        with pytest.raises(TypeError):
            AREA_RATES[AreaUnit.PYEONG] = 3.3  # type: ignore[index]
        with pytest.raises(TypeError):
            RATE_TABLES[str] = {}  # type: ignore[index]


class TestLookups:
    """Tests for factor/label lookups"""

    def test_unit_factor(self) -> None:
        assert unit_factor(AreaUnit.ARE) == 100.0
        assert unit_factor(WeightUnit.TONNE) == 1e6

    def test_unit_label(self) -> None:
        assert unit_label(AreaUnit.SQUARE_METER) == "제곱미터 (m²)"
        assert unit_label(AreaUnit.PYEONG) == "평"
        assert unit_label(WeightUnit.GEUN) == "근"

    def test_plain_string_is_not_a_unit(self) -> None:
        """Raw strings must go through parse_unit first"""
        with pytest.raises(UnknownUnit):
            unit_factor("m2")  # type: ignore[arg-type]

    def test_units_of_preserves_order(self) -> None:
        units = units_of(AreaUnit)
        assert units[0] is AreaUnit.SQUARE_METER
        assert len(units) == 10

    def test_unregistered_unit_type(self) -> None:
        with pytest.raises(UnknownUnit):
            rate_table(int)


class TestParseUnit:
    """Tests for parse_unit"""

    def test_identifiers(self) -> None:
        assert parse_unit(AreaUnit, "km2") is AreaUnit.SQUARE_KILOMETER
        assert parse_unit(WeightUnit, "geun") is WeightUnit.GEUN

    def test_enum_member_passthrough(self) -> None:
        assert parse_unit(AreaUnit, AreaUnit.HECTARE) is AreaUnit.HECTARE

    def test_unknown_identifier(self) -> None:
        """Unknown identifiers fail fast instead of defaulting"""
        with pytest.raises(UnknownUnit, match="known: m2"):
            parse_unit(AreaUnit, "acre")

    def test_identifier_of_other_quantity(self) -> None:
        with pytest.raises(UnknownUnit):
            parse_unit(AreaUnit, "kg")

    def test_member_of_other_quantity(self) -> None:
        with pytest.raises(UnknownUnit, match="mixed quantities"):
            parse_unit(AreaUnit, WeightUnit.GRAM)

    def test_error_kind(self) -> None:
        with pytest.raises(UnknownUnit) as exc_info:
            parse_unit(WeightUnit, "stone")
        assert exc_info.value.kind is ErrorKind.UNKNOWN_UNIT
        assert isinstance(exc_info.value, LookupError)
