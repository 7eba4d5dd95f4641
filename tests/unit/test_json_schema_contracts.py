"""
Tests for JSON Schema Contract Validators

Covers:
- Validity of the schemas themselves
- Engine output passes its contract
- Missing fields, wrong types and unknown units are detected
"""

import pytest
from jsonschema import ValidationError

from calc_engine.core.contracts import (
    ConversionResultValidator,
    ProjectionScheduleValidator,
    SchemaLoader,
    validate_conversion_result,
    validate_projection_schedule,
)
from calc_engine.core.domain import AreaUnit, FinancialInputs, WeightUnit
from calc_engine.core.math import build_schedule, convert


@pytest.fixture
def conversion_payload():
    return convert(1.0, AreaUnit.SQUARE_KILOMETER, AreaUnit.SQUARE_METER).model_dump(mode="json")


@pytest.fixture
def schedule_payload():
    inputs = FinancialInputs(principal=10_000_000.0, periodic_rate=0.035, period_count=3)
    return build_schedule(inputs).model_dump(mode="json")


class TestSchemaLoader:
    """Schema loading and meta-validation"""

    @pytest.mark.parametrize("name", ["conversion_result", "projection_schedule"])
    def test_schemas_load(self, name):
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"].endswith("2020-12/schema")

    def test_cache(self):
        loader = SchemaLoader()
        assert loader.load_schema("conversion_result") is loader.load_schema("conversion_result")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


class TestConversionResultContract:
    """conversion_result.json"""

    def test_engine_output_valid(self, conversion_payload):
        validate_conversion_result(conversion_payload)

    def test_weight_output_valid(self):
        payload = convert(1.0, WeightUnit.GEUN, WeightUnit.DON).model_dump(mode="json")
        assert ConversionResultValidator().is_valid(payload)

    def test_missing_field(self, conversion_payload):
        del conversion_payload["value_rounded"]
        with pytest.raises(ValidationError):
            validate_conversion_result(conversion_payload)

    def test_unknown_unit(self, conversion_payload):
        conversion_payload["to_unit"] = "furlong"
        assert not ConversionResultValidator().is_valid(conversion_payload)

    def test_wrong_type(self, conversion_payload):
        conversion_payload["value"] = "1000000"
        errors = list(ConversionResultValidator().iter_errors(conversion_payload))
        assert len(errors) == 1


class TestProjectionScheduleContract:
    """projection_schedule.json"""

    def test_engine_output_valid(self, schedule_payload):
        validate_projection_schedule(schedule_payload)
        assert len(schedule_payload["periods"]) == 3

    def test_zero_principal_nulls_valid(self):
        inputs = FinancialInputs(principal=0.0, periodic_rate=0.035, period_count=2)
        payload = build_schedule(inputs).model_dump(mode="json")
        assert payload["periods"][0]["cumulative_return_rate"] is None
        validate_projection_schedule(payload)

    def test_empty_schedule_valid(self):
        inputs = FinancialInputs(principal=5.0, periodic_rate=0.035, period_count=0)
        validate_projection_schedule(build_schedule(inputs).model_dump(mode="json"))

    def test_rate_domain(self, schedule_payload):
        schedule_payload["inputs"]["periodic_rate"] = -1.0
        assert not ProjectionScheduleValidator().is_valid(schedule_payload)

    def test_zero_based_period_rejected(self, schedule_payload):
        schedule_payload["periods"][0]["period"] = 0
        with pytest.raises(ValidationError):
            validate_projection_schedule(schedule_payload)
