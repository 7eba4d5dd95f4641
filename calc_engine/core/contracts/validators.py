"""
JSON Schema Contract Validators

Validation of engine output payloads against formal JSON Schema contracts.
Uses the jsonschema library. Payloads are the `model_dump(mode="json")` of
the domain value objects handed to the presentation layer.

Schemas (shipped in calc_engine/core/contracts/schema/):
- conversion_result.json
- projection_schedule.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Schemas live next to this module, so they ship inside the package.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'conversion_result')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: schema file does not exist
            ValueError: file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Module-level loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of a payload against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate a payload.

        Raises:
            ValidationError: payload does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Check a payload without raising."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Iterate over every validation error of a payload."""
        return self.validator.iter_errors(data)


class ConversionResultValidator(ContractValidator):
    """Validator for the conversion_result contract."""

    def __init__(self):
        super().__init__("conversion_result")


class ProjectionScheduleValidator(ContractValidator):
    """Validator for the projection_schedule contract."""

    def __init__(self):
        super().__init__("projection_schedule")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_conversion_result(data: Dict[str, Any]) -> None:
    """
    Validate a conversion_result payload.

    Raises:
        ValidationError: payload does not match the schema
    """
    ConversionResultValidator().validate(data)


def validate_projection_schedule(data: Dict[str, Any]) -> None:
    """
    Validate a projection_schedule payload.

    Raises:
        ValidationError: payload does not match the schema
    """
    ProjectionScheduleValidator().validate(data)
