"""
Contract Validation Module

Validation of engine output payloads against JSON Schema contracts.
"""

from .validators import (
    ContractValidator,
    ConversionResultValidator,
    ProjectionScheduleValidator,
    SchemaLoader,
    validate_conversion_result,
    validate_projection_schedule,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionResultValidator",
    "ProjectionScheduleValidator",
    # Functions
    "validate_conversion_result",
    "validate_projection_schedule",
]
