"""Calculators — validation boundary between the web forms and the engine.

Each calculator takes raw form input, calls the pure core functions and
returns a frozen result object with ok / error_kind / details.
"""

from .compound import CompoundCalculator, CompoundConfig, CompoundResult
from .converter import (
    ConverterConfig,
    ConverterResult,
    UnitConverter,
    area_converter,
    weight_converter,
)
from .required_capital import (
    RequiredCapitalCalculator,
    RequiredCapitalConfig,
    RequiredCapitalResult,
)
from .required_rate import RequiredRateCalculator, RequiredRateConfig, RequiredRateResult

__all__ = [
    "UnitConverter",
    "ConverterConfig",
    "ConverterResult",
    "area_converter",
    "weight_converter",
    "CompoundCalculator",
    "CompoundConfig",
    "CompoundResult",
    "RequiredRateCalculator",
    "RequiredRateConfig",
    "RequiredRateResult",
    "RequiredCapitalCalculator",
    "RequiredCapitalConfig",
    "RequiredCapitalResult",
]
