"""Unit converter calculator

Validation boundary of the area and weight converter forms.

Takes the raw text of the value field plus the two selected unit
identifiers, and returns a ConverterResult:
- ok=True  → conversion + one-line summary
- ok=False → error_kind + details for the UI to render

Never raises CalculationError to the caller.
"""

from dataclasses import dataclass

from calc_engine.core.domain.conversion import ConversionRequest, ConversionResult
from calc_engine.core.domain.units import AreaUnit, WeightUnit, parse_unit, rate_table
from calc_engine.core.errors import CalculationError, ErrorKind
from calc_engine.core.math.conversion import CONVERSION_DECIMAL_PLACES, convert_request
from calc_engine.core.math.numerical_safeguards import parse_number, validate_non_negative
from calc_engine.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConverterResult:
    """Result of a converter evaluation."""

    ok: bool
    error_kind: ErrorKind | None

    conversion: ConversionResult | None
    summary: str

    # Details
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Converter configuration."""

    # Display precision of the converted value
    decimal_places: int = CONVERSION_DECIMAL_PLACES

    # Negative magnitudes are accepted as plain numbers unless disabled
    allow_negative: bool = True


# =============================================================================
# CONVERTER
# =============================================================================


class UnitConverter:
    """Converter for one quantity (AreaUnit or WeightUnit).

    Order of checks:
    1. Unit identifiers (UnknownUnit)
    2. Value parsing (InvalidInput)
    3. Conversion through the base unit
    """

    def __init__(self, unit_type: type, config: ConverterConfig | None = None):
        """
        Args:
            unit_type: unit enum of the quantity (fails fast if unregistered)
            config: converter configuration (optional, defaults used)
        """
        rate_table(unit_type)
        self.unit_type = unit_type
        self.config = config or ConverterConfig()

    def evaluate(self, raw_value: str | float, from_unit: str, to_unit: str) -> ConverterResult:
        """Convert the raw form value from from_unit to to_unit.

        Args:
            raw_value: text of the value field (thousands separators allowed)
            from_unit: selected source unit identifier
            to_unit: selected target unit identifier

        Returns:
            ConverterResult
        """
        try:
            source = parse_unit(self.unit_type, from_unit)
            target = parse_unit(self.unit_type, to_unit)

            magnitude = parse_number(raw_value, "value")
            if not self.config.allow_negative:
                validate_non_negative(magnitude, "value")

            request = ConversionRequest(magnitude=magnitude, from_unit=source, to_unit=target)
            conversion = convert_request(request, self.config.decimal_places)
        except CalculationError as e:
            return self._failed_result(e, raw_value)

        summary = conversion.summary()
        logger.debug(
            "conversion_evaluated",
            quantity=self.unit_type.__name__,
            from_unit=source.value,
            to_unit=target.value,
        )

        return ConverterResult(
            ok=True,
            error_kind=None,
            conversion=conversion,
            summary=summary,
            details=summary,
        )

    def _failed_result(self, error: CalculationError, raw_value: str | float) -> ConverterResult:
        logger.info(
            "conversion_rejected",
            quantity=self.unit_type.__name__,
            error_kind=error.kind.value,
            raw_value=str(raw_value),
        )
        return ConverterResult(
            ok=False,
            error_kind=error.kind,
            conversion=None,
            summary="",
            details=str(error),
        )


def area_converter(config: ConverterConfig | None = None) -> UnitConverter:
    """Converter for the area form (default m² → km² in the UI)."""
    return UnitConverter(AreaUnit, config)


def weight_converter(config: ConverterConfig | None = None) -> UnitConverter:
    """Converter for the weight form."""
    return UnitConverter(WeightUnit, config)
