"""
Conversion — value objects for unit conversion

Immutable Pydantic models. A ConversionResult is derived from its request
on every call and never cached; both the authoritative unrounded value and
the display value are carried so the formatter never re-derives precision.
"""

from pydantic import BaseModel, Field, model_validator

from calc_engine.core.domain.units import AreaUnit, WeightUnit, unit_label


class ConversionRequest(BaseModel):
    """Magnitude to convert between two units of the same quantity."""

    magnitude: float = Field(..., allow_inf_nan=False, description="Magnitude in from_unit")
    from_unit: AreaUnit | WeightUnit = Field(..., description="Source unit")
    to_unit: AreaUnit | WeightUnit = Field(..., description="Target unit")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _units_of_same_quantity(self) -> "ConversionRequest":
        if type(self.from_unit) is not type(self.to_unit):
            raise ValueError(
                f"from_unit {self.from_unit.value!r} and to_unit {self.to_unit.value!r} "
                "must belong to the same quantity"
            )
        return self


class ConversionResult(BaseModel):
    """
    Result of a unit conversion.

    `value` is authoritative for any further chaining;
    `value_rounded` is the 4-decimal display value.
    """

    magnitude: float = Field(..., allow_inf_nan=False, description="Input magnitude")
    from_unit: AreaUnit | WeightUnit = Field(..., description="Source unit")
    to_unit: AreaUnit | WeightUnit = Field(..., description="Target unit")
    value: float = Field(..., allow_inf_nan=False, description="Converted value (unrounded)")
    value_rounded: float = Field(
        ..., allow_inf_nan=False, description="Converted value rounded for display"
    )
    decimal_places: int = Field(..., ge=0, description="Places used for value_rounded")

    model_config = {"frozen": True}

    @property
    def from_label(self) -> str:
        return unit_label(self.from_unit)

    @property
    def to_label(self) -> str:
        return unit_label(self.to_unit)

    def summary(self) -> str:
        """
        One-line description, e.g. "1 제곱킬로미터 (km²) = 1000000.0000 제곱미터 (m²)".

        Magnitudes are printed without thousands separators; grouping is
        the formatter's job.
        """
        magnitude = str(int(self.magnitude)) if self.magnitude.is_integer() else repr(self.magnitude)
        value = f"{self.value_rounded:.{self.decimal_places}f}"
        return f"{magnitude} {self.from_label} = {value} {self.to_label}"
