# kerosene_converter/core/models.py
from dataclasses import dataclass

from kerosene_converter.core.units import Unit


class SameUnitError(ValueError):
    """Source and target units are the same."""

    def __init__(self, message: str = "Select different units"):
        super().__init__(message)


@dataclass(frozen=True)
class ConversionRequest:
    value: float
    from_unit: Unit
    to_unit: Unit


@dataclass(frozen=True)
class ConversionResult:
    magnitude: float
    unit: Unit

    @property
    def text(self) -> str:
        return f"{self.magnitude:.2f} {self.unit.abbreviation}"
