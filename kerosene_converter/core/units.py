from enum import Enum

from kerosene_converter.config import KG_PER_LITER, LBS_PER_LITER


class Unit(Enum):
    POUNDS = "Lbs"
    LITERS = "L"
    KILOGRAMS = "Kg"

    @property
    def abbreviation(self) -> str:
        return ABBREVIATIONS[self]

    @classmethod
    def from_label(cls, label: str) -> "Unit":
        """Resolves the text shown in a selector back to the unit."""
        for unit in cls:
            if unit.value == label:
                return unit
        raise ValueError(f"Unknown unit: {label!r}")


ABBREVIATIONS = {
    Unit.POUNDS: "Lbs",
    Unit.LITERS: "L",
    Unit.KILOGRAMS: "Kg",
}


class UnitManager:
    """Conversions through the pivot unit (liters)."""

    # How many units of X fit in one liter of kerosene
    PER_LITER = {
        Unit.LITERS: 1.0,
        Unit.POUNDS: LBS_PER_LITER,
        Unit.KILOGRAMS: KG_PER_LITER,
    }

    @staticmethod
    def to_liters(value: float, unit: Unit) -> float:
        return value / UnitManager.PER_LITER[unit]

    @staticmethod
    def from_liters(value: float, unit: Unit) -> float:
        return value * UnitManager.PER_LITER[unit]

    @staticmethod
    def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
        liters = UnitManager.to_liters(value, from_unit)
        return UnitManager.from_liters(liters, to_unit)
