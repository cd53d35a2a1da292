# kerosene_converter/ui/state.py
import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from kerosene_converter.config import DEFAULT_FROM_UNIT, DEFAULT_TO_UNIT, DEFAULT_VALUE
from kerosene_converter.core.converter import ConversionEngine
from kerosene_converter.core.models import SameUnitError
from kerosene_converter.core.units import Unit

logger = logging.getLogger(__name__)


@dataclass
class FormState:
    """Estado da tela, independente do toolkit gráfico."""
    from_unit: Unit = Unit.from_label(DEFAULT_FROM_UNIT)
    to_unit: Unit = Unit.from_label(DEFAULT_TO_UNIT)
    raw_value: str = DEFAULT_VALUE
    result: str = ""
    error: Optional[str] = None
    engine: ConversionEngine = field(default_factory=ConversionEngine, repr=False, compare=False)

    def __post_init__(self):
        self.evaluate()

    def evaluate(self) -> None:
        try:
            self.result = self.engine.convert(self.raw_value, self.from_unit, self.to_unit)
            self.error = None
        except SameUnitError as e:
            self.result = ""
            self.error = str(e)

    def set_value(self, raw: str) -> None:
        self.raw_value = raw
        self.evaluate()

    def set_from_unit(self, unit: Unit) -> None:
        logger.debug("Source unit -> %s", unit.value)
        self.from_unit = unit
        self.evaluate()

    def set_to_unit(self, unit: Unit) -> None:
        logger.debug("Target unit -> %s", unit.value)
        self.to_unit = unit
        self.evaluate()

    def reset(self) -> None:
        """Clear: default units, empty field, zero result."""
        self.from_unit = Unit.from_label(DEFAULT_FROM_UNIT)
        self.to_unit = Unit.from_label(DEFAULT_TO_UNIT)
        self.raw_value = ""
        self.result = self.engine.zero_result(self.to_unit)
        self.error = None
        logger.info("Form reset")

    def display_parts(self) -> Tuple[str, str]:
        """Splits the result into (magnitude, abbreviation) for the two labels."""
        if self.error or not self.result:
            return "", ""
        magnitude, _, unit = self.result.partition(" ")
        return magnitude, unit
