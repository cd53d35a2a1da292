# kerosene_converter/core/converter.py
import logging
import math
import re
from typing import Optional

from kerosene_converter.core.models import ConversionRequest, ConversionResult, SameUnitError
from kerosene_converter.core.units import Unit, UnitManager

logger = logging.getLogger(__name__)


class ConversionEngine:
    """
    Converte quantidades de querosene entre massa e volume.
    Stateless: every call starts from the raw text and the two selected units.
    """

    # Longest numeric prefix, e.g. "45.36 Kg" -> "45.36"
    _NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

    @classmethod
    def parse_value(cls, raw: str) -> Optional[float]:
        """Returns None when the text has no usable number."""
        match = cls._NUMBER_PREFIX.match(raw or "")
        if not match:
            return None
        value = float(match.group(1))
        if not math.isfinite(value):
            return None
        return value

    @staticmethod
    def format_quantity(magnitude: float, unit: Unit) -> str:
        return ConversionResult(magnitude, unit).text

    @staticmethod
    def zero_result(unit: Unit) -> str:
        return ConversionResult(0.0, unit).text

    def compute(self, request: ConversionRequest) -> ConversionResult:
        if request.from_unit == request.to_unit:
            raise SameUnitError()
        if request.value == 0:
            return ConversionResult(0.0, request.to_unit)

        converted = UnitManager.convert(request.value, request.from_unit, request.to_unit)
        logger.debug("%s %s -> %s %s", request.value, request.from_unit.value,
                     converted, request.to_unit.value)
        return ConversionResult(converted, request.to_unit)

    def convert(self, raw_input: str, from_unit: Unit, to_unit: Unit) -> str:
        """
        raw_input: texto livre digitado no campo de valor.
        Unparseable and zero input both give "0.00 <unit>".
        Raises SameUnitError when both units are equal, whatever the input.
        """
        if from_unit == to_unit:
            raise SameUnitError()

        value = self.parse_value(raw_input)
        if value is None:
            return self.zero_result(to_unit)

        return self.compute(ConversionRequest(value, from_unit, to_unit)).text


def convert(raw_input: str, from_unit: Unit, to_unit: Unit) -> str:
    return ConversionEngine().convert(raw_input, from_unit, to_unit)
