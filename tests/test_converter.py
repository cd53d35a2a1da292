import pytest

from kerosene_converter.config import KG_PER_LITER, LBS_PER_LITER
from kerosene_converter.core.converter import ConversionEngine, convert
from kerosene_converter.core.models import ConversionRequest, SameUnitError
from kerosene_converter.core.units import Unit


def test_density_constants_pinned():
    assert KG_PER_LITER == 0.8
    assert LBS_PER_LITER == 1.7637


@pytest.mark.parametrize("unit", list(Unit))
@pytest.mark.parametrize("raw", ["100", "0", "abc", "", "-3.5"])
def test_same_unit_always_fails(unit, raw):
    with pytest.raises(SameUnitError) as exc:
        convert(raw, unit, unit)
    assert str(exc.value) == "Select different units"


def test_same_unit_error_is_value_error():
    assert issubclass(SameUnitError, ValueError)


@pytest.mark.parametrize("raw,from_unit,to_unit,expected", [
    ("100", Unit.POUNDS, Unit.KILOGRAMS, "45.36 Kg"),
    ("100", Unit.LITERS, Unit.POUNDS, "176.37 Lbs"),
    ("100", Unit.LITERS, Unit.KILOGRAMS, "80.00 Kg"),
    ("80", Unit.KILOGRAMS, Unit.LITERS, "100.00 L"),
    ("1", Unit.KILOGRAMS, Unit.POUNDS, "2.20 Lbs"),
    ("-100", Unit.POUNDS, Unit.KILOGRAMS, "-45.36 Kg"),
    ("1e3", Unit.LITERS, Unit.KILOGRAMS, "800.00 Kg"),
    (".5", Unit.LITERS, Unit.KILOGRAMS, "0.40 Kg"),
])
def test_convert_values(raw, from_unit, to_unit, expected):
    assert convert(raw, from_unit, to_unit) == expected


@pytest.mark.parametrize("raw,from_unit,to_unit,expected", [
    ("abc", Unit.POUNDS, Unit.KILOGRAMS, "0.00 Kg"),
    ("0", Unit.LITERS, Unit.POUNDS, "0.00 Lbs"),
    ("", Unit.KILOGRAMS, Unit.LITERS, "0.00 L"),
    ("-0", Unit.POUNDS, Unit.LITERS, "0.00 L"),
    ("inf", Unit.LITERS, Unit.KILOGRAMS, "0.00 Kg"),
    ("1e999", Unit.LITERS, Unit.KILOGRAMS, "0.00 Kg"),
    (".", Unit.LITERS, Unit.KILOGRAMS, "0.00 Kg"),
])
def test_unusable_input_gives_zero(raw, from_unit, to_unit, expected):
    assert convert(raw, from_unit, to_unit) == expected


def test_numeric_prefix_is_used():
    assert convert("45.36 Kg", Unit.KILOGRAMS, Unit.POUNDS) == "100.00 Lbs"
    assert convert("  12abc", Unit.POUNDS, Unit.LITERS) == "6.80 L"


@pytest.mark.parametrize("value,a,b", [
    (100, Unit.POUNDS, Unit.KILOGRAMS),
    (100, Unit.POUNDS, Unit.LITERS),
    (7.5, Unit.POUNDS, Unit.KILOGRAMS),
    (250, Unit.LITERS, Unit.KILOGRAMS),
    (1234.5, Unit.LITERS, Unit.POUNDS),
    (250, Unit.KILOGRAMS, Unit.POUNDS),
    (80, Unit.KILOGRAMS, Unit.LITERS),
])
def test_round_trip_within_two_decimals(value, a, b):
    there = convert(str(value), a, b)
    back = convert(there, b, a)
    magnitude, unit = back.split(" ")
    assert unit == a.abbreviation
    assert float(magnitude) == pytest.approx(value, abs=0.01)


def test_parse_value():
    assert ConversionEngine.parse_value("12.5") == 12.5
    assert ConversionEngine.parse_value(" -3 ") == -3.0
    assert ConversionEngine.parse_value("1e") == 1.0
    assert ConversionEngine.parse_value("abc") is None
    assert ConversionEngine.parse_value("") is None
    assert ConversionEngine.parse_value(None) is None


def test_compute_returns_structured_result():
    engine = ConversionEngine()
    result = engine.compute(ConversionRequest(100.0, Unit.LITERS, Unit.KILOGRAMS))
    assert result.unit is Unit.KILOGRAMS
    assert result.magnitude == pytest.approx(80.0)
    assert result.text == "80.00 Kg"


def test_compute_same_unit_fails():
    with pytest.raises(SameUnitError):
        ConversionEngine().compute(ConversionRequest(1.0, Unit.POUNDS, Unit.POUNDS))


def test_zero_result_and_format():
    assert ConversionEngine.zero_result(Unit.POUNDS) == "0.00 Lbs"
    assert ConversionEngine.format_quantity(3.14159, Unit.LITERS) == "3.14 L"
