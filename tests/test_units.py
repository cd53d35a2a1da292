import pytest

from kerosene_converter.core.units import ABBREVIATIONS, Unit, UnitManager


def test_abbreviations():
    assert Unit.POUNDS.abbreviation == "Lbs"
    assert Unit.LITERS.abbreviation == "L"
    assert Unit.KILOGRAMS.abbreviation == "Kg"
    assert set(ABBREVIATIONS) == set(Unit)


def test_selector_order():
    assert [u.value for u in Unit] == ["Lbs", "L", "Kg"]


def test_from_label():
    assert Unit.from_label("Kg") is Unit.KILOGRAMS
    with pytest.raises(ValueError):
        Unit.from_label("gal")


def test_liters_is_the_pivot():
    assert UnitManager.PER_LITER[Unit.LITERS] == 1.0
    assert UnitManager.to_liters(176.37, Unit.POUNDS) == pytest.approx(100.0)
    assert UnitManager.to_liters(80.0, Unit.KILOGRAMS) == pytest.approx(100.0)
    assert UnitManager.from_liters(100.0, Unit.KILOGRAMS) == pytest.approx(80.0)


def test_mass_to_mass_uses_density_ratio():
    expected = 100 * UnitManager.PER_LITER[Unit.KILOGRAMS] / UnitManager.PER_LITER[Unit.POUNDS]
    assert UnitManager.convert(100, Unit.POUNDS, Unit.KILOGRAMS) == pytest.approx(expected)
