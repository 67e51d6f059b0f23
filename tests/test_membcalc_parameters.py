import pytest
import os,sys
try:
    from membcalc.parameters import *
except ImportError:
    # Add the next directory up to the path if membcalc not in it
    sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
    from membcalc.parameters import *
from membcalc.utils import parse_number, parse_energy_type


def test_defaults():
    p = ParameterSet()
    assert p.area == 5000
    assert p.energy_type is EnergyType.PRIMARY_HEAT
    assert p.heating_rate == pytest.approx(0.8)
    assert p.heating_co2 == pytest.approx(0.1)
    gas = ParameterSet(energy_type=EnergyType.NATURAL_GAS)
    assert gas.heating_rate == pytest.approx(1.2)
    assert gas.heating_co2 == pytest.approx(0.22)


def test_energy_type_labels():
    assert ParameterSet(energy_type="Naturgas + El").energy_type is EnergyType.NATURAL_GAS
    assert ParameterSet(energy_type="primary_heat").energy_type is EnergyType.PRIMARY_HEAT
    assert parse_energy_type("NATURAL-GAS") is EnergyType.NATURAL_GAS
    assert EnergyType.PRIMARY_HEAT.label == "Fjernvarme + El"
    with pytest.raises(ValueError):
        ParameterSet(energy_type="Oil")


def test_non_finite_rejected_but_ranges_not():
    with pytest.raises(ValueError):
        ParameterSet(area=float("nan"))
    with pytest.raises(ValueError):
        ParameterSet(co2_tax_rate=float("inf"))
    with pytest.raises(ValueError):
        ParameterSet(rate_heat="0.8")  # raw strings go through parse_number
    # negative / >100 % are the caller's business
    assert ParameterSet(area=-10.0).area == -10.0
    assert ParameterSet(savings_percent=150.0).savings_percent == 150.0


def test_replace_is_a_new_value():
    p = ParameterSet()
    q = p.replace(area=1200.0, savings_percent=20.0)
    assert (q.area, q.savings_percent) == (1200.0, 20.0)
    assert p.area == 5000
    assert p == ParameterSet()
    with pytest.raises(Exception):
        p.area = 1.0  # frozen


def test_parse_number():
    assert parse_number("") == 0.0
    assert parse_number("   ") == 0.0
    assert parse_number(" 450 ") == 450.0
    assert parse_number("0,8") == pytest.approx(0.8)
    assert parse_number(7) == 7.0
    with pytest.raises(ValueError):
        parse_number("abc")
    with pytest.raises(ValueError):
        parse_number("1,000,000")
    with pytest.raises(ValueError):
        parse_number(True)

def test_all():
    test_defaults()
    test_energy_type_labels()
    test_non_finite_rejected_but_ranges_not()
    test_replace_is_a_new_value()
    test_parse_number()
    print("test_membcalc_parameters passed all tests")

if __name__=="__main__":
    test_all()
