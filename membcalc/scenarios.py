from __future__ import annotations
from .parameters import ParameterSet, EnergyType

def district_heating():
    """Calculator start-up state: 5000 m² on district heating."""
    return ParameterSet()

def natural_gas():
    """Same building heated by natural gas."""
    return ParameterSet(energy_type=EnergyType.NATURAL_GAS)

def no_savings():
    """Membrane with no effect; break-even falls back to 0."""
    return ParameterSet(savings_percent=0.0)

def empty_building():
    """Zero floor area; every cost and emission is 0."""
    return ParameterSet(area=0.0)

SCENARIOS = {
    "district_heating": district_heating,
    "natural_gas": natural_gas,
    "no_savings": no_savings,
    "empty_building": empty_building,
}
