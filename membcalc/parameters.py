"""
Immutable containers for the building, tariff and membrane inputs.
"""

from __future__ import annotations
import math
import numbers
from dataclasses import dataclass, fields, replace as _replace
from enum import Enum


# ---------------------------------------------------------------
# Heating supply
# ---------------------------------------------------------------
class EnergyType(Enum):
    """Heating supply of the building; cooling is always electric."""

    PRIMARY_HEAT = "Fjernvarme + El"   # district heating + electricity
    NATURAL_GAS = "Naturgas + El"      # natural gas + electricity

    @property
    def label(self) -> str:
        return self.value


# ---------------------------------------------------------------
# Full parameter set (defaults = calculator start-up state)
# ---------------------------------------------------------------
@dataclass(frozen=True)
class ParameterSet:
    area:                   float = 5000.0   # m²
    energy_type:            EnergyType = EnergyType.PRIMARY_HEAT

    # consumption
    heating_consumption:    float = 200.0    # kWh m⁻² yr⁻¹
    cooling_consumption:    float = 50.0     # kWh m⁻² yr⁻¹

    # tariffs
    rate_heat:              float = 0.8      # DKK kWh⁻¹
    rate_gas:               float = 1.2      # DKK kWh⁻¹
    rate_electricity:       float = 2.0      # DKK kWh⁻¹

    # emission factors
    co2_heat:               float = 0.1      # kg CO₂ kWh⁻¹
    co2_gas:                float = 0.22     # kg CO₂ kWh⁻¹
    co2_electricity:        float = 0.07     # kg CO₂ kWh⁻¹

    # membrane & policy
    membrane_cost_per_area: float = 450.0    # DKK m⁻²
    savings_percent:        float = 15.0     # %
    co2_tax_rate:           float = 300.0    # DKK t⁻¹

    # validation
    def __post_init__(self):  # type: ignore[override]
        if not isinstance(self.energy_type, EnergyType):
            from .utils import parse_energy_type
            object.__setattr__(self, "energy_type", parse_energy_type(self.energy_type))
        for f in fields(self):
            if f.name == "energy_type":
                continue
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{f.name} must be a real number")
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite")

    # convenience
    @property
    def heating_rate(self) -> float:
        """Tariff of the active heating supply."""
        if self.energy_type is EnergyType.PRIMARY_HEAT:
            return self.rate_heat
        return self.rate_gas

    @property
    def heating_co2(self) -> float:
        """Emission factor of the active heating supply."""
        if self.energy_type is EnergyType.PRIMARY_HEAT:
            return self.co2_heat
        return self.co2_gas

    def replace(self, **changes) -> "ParameterSet":
        return _replace(self, **changes)
