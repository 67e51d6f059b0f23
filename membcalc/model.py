from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Tuple
import numpy as np
from .parameters import ParameterSet
from .utils import HORIZON_YEARS, KG_PER_TON

__all__ = ["ComputationResult", "SavingsModel", "evaluate"]

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class ComputationResult:
    membrane_investment: float       # DKK
    annual_energy_cost: float        # DKK yr⁻¹
    total_co2_emission_tons: float   # t CO₂ yr⁻¹
    annual_co2_tax: float            # DKK yr⁻¹
    total_cost_before: float         # DKK yr⁻¹
    total_cost_after: float          # DKK yr⁻¹
    yearly_savings: float            # DKK yr⁻¹
    break_even_years: float          # yr (0 when savings are not positive)
    years: np.ndarray = field(repr=False)               # 1 .. HORIZON_YEARS
    cumulative_savings: np.ndarray = field(repr=False)  # DKK

    @property
    def savings_series(self) -> List[Tuple[int, float]]:
        return [(int(y), float(s)) for y, s in zip(self.years, self.cumulative_savings)]

    @property
    def break_even_marker(self) -> float:
        """x position of the break-even annotation on the savings chart."""
        return self.break_even_years

class SavingsModel:
    """
    Payback of a building membrane:
      • energy cost and CO₂ tax of heating (district heat *or* gas) + electric cooling
      • cost after the membrane removes ``savings_percent`` of the total
      • break-even = investment / yearly savings, linear 30-year projection
    """

    def __init__(self, params: ParameterSet | None = None) -> None:
        self.params = params or ParameterSet()
        p = self.params

        # Active heating pair; the inactive supply contributes nothing
        self.heating_rate: float = p.heating_rate
        self.heating_co2: float = p.heating_co2

        # Annual energy use (kWh)
        self.heating_kwh: float = p.area * p.heating_consumption
        self.cooling_kwh: float = p.area * p.cooling_consumption

    def with_changes(self, **changes) -> "SavingsModel":
        return SavingsModel(self.params.replace(**changes))

    def _annual_energy_cost(self) -> float:
        return (self.heating_kwh * self.heating_rate
                + self.cooling_kwh * self.params.rate_electricity)

    def _co2_tons(self) -> float:
        return (self.heating_kwh * self.heating_co2
                + self.cooling_kwh * self.params.co2_electricity) / KG_PER_TON

    def evaluate(self) -> ComputationResult:
        p = self.params
        energy_cost = self._annual_energy_cost()
        co2_tons = self._co2_tons()
        co2_tax = co2_tons * p.co2_tax_rate
        cost_before = energy_cost + co2_tax
        investment = p.membrane_cost_per_area * p.area
        cost_after = cost_before * (1 - p.savings_percent / 100)
        savings = cost_before - cost_after

        # 0 doubles as "never" for non-positive savings
        break_even = investment / savings if savings > 0 else 0.0

        years = np.arange(1, HORIZON_YEARS + 1)
        cumulative = savings * years.astype(float)

        log.debug("evaluated %s: savings=%r break_even=%r", p.energy_type.name, savings, break_even)
        return ComputationResult(
            membrane_investment=investment,
            annual_energy_cost=energy_cost,
            total_co2_emission_tons=co2_tons,
            annual_co2_tax=co2_tax,
            total_cost_before=cost_before,
            total_cost_after=cost_after,
            yearly_savings=savings,
            break_even_years=break_even,
            years=years,
            cumulative_savings=cumulative,
        )

def evaluate(params: ParameterSet | None = None) -> ComputationResult:
    return SavingsModel(params).evaluate()
