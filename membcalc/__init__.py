"""Building-membrane payback calculator package."""
from .parameters import EnergyType, ParameterSet
from .model import ComputationResult, SavingsModel, evaluate

__all__ = [
    "EnergyType",
    "ParameterSet",
    "ComputationResult",
    "SavingsModel",
    "evaluate",
]
__version__ = "0.1.0"
