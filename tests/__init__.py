"""Membrane payback calculator test-suite."""
from . import (test_membcalc_model, test_membcalc_parameters,
               test_membcalc_postproc, test_membcalc_plotting, test_membcalc_cli)

__all__ = [
    "test_membcalc_model",
    "test_membcalc_parameters",
    "test_membcalc_postproc",
    "test_membcalc_plotting",
    "test_membcalc_cli",
]

__version__ = "0.0.1"
