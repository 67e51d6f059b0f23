#!/usr/bin/env python3
"""
Membrane payback calculator on the command line.

Usage:
  python calculator.py                              # start-up parameters
  python calculator.py --energy-type "Naturgas + El" --area 1200
  python calculator.py --scenario no_savings --series
  python calculator.py --plot figures/savings.png   # write the chart
  python calculator.py --list                       # list scenario names
"""
from __future__ import annotations
import argparse
import logging
from dataclasses import fields

from membcalc.parameters import ParameterSet
from membcalc.model import SavingsModel
from membcalc.postproc import format_kr, summary_text
from membcalc.scenarios import SCENARIOS
from membcalc.utils import parse_energy_type, parse_number

log = logging.getLogger("membcalc")

_HELP = {
    "area": "building area [m²]",
    "energy_type": "heating supply: 'Fjernvarme + El' or 'Naturgas + El'",
    "heating_consumption": "heating [kWh/m²/yr]",
    "cooling_consumption": "cooling [kWh/m²/yr]",
    "rate_heat": "district heating tariff [DKK/kWh]",
    "rate_gas": "natural gas tariff [DKK/kWh]",
    "rate_electricity": "electricity tariff [DKK/kWh]",
    "co2_heat": "district heating emissions [kg CO2/kWh]",
    "co2_gas": "natural gas emissions [kg CO2/kWh]",
    "co2_electricity": "electricity emissions [kg CO2/kWh]",
    "membrane_cost_per_area": "membrane price [DKK/m²]",
    "savings_percent": "energy saving from the membrane [%]",
    "co2_tax_rate": "CO2 tax [DKK/ton]",
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Payback of a building membrane.")
    ap.add_argument("--scenario", choices=sorted(SCENARIOS), default="district_heating",
                    help="preset the remaining flags override")
    ap.add_argument("--list", action="store_true", help="list scenario names and exit")
    for f in fields(ParameterSet):
        kind = parse_energy_type if f.name == "energy_type" else parse_number
        ap.add_argument("--" + f.name.replace("_", "-"), dest=f.name, type=kind,
                        default=None, help=_HELP[f.name])
    ap.add_argument("--series", action="store_true", help="print the 30-year projection")
    ap.add_argument("--plot", metavar="PATH", help="write the savings chart to PATH")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def parameters_from_args(args: argparse.Namespace) -> ParameterSet:
    params = SCENARIOS[args.scenario]()
    changes = {f.name: getattr(args, f.name) for f in fields(ParameterSet)
               if getattr(args, f.name) is not None}
    return params.replace(**changes) if changes else params


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.list:
        for name, func in SCENARIOS.items():
            print(f"{name:18s} {(func.__doc__ or '').strip()}")
        return 0

    try:
        params = parameters_from_args(args)
    except ValueError as e:
        ap.error(str(e))
    log.debug("parameters: %s", params)

    result = SavingsModel(params).evaluate()
    print(summary_text(result))

    if args.series:
        print()
        for year, savings in result.savings_series:
            print(f"{year:4d}  {format_kr(savings)}")

    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        from membcalc.plotting import figure_savings, save_figure

        path = save_figure(figure_savings(result), args.plot)
        print(f"wrote {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
