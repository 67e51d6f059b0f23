"""
Display strings for the headline metrics.

Everything is rendered in the calculator's one display locale, Danish:
'.' groups thousands and ',' marks decimals, amounts are in kr.
"""

from __future__ import annotations
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Dict
from .model import ComputationResult

_MAX_FRACTION_DIGITS = 3
_CTX = Context(prec=400)   # wide enough to quantize any finite float


def format_number(value: float, decimals: int | None = None) -> str:
    """
    Danish number formatting.

    With ``decimals=None`` the value is rounded to at most three fraction
    digits and trailing zeros are dropped (1134962.5 -> '1.134.962,5').
    Otherwise exactly ``decimals`` digits are shown (117.5, 2 -> '117,50').
    Ties of the exact binary value round away from zero (11.25, 1 -> '11,3').
    """
    digits = _MAX_FRACTION_DIGITS if decimals is None else decimals
    q = Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP, context=_CTX)
    if q == 0:
        q = abs(q)
    text = f"{q:,.{digits}f}"
    if decimals is None and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text.replace(",", "\0").replace(".", ",").replace("\0", ".")


def format_kr(value: float, decimals: int | None = None) -> str:
    return f"{format_number(value, decimals)} kr."


def summary(result: ComputationResult) -> Dict[str, str]:
    """Labelled headline figures, in the order the calculator shows them."""
    co2 = format_number(result.total_co2_emission_tons, 2)
    return {
        "Pris for membran": format_kr(result.membrane_investment),
        "Udledt CO₂ før membran": f"{co2} tons/år ({format_kr(result.annual_co2_tax)})",
        "Total omkostning før membran": f"{format_kr(result.total_cost_before)}/år",
        "Total omkostning efter membran": f"{format_kr(result.total_cost_after)}/år",
        "Besparelse pr. år": format_kr(result.yearly_savings),
        "Break-even": f"{format_number(result.break_even_years, 1)} år",
    }


def summary_text(result: ComputationResult) -> str:
    return "\n".join(f"{label}: {value}" for label, value in summary(result).items())
