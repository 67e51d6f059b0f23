from __future__ import annotations
import numbers
from typing import Final

from .parameters import EnergyType

HORIZON_YEARS: Final[int] = 30       # length of the savings projection
KG_PER_TON: Final[float] = 1000.0


def parse_number(raw) -> float:
    """
    Coerce a raw form value to float.

    Blank input reads as 0.0, like an emptied number field. A single decimal
    comma ("0,8") is accepted; anything else that is not a number raises
    ValueError.
    """
    if isinstance(raw, bool):
        raise ValueError(f"not a number: {raw!r}")
    if isinstance(raw, numbers.Real):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return 0.0
    if "," in text and "." not in text and text.count(",") == 1:
        text = text.replace(",", ".")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"not a number: {raw!r}") from None


def parse_energy_type(value) -> EnergyType:
    """Accept an EnergyType, its name (any case) or its display label."""
    if isinstance(value, EnergyType):
        return value
    text = str(value).strip()
    for member in EnergyType:
        if text == member.value or text.upper().replace("-", "_") == member.name:
            return member
    choices = ", ".join(repr(m.value) for m in EnergyType)
    raise ValueError(f"unknown energy type {value!r} (expected one of {choices})")
