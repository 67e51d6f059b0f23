from __future__ import annotations
from pathlib import Path
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter
from .postproc import format_number

_LINE = "#007bff"
_MARKER = "red"


def _kr_fmt(x, _):
    return f"{format_number(x, 0)} kr."


def figure_savings(result, ax=None):
    """Cumulative savings over the projection horizon with a break-even marker."""
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 5))
    else:
        fig = ax.figure

    ax.plot(result.years, result.cumulative_savings, "-o", color=_LINE, lw=3, ms=5,
            label="Besparelse")
    ax.axvline(result.break_even_marker, ls="--", c=_MARKER, lw=1)
    ax.annotate("Break-even", xy=(result.break_even_marker, 1.0),
                xycoords=("data", "axes fraction"), ha="center", va="bottom", color=_MARKER)

    ax.grid(True, ls="--", c="#ccc")
    ax.yaxis.set_major_formatter(FuncFormatter(_kr_fmt))
    ax.set_xlabel("År")
    ax.set_ylabel("Akkumuleret besparelse (kr.)")
    ax.legend()

    fig.tight_layout()
    return fig


def save_figure(fig, path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=300, bbox_inches="tight")
    return path
