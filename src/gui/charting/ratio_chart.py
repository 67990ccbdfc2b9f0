"""Ratio pie charts for the summary panels (matplotlib QtAgg backend)."""

from __future__ import annotations

from typing import Sequence

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure

__all__ = ["RATIO_COLORS", "pie_slices", "create_ratio_chart"]

RATIO_COLORS: Sequence[str] = ("#4caf50", "#e53935")


def pie_slices(first_share: float, second_share: float) -> list[float]:
    """Slice sizes for a two-part ratio; an all-zero ratio draws one empty ring."""
    first = max(first_share, 0.0)
    second = max(second_share, 0.0)
    if first == 0 and second == 0:
        return [0.0, 1.0]
    return [first, second]


def create_ratio_chart(
    first_share: float, second_share: float, *, size: float = 1.4
) -> FigureCanvasQTAgg:
    fig = Figure(figsize=(size, size))
    fig.patch.set_alpha(0)
    ax = fig.add_subplot(111)
    ax.pie(
        pie_slices(first_share, second_share),
        colors=list(RATIO_COLORS),
        startangle=90,
        counterclock=False,
        wedgeprops={"width": 0.45},
    )
    ax.set_aspect("equal")
    fig.subplots_adjust(left=0, right=1, top=1, bottom=0)
    return FigureCanvasQTAgg(fig)
