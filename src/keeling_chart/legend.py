# src/keeling_chart/legend.py
"""Fixed legend entries and where they go on the plot."""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from keeling_chart.config import ChartConfig


@dataclass(frozen=True)
class LegendEntry:
    label: str
    color: str
    width: float
    dash: Optional[Tuple[float, float]] = None
    opacity: float = 1.0


FORECAST_DASH = (4, 4)

PROJECTED = LegendEntry("Projected", "red", 1.5, FORECAST_DASH)
OBSERVED = LegendEntry("Observed", "black", 1.5)
CONFIDENCE = LegendEntry("95% Confidence Interval", "lightcoral", 14, opacity=0.5)

LEGEND_ENTRIES = (PROJECTED, OBSERVED, CONFIDENCE)


@dataclass(frozen=True)
class LegendItem:
    entry: LegendEntry
    line: Tuple[Tuple[float, float], Tuple[float, float]]
    text_anchor: Tuple[float, float]


def legend_layout(config: ChartConfig, entries: Sequence[LegendEntry] = LEGEND_ENTRIES) -> List[LegendItem]:
    """
    One row per entry, ``legend_spacing`` px apart, starting at the plot's
    top-left corner shifted right by ``legend_offset``. Each row is a short
    line sample with its label ``legend_text_gap`` px after the line end.
    """
    items = []
    x0 = config.legend_offset
    x1 = x0 + config.legend_line_length
    for i, entry in enumerate(entries):
        y = i * config.legend_spacing
        items.append(LegendItem(entry, ((x0, y), (x1, y)), (x1 + config.legend_text_gap, y)))
    return items
