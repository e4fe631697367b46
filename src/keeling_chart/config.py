# src/keeling_chart/config.py
"""
Chart configuration.

All layout numbers live in one frozen ChartConfig built once at startup and
passed down to the loader/partition/scales/render stages. Use
``DEFAULT_CONFIG.with_overrides(...)`` to get a tweaked copy.
"""
import os
from dataclasses import dataclass, field, replace

DATA_URL = "https://raw.githubusercontent.com/vrif/vrif.github.io/master/_data/keeling_data.csv"
SPLIT_INDEX = 735
Y_BUFFER = 10
CONTAINER_ID = "keeling_graph"

TITLE = "Monthly Average CO2 Concentration"
X_LABEL = "Year"
Y_LABEL = "CO2 Concentration (ppm)"


def default_source() -> str:
    """CSV location, overridable with KEELING_DATA_URL (path or URL)."""
    return os.environ.get("KEELING_DATA_URL") or DATA_URL


@dataclass(frozen=True)
class Margins:
    top: int = 50
    right: int = 5
    bottom: int = 30
    left: int = 60


@dataclass(frozen=True)
class FontSizes:
    title: int = 20
    label: int = 15
    tick: int = 12
    legend: int = 12


@dataclass(frozen=True)
class ChartConfig:
    canvas_width: int = 560
    canvas_height: int = 500
    margins: Margins = field(default_factory=Margins)
    fonts: FontSizes = field(default_factory=FontSizes)
    buffer: float = Y_BUFFER
    split_index: int = SPLIT_INDEX
    use_forecast_flag: bool = True
    legend_offset: int = 20
    legend_spacing: int = 20
    legend_line_length: int = 30
    legend_text_gap: int = 5
    container_id: str = CONTAINER_ID
    # 72 dpi keeps one SVG unit equal to one layout pixel
    dpi: int = 72

    @property
    def width(self) -> int:
        """Plot width net of the left/right margins."""
        return self.canvas_width - self.margins.left - self.margins.right

    @property
    def height(self) -> int:
        """Plot height net of the top/bottom margins."""
        return self.canvas_height - self.margins.top - self.margins.bottom

    def with_overrides(self, **changes) -> "ChartConfig":
        return replace(self, **changes)


DEFAULT_CONFIG = ChartConfig()
