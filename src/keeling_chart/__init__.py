"""Monthly average CO2 concentration (Keeling curve) chart rendered to SVG."""
from keeling_chart.chart import ChartResult, build_chart, chart_from_frame
from keeling_chart.config import DEFAULT_CONFIG, ChartConfig, FontSizes, Margins
from keeling_chart.errors import ChartDataError, DataFormatError, DataLoadError
from keeling_chart.legend import LEGEND_ENTRIES, LegendEntry
from keeling_chart.loader import load_dataset, parse_dataset
from keeling_chart.partition import partition, split_at_index, split_by_flag
from keeling_chart.scales import LinearScale, TimeScale, build_x_scale, build_y_scale, y_domain
from keeling_chart.render import render_chart, render_svg, wrap_in_page

__all__ = [
    "ChartResult", "build_chart", "chart_from_frame",
    "DEFAULT_CONFIG", "ChartConfig", "FontSizes", "Margins",
    "ChartDataError", "DataFormatError", "DataLoadError",
    "LEGEND_ENTRIES", "LegendEntry",
    "load_dataset", "parse_dataset",
    "partition", "split_at_index", "split_by_flag",
    "LinearScale", "TimeScale", "build_x_scale", "build_y_scale", "y_domain",
    "render_chart", "render_svg", "wrap_in_page",
]
