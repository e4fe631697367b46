# src/keeling_chart/chart.py
"""Load -> split -> scales -> SVG, in one call."""
import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from keeling_chart.config import DEFAULT_CONFIG, ChartConfig, default_source
from keeling_chart.errors import ChartDataError
from keeling_chart.loader import load_dataset
from keeling_chart.partition import partition
from keeling_chart.render import render_svg
from keeling_chart.scales import LinearScale, TimeScale, build_x_scale, build_y_scale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartResult:
    svg: str
    data: pd.DataFrame
    observed: pd.DataFrame
    forecast: pd.DataFrame
    x: TimeScale
    y: LinearScale


def chart_from_frame(data: pd.DataFrame, config: ChartConfig = DEFAULT_CONFIG) -> ChartResult:
    """Render an already-parsed dataset. Scales always cover the full dataset."""
    observed, forecast = partition(data, config)
    x = build_x_scale(data, config)
    y = build_y_scale(data, config)
    svg = render_svg(observed, forecast, x, y, config)
    return ChartResult(svg=svg, data=data, observed=observed, forecast=forecast, x=x, y=y)


def build_chart(source: Optional[str] = None, config: Optional[ChartConfig] = None) -> ChartResult:
    """
    Fetch the CSV and render the chart.

    A ChartDataError is logged and re-raised: the chart is not drawn from
    data that failed to load or parse.
    """
    config = config or DEFAULT_CONFIG
    source = source or default_source()
    try:
        data = load_dataset(source)
        return chart_from_frame(data, config)
    except ChartDataError as e:
        logger.error("Chart not rendered, %s: %s", type(e).__name__, e)
        raise
