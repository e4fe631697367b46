# src/keeling_chart/render.py
"""
Draw the Keeling curve chart with matplotlib and serialise it as SVG.

The plot axes use pixel coordinates (x: 0..width, y: height..0 so y grows
downwards like SVG) and every mark is positioned through the x/y scales.
Layering follows call order: axes and titles, observed line, confidence
band, forecast line, legend.
"""
import io
import logging
from typing import Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from keeling_chart.config import DEFAULT_CONFIG, TITLE, X_LABEL, Y_LABEL, ChartConfig
from keeling_chart.legend import CONFIDENCE, OBSERVED, PROJECTED, LegendEntry, legend_layout
from keeling_chart.scales import LinearScale, TimeScale

logger = logging.getLogger(__name__)

# dash lengths are absolute, not multiples of the line width; keep text as text
_RC = {"lines.scale_dashes": False, "svg.fonttype": "none", "svg.hashsalt": "keeling"}


def line_points(rows: pd.DataFrame, x: TimeScale, y: LinearScale, column: str = "yhat") -> Tuple[np.ndarray, np.ndarray]:
    """Pixel vertices of a series, in row order."""
    return x(rows["date"]), y(rows[column])


def band_points(rows: pd.DataFrame, x: TimeScale, y: LinearScale) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Confidence band edges as (xs, y0, y1) with y0 from the upper bound and y1
    from the lower bound. The fill spans y0..y1 whichever is larger.
    """
    return x(rows["date"]), y(rows["yhat_upper"]), y(rows["yhat_lower"])


def _stroke(entry: LegendEntry) -> dict:
    style = {
        "color": entry.color,
        "linewidth": entry.width,
        "alpha": entry.opacity,
        "solid_capstyle": "butt",
    }
    if entry.dash:
        style["linestyle"] = (0, entry.dash)
    return style


def _draw_axes(ax, x: TimeScale, y: LinearScale, config: ChartConfig) -> None:
    fonts = config.fonts
    ax.set_xlim(0, config.width)
    ax.set_ylim(config.height, 0)
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)

    x_ticks = x.ticks()
    ax.set_xticks([x(t) for t in x_ticks])
    ax.set_xticklabels(x.tick_labels(x_ticks), fontsize=fonts.tick)
    y_ticks = y.ticks()
    ax.set_yticks([y(v) for v in y_ticks])
    ax.set_yticklabels(y.tick_labels(y_ticks), fontsize=fonts.tick)

    ax.set_xlabel(X_LABEL, fontsize=fonts.label, fontweight="bold")
    ax.set_ylabel(Y_LABEL, fontsize=fonts.label, fontweight="bold")
    ax.set_title(
        TITLE,
        fontsize=fonts.title,
        fontweight="bold",
        pad=max(config.margins.top - fonts.title, 0) / 2,
    )


def _draw_legend(ax, config: ChartConfig) -> None:
    for i, item in enumerate(legend_layout(config)):
        (x0, y0), (x1, y1) = item.line
        line, = ax.plot([x0, x1], [y0, y1], clip_on=False, zorder=5, **_stroke(item.entry))
        line.set_gid(f"legend-line-{i}")
        tx, ty = item.text_anchor
        text = ax.text(tx, ty, item.entry.label, fontsize=config.fonts.legend,
                       ha="left", va="center", clip_on=False, zorder=5)
        text.set_gid(f"legend-label-{i}")


def render_chart(observed: pd.DataFrame, forecast: pd.DataFrame, x: TimeScale, y: LinearScale,
                 config: ChartConfig = DEFAULT_CONFIG):
    """Build and return the matplotlib Figure. Caller closes it."""
    w, h, m = config.canvas_width, config.canvas_height, config.margins
    with plt.rc_context(_RC):
        fig = plt.figure(figsize=(w / config.dpi, h / config.dpi), dpi=config.dpi)
        ax = fig.add_axes([m.left / w, m.bottom / h, config.width / w, config.height / h])
        _draw_axes(ax, x, y, config)

        if len(observed):
            xs, ys = line_points(observed, x, y)
            line, = ax.plot(xs, ys, zorder=2, **_stroke(OBSERVED))
            line.set_gid("observed-line")

        if len(forecast):
            xs, y0, y1 = band_points(forecast, x, y)
            band = ax.fill_between(xs, y0, y1, facecolor=CONFIDENCE.color,
                                   alpha=CONFIDENCE.opacity, linewidth=0, zorder=3)
            band.set_gid("confidence-band")

            xs, ys = line_points(forecast, x, y)
            line, = ax.plot(xs, ys, zorder=4, **_stroke(PROJECTED))
            line.set_gid("forecast-line")

        _draw_legend(ax, config)
    return fig


def render_svg(observed: pd.DataFrame, forecast: pd.DataFrame, x: TimeScale, y: LinearScale,
               config: ChartConfig = DEFAULT_CONFIG) -> str:
    fig = render_chart(observed, forecast, x, y, config)
    buf = io.StringIO()
    try:
        with plt.rc_context(_RC):
            fig.savefig(buf, format="svg", metadata={"Date": None})
    finally:
        plt.close(fig)
    svg = buf.getvalue()
    logger.debug("Rendered SVG (%s chars)", len(svg))
    return svg


def wrap_in_page(svg: str, config: ChartConfig = DEFAULT_CONFIG) -> str:
    """Embed the SVG in a minimal HTML page inside the chart container."""
    start = svg.find("<svg")
    body = svg[start:] if start >= 0 else svg
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n<meta charset=\"utf-8\">\n"
        f"<title>{TITLE}</title>\n"
        "</head>\n<body>\n"
        f"<div id=\"{config.container_id}\">\n{body.strip()}\n</div>\n"
        "</body>\n</html>\n"
    )
