# src/keeling_chart/scales.py
"""
Scales map data values to plot pixels.

Both scales are plain callables built once per render from the full dataset:
x maps the date extent onto ``[0, width]`` and y maps the value domain onto
``[height, 0]`` (inverted, larger values draw higher). They accept a scalar
or an array-like and return a float or a numpy array.
"""
import math
import logging
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd
import matplotlib.dates as mdates
from matplotlib.ticker import MaxNLocator

from keeling_chart.config import ChartConfig

logger = logging.getLogger(__name__)

_YEAR_STEPS = [1, 2, 5, 10, 20, 25, 50, 100, 200, 500]
_MONTH_STEPS = [1, 2, 3, 6]


class LinearScale:
    def __init__(self, domain: Tuple[float, float], range_: Tuple[float, float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    def _map(self, values: np.ndarray) -> np.ndarray:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            # nothing to spread over: everything sits mid-range
            return np.full_like(values, (r0 + r1) / 2.0, dtype=float)
        return r0 + (values - d0) / (d1 - d0) * (r1 - r0)

    def __call__(self, value):
        out = self._map(np.asarray(value, dtype=float))
        if out.ndim == 0:
            return float(out)
        return out

    def ticks(self, count: int = 10) -> List[float]:
        lo, hi = sorted(self.domain)
        if lo == hi:
            return [lo]
        locator = MaxNLocator(nbins=count, steps=[1, 2, 2.5, 5, 10])
        eps = (hi - lo) * 1e-9
        return [float(t) for t in locator.tick_values(lo, hi) if lo - eps <= t <= hi + eps]

    def tick_labels(self, ticks: Sequence[float]) -> List[str]:
        return [f"{t:g}" for t in ticks]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(domain={self.domain}, range={self.range})"


class TimeScale(LinearScale):
    """LinearScale over dates (matplotlib date numbers under the hood)."""

    def __init__(self, domain, range_: Tuple[float, float]):
        self.dates = (pd.Timestamp(domain[0]), pd.Timestamp(domain[1]))
        super().__init__((_date_num(self.dates[0]), _date_num(self.dates[1])), range_)

    def __call__(self, value):
        if isinstance(value, (pd.Series, pd.Index, np.ndarray, list, tuple)):
            nums = mdates.date2num(pd.DatetimeIndex(value).to_pydatetime())
            return self._map(np.asarray(nums, dtype=float))
        return float(self._map(np.asarray(_date_num(value), dtype=float)))

    @property
    def span_years(self) -> float:
        return (self.dates[1] - self.dates[0]).days / 365.25

    def _locator(self, count: int):
        if self.span_years >= 2:
            base = next((b for b in _YEAR_STEPS if self.span_years / b <= count), _YEAR_STEPS[-1])
            return mdates.YearLocator(base=base)
        months = self.span_years * 12
        step = next((m for m in _MONTH_STEPS if months / m <= count), 12)
        return mdates.MonthLocator(interval=step)

    def ticks(self, count: int = 10) -> list:
        """Year (or month, for short spans) boundaries inside the domain."""
        lo, hi = self.domain
        if lo == hi:
            return [mdates.num2date(lo)]
        locator = self._locator(count)
        values = locator.tick_values(mdates.num2date(lo), mdates.num2date(hi))
        return [mdates.num2date(v) for v in values if lo <= v <= hi]

    def tick_labels(self, ticks) -> List[str]:
        fmt = "%Y" if self.span_years >= 2 else "%b %Y"
        return [t.strftime(fmt) for t in ticks]


def _date_num(value) -> float:
    return float(mdates.date2num(pd.Timestamp(value).to_pydatetime()))


def y_domain(data: pd.DataFrame, buffer: float) -> Tuple[float, float]:
    """
    Value domain: truncate the extremes toward zero, then pad by ``buffer``.

    Lower end comes from the central estimate, upper end from the upper bound,
    e.g. min(yhat)=300.4 and max(yhat_upper)=420.9 with buffer 10 give
    (290, 430).
    """
    low = math.trunc(data["yhat"].min()) - buffer
    high = math.trunc(data["yhat_upper"].max()) + buffer
    return low, high


def build_x_scale(data: pd.DataFrame, config: ChartConfig) -> TimeScale:
    scale = TimeScale((data["date"].min(), data["date"].max()), (0, config.width))
    logger.debug("x scale: %s .. %s -> 0 .. %s", scale.dates[0], scale.dates[1], config.width)
    return scale


def build_y_scale(data: pd.DataFrame, config: ChartConfig) -> LinearScale:
    scale = LinearScale(y_domain(data, config.buffer), (config.height, 0))
    logger.debug("y scale: %s", scale)
    return scale
