"""
tests/test_scales.py

Scale construction: domains, monotonicity, degenerate input and ticks.
"""

import re

import numpy as np
import pandas as pd
import pytest

from keeling_chart.config import DEFAULT_CONFIG
from keeling_chart.scales import LinearScale, TimeScale, build_x_scale, build_y_scale, y_domain


def _frame(yhat, upper):
    return pd.DataFrame({"yhat": yhat, "yhat_lower": yhat, "yhat_upper": upper})


class TestYDomain:
    def test_truncate_then_buffer(self) -> None:
        data = _frame([300.4, 350.0, 410.2], [305.0, 360.0, 420.9])
        assert y_domain(data, 10) == (290, 430)

    def test_lower_end_ignores_lower_bound(self) -> None:
        data = pd.DataFrame({"yhat": [300.4], "yhat_lower": [250.0], "yhat_upper": [301.0]})
        assert y_domain(data, 10)[0] == 290

    def test_truncates_toward_zero_for_negatives(self) -> None:
        data = _frame([-5.7, 1.0], [2.0, 3.9])
        assert y_domain(data, 10) == (-15, 13)

    def test_buffer_is_configurable(self) -> None:
        data = _frame([300.4], [420.9])
        assert y_domain(data, 0) == (300, 420)


class TestLinearScale:
    def test_inverted_range_endpoints(self) -> None:
        y = LinearScale((290, 430), (420, 0))
        assert y(290) == pytest.approx(420)
        assert y(430) == pytest.approx(0)
        assert y(360) == pytest.approx(210)

    def test_non_increasing(self) -> None:
        y = LinearScale((290, 430), (420, 0))
        values = np.linspace(250, 470, 50)
        assert np.all(np.diff(y(values)) <= 0)

    def test_degenerate_domain_maps_to_midpoint(self) -> None:
        y = LinearScale((5, 5), (420, 0))
        assert y(5) == pytest.approx(210)
        assert list(y([1, 5, 9])) == [210.0, 210.0, 210.0]

    def test_ticks_inside_domain(self) -> None:
        y = LinearScale((290, 430), (420, 0))
        ticks = y.ticks()
        assert 300 in ticks
        assert 400 in ticks
        assert all(290 <= t <= 430 for t in ticks)
        assert y.tick_labels([300.0, 320.0]) == ["300", "320"]


class TestTimeScale:
    def test_full_dataset_extent(self, keeling_frame) -> None:
        x = build_x_scale(keeling_frame, DEFAULT_CONFIG)
        assert x(keeling_frame["date"].iloc[0]) == pytest.approx(0)
        assert x(keeling_frame["date"].iloc[-1]) == pytest.approx(DEFAULT_CONFIG.width)

    def test_non_decreasing(self, keeling_frame) -> None:
        x = build_x_scale(keeling_frame, DEFAULT_CONFIG)
        xs = x(keeling_frame["date"])
        assert len(xs) == len(keeling_frame)
        assert np.all(np.diff(xs) >= 0)

    def test_scalar_and_vector_agree(self, keeling_frame) -> None:
        x = build_x_scale(keeling_frame, DEFAULT_CONFIG)
        xs = x(keeling_frame["date"])
        assert xs[100] == pytest.approx(x(keeling_frame["date"].iloc[100]))
        assert x("2000-01-01") == pytest.approx(x(pd.Timestamp("2000-01-01")))

    def test_single_date_maps_to_midpoint(self) -> None:
        x = TimeScale(("2020-01-01", "2020-01-01"), (0, 100))
        assert x("2020-01-01") == pytest.approx(50)

    def test_year_ticks(self, keeling_frame) -> None:
        x = build_x_scale(keeling_frame, DEFAULT_CONFIG)
        labels = x.tick_labels(x.ticks())
        assert "1960" in labels
        assert "2000" in labels
        assert labels == sorted(labels)
        assert 3 <= len(labels) <= 10

    def test_month_ticks_for_short_span(self, make_frame) -> None:
        data = make_frame(12, start="2021-01-01")
        x = build_x_scale(data, DEFAULT_CONFIG)
        labels = x.tick_labels(x.ticks())
        assert labels
        assert all(re.fullmatch(r"[A-Z][a-z]{2} 2021", label) for label in labels)
        assert all(0 <= x(t) <= DEFAULT_CONFIG.width + 1e-6 for t in x.ticks())


class TestBuildYScale:
    def test_uses_full_dataset(self, keeling_frame) -> None:
        y = build_y_scale(keeling_frame, DEFAULT_CONFIG)
        assert y.domain == y_domain(keeling_frame, DEFAULT_CONFIG.buffer)
        assert y.range == (DEFAULT_CONFIG.height, 0)
