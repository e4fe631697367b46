"""Test configuration and shared fixtures."""

import numpy as np
import pandas as pd
import pytest

from keeling_chart.loader import parse_dataset


def raw_frame(n: int, start: str = "1958-10-01", base: float = 315.0) -> pd.DataFrame:
    """Monthly rows in the CSV schema, ``ds`` as text, values rising 0.1 ppm/month."""
    dates = pd.date_range(start, periods=n, freq="MS")
    yhat = base + 0.1 * np.arange(n)
    return pd.DataFrame({
        "ds": dates.strftime("%Y-%m-%d"),
        "yhat": yhat,
        "yhat_lower": yhat - 1.0,
        "yhat_upper": yhat + 1.5,
    })


@pytest.fixture
def make_frame():
    """Factory for parsed datasets of a given length."""
    def _make(n: int, **kwargs) -> pd.DataFrame:
        return parse_dataset(raw_frame(n, **kwargs))
    return _make


@pytest.fixture
def keeling_frame(make_frame) -> pd.DataFrame:
    """740 monthly rows; row 735 (the 736th) is 2020-01-01."""
    return make_frame(740)


@pytest.fixture
def write_csv(tmp_path):
    """Write text or a frame to a CSV in tmp_path and return its path as str."""
    def _write(content, name: str = "keeling_data.csv") -> str:
        path = tmp_path / name
        if isinstance(content, pd.DataFrame):
            content.to_csv(path, index=False)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
