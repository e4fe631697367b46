# src/keeling_chart/partition.py
"""Split the dataset into the observed history and the forecast tail."""
import logging
from typing import Tuple

import pandas as pd

from keeling_chart.config import ChartConfig
from keeling_chart.errors import DataFormatError
from keeling_chart.loader import FLAG_COLUMN

logger = logging.getLogger(__name__)


def split_at_index(data: pd.DataFrame, split_index: int) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Observed is rows ``0..split_index`` inclusive, forecast is everything after.

    Short datasets are not an error: with fewer than ``split_index + 1`` rows
    the forecast half is simply empty.
    """
    if split_index < 0:
        raise ValueError(f"split_index must be >= 0, got {split_index}")
    return data.iloc[: split_index + 1], data.iloc[split_index + 1:]


def split_by_flag(data: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Split on the boolean ``is_forecast`` column, keeping row order.

    The flags must form one observed block followed by one forecast block;
    an observed row after a forecast row is a DataFormatError.
    """
    flag = data[FLAG_COLUMN].astype(bool)
    back_to_observed = ~flag & flag.cummax()
    if back_to_observed.any():
        rows = ", ".join(str(i) for i in data.index[back_to_observed][:5])
        raise DataFormatError(f"{FLAG_COLUMN} goes back to false after a forecast row (rows {rows})")
    return data[~flag], data[flag]


def partition(data: pd.DataFrame, config: ChartConfig) -> Tuple[pd.DataFrame, pd.DataFrame]:
    if config.use_forecast_flag and FLAG_COLUMN in data.columns:
        observed, forecast = split_by_flag(data)
        how = f"{FLAG_COLUMN} column"
    else:
        observed, forecast = split_at_index(data, config.split_index)
        how = f"row {config.split_index}"
    logger.info("Split at %s: %s observed, %s forecast rows", how, len(observed), len(forecast))
    return observed, forecast
