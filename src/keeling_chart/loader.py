# src/keeling_chart/loader.py
"""
Load the Keeling curve CSV.

The source is a URL or a local path, read with pandas. Rows come back in file
order with ``ds`` parsed into a ``date`` column and the estimate/bound columns
as floats. Failures are classified:

- DataLoadError: the resource could not be fetched/opened
- DataFormatError: it was read but is empty, misses a column, or holds an
  unparsable date or number
"""
import logging
from typing import Optional

import pandas as pd

from keeling_chart.config import default_source
from keeling_chart.errors import DataFormatError, DataLoadError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
VALUE_COLUMNS = ["yhat", "yhat_lower", "yhat_upper"]
REQUIRED_COLUMNS = ["ds"] + VALUE_COLUMNS
FLAG_COLUMN = "is_forecast"

_TRUE = {"true", "1", "yes", "y", "t"}
_FALSE = {"false", "0", "no", "n", "f", ""}


def load_dataset(source: Optional[str] = None) -> pd.DataFrame:
    """Fetch ``source`` (default: configured data URL) and parse it."""
    source = source or default_source()
    logger.info("Loading CO2 data from %s", source)
    try:
        frame = pd.read_csv(source)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DataFormatError(f"unreadable CSV: {e}", source=source) from e
    except OSError as e:
        # urllib's URLError/HTTPError are OSError subclasses
        raise DataLoadError(f"could not fetch CSV: {e}", source=source) from e

    data = parse_dataset(frame, source=source)
    logger.info("Loaded %s rows (%s .. %s)", len(data), data["ds"].iloc[0], data["ds"].iloc[-1])
    return data


def _bad_rows(mask: pd.Series, values: pd.Series, limit: int = 5) -> str:
    bad = values[mask].head(limit)
    return ", ".join(f"row {i}: {v!r}" for i, v in bad.items())


def _parse_flag(column: pd.Series, source: Optional[str]) -> pd.Series:
    if column.dtype == bool:
        return column
    if pd.api.types.is_numeric_dtype(column):
        # 0/1 flags with blanks come back from read_csv as float64
        unknown = column.notna() & ~column.isin([0, 1])
        if unknown.any():
            raise DataFormatError(
                f"unrecognised {FLAG_COLUMN} values ({_bad_rows(unknown, column)})", source=source
            )
        return column.fillna(0).astype(bool)
    text = column.fillna("").astype(str).str.strip().str.lower()
    unknown = ~text.isin(_TRUE | _FALSE)
    if unknown.any():
        raise DataFormatError(
            f"unrecognised {FLAG_COLUMN} values ({_bad_rows(unknown, column)})", source=source
        )
    return text.isin(_TRUE)


def parse_dataset(frame: pd.DataFrame, source: Optional[str] = None) -> pd.DataFrame:
    """
    Validate a raw CSV frame and return a new frame with a ``date`` column.

    The input frame is left untouched. Row order is kept as-is; the data is
    assumed to be sorted by date already.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise DataFormatError(f"missing column(s): {', '.join(missing)}", source=source)
    if frame.empty:
        raise DataFormatError("CSV has no data rows", source=source)

    data = frame.reset_index(drop=True).copy()

    dates = pd.to_datetime(data["ds"].astype(str), format=DATE_FORMAT, errors="coerce")
    if dates.isna().any():
        raise DataFormatError(
            f"unparsable ds values ({_bad_rows(dates.isna(), data['ds'])})", source=source
        )
    data["date"] = dates

    for col in VALUE_COLUMNS:
        values = pd.to_numeric(data[col], errors="coerce")
        if values.isna().any():
            raise DataFormatError(
                f"non-numeric {col} values ({_bad_rows(values.isna(), data[col])})", source=source
            )
        data[col] = values.astype(float)

    if FLAG_COLUMN in data.columns:
        data[FLAG_COLUMN] = _parse_flag(data[FLAG_COLUMN], source)

    return data
