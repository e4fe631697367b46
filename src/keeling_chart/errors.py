# src/keeling_chart/errors.py
"""Errors raised while loading the chart data."""
from typing import Optional


class ChartDataError(Exception):
    """Base class: the chart cannot be drawn from this source."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        msg = super().__str__()
        if self.source:
            return f"{msg} (source: {self.source})"
        return msg


class DataLoadError(ChartDataError):
    """The CSV could not be fetched or opened."""


class DataFormatError(ChartDataError):
    """The CSV was read but rows are missing columns or hold bad values."""
