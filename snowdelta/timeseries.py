"""
Year-over-year monthly series for the line plot.

One line per year across the selected (inclusive) year range, x = month,
y = value. Ranges are limited to MAX_SPAN_YEARS years so the plot stays
readable.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from snowdelta.config import CFG, MAX_SPAN_YEARS
from snowdelta.errors import InvalidRangeError, NoDataError

logger = logging.getLogger(__name__)

PALETTE = tuple(CFG["lineplot"]["palette"])


@dataclass
class YearSeries:
    year: int
    color: str
    points: List[Tuple[int, float]] = field(default_factory=list)


def validate_year_range(start_year, end_year, max_span=MAX_SPAN_YEARS):
    if start_year >= end_year:
        raise InvalidRangeError("Start year must be before end year", start_year, end_year)
    if end_year - start_year > max_span - 1:
        raise InvalidRangeError(
            f"You can only select a range of up to {max_span} years", start_year, end_year
        )


def default_year_range(series, max_span=MAX_SPAN_YEARS):
    """First year in the data and the year max_span - 1 after it."""
    if series.empty:
        raise NoDataError([], unit="year")
    first = int(series["year"].min())
    return first, first + max_span - 1


def _in_range(series, start_year, end_year):
    return series[series["year"].between(start_year, end_year)]


def build_year_series(series, start_year, end_year, palette=PALETTE,
                      max_span=MAX_SPAN_YEARS):
    """
    Parameters
    ----------
    series : DataFrame with columns year, month, value
    start_year, end_year : int
        Inclusive range.

    Returns
    -------
    list of YearSeries, one per year; years without data have no points.
    """
    validate_year_range(start_year, end_year, max_span)
    selected = _in_range(series, start_year, end_year)
    out = []
    for i, year in enumerate(range(start_year, end_year + 1)):
        rows = selected[selected["year"] == year].sort_values("month")
        points = [(int(m), float(v)) for m, v in zip(rows["month"], rows["value"])]
        out.append(YearSeries(year=year, color=palette[i % len(palette)], points=points))
    logger.debug("Built %d year series for %d-%d", len(out), start_year, end_year)
    return out


def value_extent(series, start_year, end_year):
    """(min, max) of value within the selected years."""
    selected = _in_range(series, start_year, end_year)
    if selected.empty:
        raise NoDataError(list(range(start_year, end_year + 1)), unit="year")
    return float(selected["value"].min()), float(selected["value"].max())


def month_extent(series):
    """(first, last) month across all data."""
    if series.empty:
        raise NoDataError([], unit="month")
    return int(series["month"].min()), int(series["month"].max())
