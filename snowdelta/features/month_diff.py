"""
Month-to-month differences per pixel.

Pairs the start-month and end-month slices of the pixel records by their
(x, y) key and computes diff = value(end) - value(start). Pixels present in
only one slice raise AlignmentError instead of being silently paired with a
neighbour.

Usage:
    from snowdelta.features.month_diff import compute_month_diff

    diffs = compute_month_diff(records, 1, 12)
    diffs.columns  # x, y, diff, is_sea
"""

import logging

import pandas as pd

from snowdelta.errors import AlignmentError, InvalidRangeError, NoDataError
from snowdelta.features.sea_pixels import identify_sea_pixels

logger = logging.getLogger(__name__)

KEY = ["x", "y"]
DIFF_COLUMNS = ["x", "y", "diff", "is_sea"]


def validate_month_range(start_month, end_month):
    """Raise InvalidRangeError unless 1 <= start < end <= 12."""
    for m in (start_month, end_month):
        if not 1 <= m <= 12:
            raise InvalidRangeError(f"Month {m} is outside 1..12", start_month, end_month)
    if start_month >= end_month:
        raise InvalidRangeError("Start month must be before end month", start_month, end_month)


def _month_slice(records, month):
    """Records for one month, indexed by pixel key."""
    part = records.loc[records["month"] == month, KEY + ["value"]]
    dup = part.duplicated(subset=KEY, keep=False)
    if dup.any():
        keys = sorted({(int(x), int(y)) for x, y in part.loc[dup, KEY].itertuples(index=False)})
        raise AlignmentError(f"Duplicate pixel records in month {month}", keys, month=month)
    return part


def compute_month_diff(records, start_month, end_month, sea_pixels=None):
    """
    Signed change in value between two months for every pixel.

    Parameters
    ----------
    records : DataFrame with columns x, y, month, value
    start_month, end_month : int
        1..12, start strictly before end.
    sea_pixels : set of (x, y), optional
        Precomputed sea set; derived from ``records`` when omitted.

    Returns
    -------
    DataFrame with columns x, y, diff, is_sea, sorted by (x, y).
    """
    validate_month_range(start_month, end_month)

    start = _month_slice(records, start_month)
    end = _month_slice(records, end_month)
    missing = [m for m, part in ((start_month, start), (end_month, end)) if part.empty]
    if missing:
        raise NoDataError(missing)

    merged = start.merge(end, on=KEY, how="outer", suffixes=("_start", "_end"),
                         indicator=True)
    for side, month in (("left_only", end_month), ("right_only", start_month)):
        orphans = merged.loc[merged["_merge"] == side, KEY]
        if not orphans.empty:
            keys = sorted((int(x), int(y)) for x, y in orphans.itertuples(index=False))
            raise AlignmentError(
                f"{len(keys)} pixel(s) have no record for month {month}", keys, month=month
            )

    if sea_pixels is None:
        sea_pixels = identify_sea_pixels(records)

    diffs = pd.DataFrame({
        "x": merged["x"].astype(int),
        "y": merged["y"].astype(int),
        "diff": merged["value_end"] - merged["value_start"],
    })
    diffs["is_sea"] = [(x, y) in sea_pixels for x, y in zip(diffs["x"], diffs["y"])]
    diffs = diffs.sort_values(KEY).reset_index(drop=True)

    logger.debug("Month diff %d -> %d: %d pixels, %d sea",
                 start_month, end_month, len(diffs), int(diffs["is_sea"].sum()))
    return diffs[DIFF_COLUMNS]
