"""
Load the chart CSVs into normalized pandas tables.

Two inputs:
  1. Heatmap pixels (`x_px, y_px, month, avgNDSI`), one row per pixel per
     month, returned with columns `x, y, month, value`.
  2. Line-plot series (`year, month, density`), returned with columns
     `year, month, value`.

Usage:
    from snowdelta.data.load_records import load_pixel_records

    records = load_pixel_records("visualization/all_months.csv")
"""

import logging
import os

import pandas as pd

from snowdelta.config import CFG, GRID_SIZE, PROJECT_ROOT
from snowdelta.errors import MissingColumnError

logger = logging.getLogger(__name__)

PIXEL_COLUMNS = {"x_px": "x", "y_px": "y", "month": "month", "avgNDSI": "value"}
SERIES_COLUMNS = {"year": "year", "month": "month", "density": "value"}
MAX_LOGGED_KEYS = 10


def _normalize(df, columns):
    """Rename source columns, coerce types, drop everything else."""
    for src in columns:
        if src not in df.columns:
            raise MissingColumnError(src, found=list(df.columns))
    out = df[list(columns)].rename(columns=columns).copy()
    for dst in columns.values():
        if dst == "value":
            out[dst] = pd.to_numeric(out[dst], errors="coerce").astype(float)
        else:
            out[dst] = pd.to_numeric(out[dst], errors="raise").astype(int)
    bad = out["value"].isna()
    if bad.any():
        key_cols = [c for c in out.columns if c != "value"]
        keys = [tuple(int(v) for v in row)
                for row in out.loc[bad, key_cols].itertuples(index=False)]
        more = f" (+{len(keys) - MAX_LOGGED_KEYS} more)" if len(keys) > MAX_LOGGED_KEYS else ""
        logger.warning("Dropping %d rows with non-numeric values at (%s): %s%s",
                       len(keys), ", ".join(key_cols), keys[:MAX_LOGGED_KEYS], more)
        out = out[~bad]
    return out.reset_index(drop=True)


def check_grid_bounds(records, grid_size=GRID_SIZE):
    """Raise ValueError if any x or y lies outside 1..grid_size."""
    for col in ("x", "y"):
        bad = ~records[col].between(1, grid_size)
        if bad.any():
            raise ValueError(
                f"{int(bad.sum())} rows have {col} outside 1..{grid_size}: "
                f"{sorted(records.loc[bad, col].unique())[:5]}"
            )


def pixel_records_from_frame(df, grid_size=GRID_SIZE):
    """Normalize an already-parsed heatmap table."""
    records = _normalize(df, PIXEL_COLUMNS)
    bad = ~records["month"].between(1, 12)
    if bad.any():
        raise ValueError(
            f"{int(bad.sum())} rows have month outside 1..12: "
            f"{sorted(records.loc[bad, 'month'].unique())[:5]}"
        )
    check_grid_bounds(records, grid_size)
    return records


def series_from_frame(df):
    """Normalize an already-parsed line-plot table."""
    return _normalize(df, SERIES_COLUMNS)


def _resolve(path):
    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


def load_pixel_records(path=None, grid_size=GRID_SIZE):
    """Read the heatmap CSV (defaults to data.heatmap_csv in config)."""
    path = _resolve(path or CFG["data"]["heatmap_csv"])
    if not os.path.exists(path):
        raise FileNotFoundError(f"Missing: {path}")
    records = pixel_records_from_frame(pd.read_csv(path), grid_size)
    n_pixels = len(records[["x", "y"]].drop_duplicates())
    logger.info("Loaded %d pixel records (%d pixels) from %s", len(records), n_pixels, path)
    return records


def load_series(path=None):
    """Read the line-plot CSV (defaults to data.lineplot_csv in config)."""
    path = _resolve(path or CFG["data"]["lineplot_csv"])
    if not os.path.exists(path):
        raise FileNotFoundError(f"Missing: {path}")
    series = series_from_frame(pd.read_csv(path))
    logger.info("Loaded %d series rows (%d years) from %s",
                len(series), series["year"].nunique(), path)
    return series
