"""
Unit tests for snowdelta/region.py: brush selection statistics.

Run with:  python -m pytest tests/test_region.py -v
"""

import sys
import os

import pandas as pd
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from snowdelta.features.month_diff import compute_month_diff  # noqa: E402
from snowdelta.features.sea_pixels import identify_sea_pixels, land_pixel_count  # noqa: E402
from snowdelta.region import (  # noqa: E402
    RegionSelection,
    format_summary,
    summarize_region,
)

THRESHOLDS = [-25, 0, 0.00001, 25]
COLORS = ["#d73027", "#fc8d59", "#ffffbf", "#91bfdb", "#4575b4"]
GRID = 4
CELL = 4.0  # 16px canvas


# -- Fixtures ---------------------------------------------------------------

@pytest.fixture
def diffs():
    """4x4 grid of diffs: one cell per band along row y=1, sea at (1, 4)."""
    values = {(1, 1): -30.0, (2, 1): -10.0, (3, 1): 0.0, (4, 1): 10.0}
    rows = []
    for x in range(1, GRID + 1):
        for y in range(1, GRID + 1):
            rows.append({
                "x": x, "y": y,
                "diff": values.get((x, y), 30.0),
                "is_sea": (x, y) == (1, 4),
            })
    return pd.DataFrame(rows)


def _summarize(diffs, selection, n_sea=1):
    return summarize_region(diffs, selection, n_sea=n_sea, thresholds=THRESHOLDS,
                            colors=COLORS, grid_size=GRID, cell_size=CELL)


# -- Selection geometry ------------------------------------------------------

class TestRegionSelection:
    def test_inclusive_edges(self):
        sel = RegionSelection(0, 0, 4, 4)
        assert sel.contains(0, 0) and sel.contains(4, 4)
        assert not sel.contains(4.01, 0)

    def test_corner_order_irrelevant(self):
        assert RegionSelection(10, 10, 0, 0).bounds == (0, 0, 10, 10)

    def test_from_brush(self):
        assert RegionSelection.from_brush([[1, 2], [3, 4]]) == RegionSelection(1, 2, 3, 4)
        assert RegionSelection.from_brush(None) is None


# -- Summaries ---------------------------------------------------------------

class TestSummarizeRegion:
    def test_whole_grid(self, diffs):
        s = _summarize(diffs, RegionSelection(0, 0, 16, 16))
        assert s.selected == 15
        assert [b.count for b in s.bands] == [1, 1, 1, 1, 11]
        assert s.percent == pytest.approx(100.0)

    def test_band_counts_sum_to_selected(self, diffs):
        s = _summarize(diffs, RegionSelection(0, 0, 9, 9))
        assert sum(b.count for b in s.bands) == s.selected
        assert sum(b.percent for b in s.bands) == pytest.approx(s.percent)

    def test_denominator_is_land_area_not_selection(self, diffs):
        # origins (0,0) and (4,0): cells (1,1) and (2,1)
        s = _summarize(diffs, RegionSelection(0, 0, 4, 0))
        assert s.selected == 2
        assert s.percent == pytest.approx(2 / (16 - 1) * 100)
        assert s.bands[0].percent == pytest.approx(1 / 15 * 100)

    def test_denominator_matches_land_pixel_count(self, diffs):
        s = _summarize(diffs, RegionSelection(0, 0, 0, 0), n_sea=3)
        assert s.selected == 1
        assert s.percent == pytest.approx(100 / land_pixel_count(3, GRID))
        assert s.percent == pytest.approx(100 / 13)

    def test_sea_never_counted(self, diffs):
        # (1, 4) has origin (0, 12)
        s = _summarize(diffs, RegionSelection(0, 12, 0, 12))
        assert s.selected == 0
        assert s.is_empty

    def test_no_selection(self, diffs):
        s = _summarize(diffs, None)
        assert s.selected == 0
        assert s.percent == 0.0
        assert all(b.count == 0 for b in s.bands)
        assert len(s.bands) == 5

    def test_selection_outside_grid(self, diffs):
        s = _summarize(diffs, RegionSelection(100, 100, 200, 200))
        assert s.is_empty

    def test_empty_diffs(self, diffs):
        s = _summarize(diffs.iloc[0:0], RegionSelection(0, 0, 16, 16))
        assert s.selected == 0

    def test_all_sea_grid_has_zero_percent(self, diffs):
        s = _summarize(diffs, RegionSelection(0, 0, 16, 16), n_sea=GRID * GRID)
        assert s.percent == 0.0

    def test_idempotent(self, diffs):
        sel = RegionSelection(0, 0, 8, 8)
        before = diffs.copy()
        assert _summarize(diffs, sel) == _summarize(diffs, sel)
        assert diffs.equals(before)

    def test_band_metadata(self, diffs):
        s = _summarize(diffs, RegionSelection(0, 0, 16, 16))
        assert s.bands[2].label == "0%"
        assert s.bands[2].color == "#ffffbf"
        assert s.bands[4].description == "Significant Increase in NDSI"

    def test_end_to_end_with_sea_pixel(self):
        rows = [
            {"x": x, "y": y, "month": m,
             "value": 0.0 if (x, y) == (5, 5) else float(m)}
            for m in range(1, 13) for x in range(1, 7) for y in range(1, 7)
        ]
        records = pd.DataFrame(rows)
        sea = identify_sea_pixels(records)
        d = compute_month_diff(records, 1, 12, sea)
        s = summarize_region(d, RegionSelection(0, 0, 100, 100), n_sea=len(sea),
                             thresholds=THRESHOLDS, colors=COLORS,
                             grid_size=6, cell_size=CELL)
        assert s.selected == 35
        assert s.bands[3].count == 35  # diff = 11


class TestFormatSummary:
    def test_no_region(self):
        assert format_summary(None) == "No region selected"

    def test_omits_empty_bands(self, diffs):
        s = _summarize(diffs, RegionSelection(0, 0, 4, 0))
        text = format_summary(s)
        lines = text.splitlines()
        assert lines[0] == "13.33% of Antarctica selected:"
        assert lines[1] == "6.667%  Significant Decrease in NDSI"
        assert lines[2] == "6.667%  Moderate Decrease in NDSI"
        assert len(lines) == 3
