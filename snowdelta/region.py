"""
Brush-selection statistics over the difference grid.

A selection is a rectangle in rendered canvas coordinates. A cell is
selected when its rendered origin ((x - 1) * cell_size, (y - 1) * cell_size)
lies inside the rectangle, edges included. Sea cells are never counted.

Percentages are "percent of Antarctica": the denominator is the number of
non-sea cells on the whole grid (G*G - |sea|), not the selection size.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from snowdelta.bands import BAND_DESCRIPTIONS, classify_bands, legend_entries
from snowdelta.config import BAND_COLORS, CELL_SIZE, GRID_SIZE, N_BANDS, THRESHOLDS
from snowdelta.features.sea_pixels import land_pixel_count


@dataclass(frozen=True)
class RegionSelection:
    """Axis-aligned rectangle; corners may be given in any order."""
    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_brush(cls, selection):
        """Build from a d3-style [[x0, y0], [x1, y1]] pair (None passes through)."""
        if selection is None:
            return None
        (x0, y0), (x1, y1) = selection
        return cls(x0, y0, x1, y1)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (min(self.x0, self.x1), min(self.y0, self.y1),
                max(self.x0, self.x1), max(self.y0, self.y1))

    def contains(self, px, py):
        """Inclusive containment; works elementwise on arrays."""
        xmin, ymin, xmax, ymax = self.bounds
        return (px >= xmin) & (px <= xmax) & (py >= ymin) & (py <= ymax)


@dataclass(frozen=True)
class BandCount:
    band: int
    label: str
    description: str
    color: str
    count: int
    percent: float


@dataclass(frozen=True)
class RegionSummary:
    selected: int
    percent: float
    bands: List[BandCount] = field(default_factory=list)

    @property
    def is_empty(self):
        return self.selected == 0


def cell_origins(diffs, cell_size=CELL_SIZE):
    """Rendered top-left corner of every cell in ``diffs``."""
    px = (diffs["x"].to_numpy() - 1) * cell_size
    py = (diffs["y"].to_numpy() - 1) * cell_size
    return px, py


def _percent(count, denominator):
    if denominator <= 0:
        return 0.0
    return count / denominator * 100.0


def summarize_region(
    diffs,
    selection: Optional[RegionSelection],
    n_sea: int,
    thresholds=THRESHOLDS,
    colors=BAND_COLORS,
    descriptions=BAND_DESCRIPTIONS,
    grid_size: int = GRID_SIZE,
    cell_size: float = CELL_SIZE,
) -> RegionSummary:
    """
    Count selected non-sea cells per band.

    Parameters
    ----------
    diffs : DataFrame with columns x, y, diff, is_sea
    selection : RegionSelection or None
    n_sea : int
        Size of the sea set for this dataset.

    Returns
    -------
    RegionSummary; all counts are zero when nothing is selected.
    """
    denominator = land_pixel_count(n_sea, grid_size)
    legend = legend_entries(thresholds, colors)

    counts = np.zeros(N_BANDS, dtype=int)
    if selection is not None and len(diffs):
        px, py = cell_origins(diffs, cell_size)
        mask = selection.contains(px, py) & ~diffs["is_sea"].to_numpy(dtype=bool)
        if mask.any():
            bands = classify_bands(diffs["diff"].to_numpy()[mask], thresholds)
            counts = np.bincount(bands, minlength=N_BANDS)

    total = int(counts.sum())
    return RegionSummary(
        selected=total,
        percent=_percent(total, denominator),
        bands=[
            BandCount(
                band=i,
                label=legend[i]["label"],
                description=descriptions[i],
                color=colors[i],
                count=int(counts[i]),
                percent=_percent(int(counts[i]), denominator),
            )
            for i in range(N_BANDS)
        ],
    )


def format_summary(summary: Optional[RegionSummary], area_name="Antarctica"):
    """Plain-text stats panel, omitting bands with no selected cells."""
    if summary is None:
        return "No region selected"
    lines = [f"{summary.percent:.2f}% of {area_name} selected:"]
    for b in summary.bands:
        if b.count > 0:
            lines.append(f"{b.percent:.3f}%  {b.description}")
    return "\n".join(lines)
