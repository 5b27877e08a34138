"""
Per-dataset entry point for the heatmap.

Computes the sea set once when the dataset is loaded, then answers
month-range and brush-selection queries from scratch on each call.
Month ranges default to heatmap.default_months from the config.

Usage:
    from snowdelta.engine import PixelEngine

    engine = PixelEngine.from_csv()
    diffs = engine.month_diff()
    summary = engine.summarize(diffs, RegionSelection(0, 0, 256, 256))
"""

from snowdelta.config import CFG
from snowdelta.data.load_records import check_grid_bounds, load_pixel_records
from snowdelta.features.month_diff import compute_month_diff
from snowdelta.features.sea_pixels import identify_sea_pixels, land_pixel_count
from snowdelta.region import summarize_region
from snowdelta.scene import heatmap_scene


class PixelEngine:
    def __init__(self, records, config=CFG):
        check_grid_bounds(records, config["grid"]["size"])
        self.records = records
        self.config = config
        self.sea_pixels = identify_sea_pixels(records)

    @classmethod
    def from_csv(cls, path=None, config=CFG):
        return cls(load_pixel_records(path, config["grid"]["size"]), config)

    @property
    def grid_size(self):
        return self.config["grid"]["size"]

    @property
    def cell_size(self):
        return self.config["grid"]["canvas_px"] / self.grid_size

    @property
    def land_pixels(self):
        return land_pixel_count(len(self.sea_pixels), self.grid_size)

    def _months(self, start_month, end_month):
        default_start, default_end = self.config["heatmap"]["default_months"]
        return (default_start if start_month is None else start_month,
                default_end if end_month is None else end_month)

    def month_diff(self, start_month=None, end_month=None):
        start_month, end_month = self._months(start_month, end_month)
        return compute_month_diff(self.records, start_month, end_month, self.sea_pixels)

    def summarize(self, diffs, selection):
        heat = self.config["heatmap"]
        return summarize_region(
            diffs,
            selection,
            n_sea=len(self.sea_pixels),
            thresholds=heat["thresholds"],
            colors=heat["colors"],
            descriptions=heat["band_descriptions"],
            grid_size=self.grid_size,
            cell_size=self.cell_size,
        )

    def scene(self, start_month=None, end_month=None):
        start_month, end_month = self._months(start_month, end_month)
        diffs = self.month_diff(start_month, end_month)
        return heatmap_scene(diffs, start_month, end_month, self.config)
