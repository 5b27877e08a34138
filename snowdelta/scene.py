"""
Render descriptions for the two charts.

Each builder takes the data and the chosen range explicitly and returns a
plain dict describing what to draw. Nothing here touches a shared canvas;
the presentation layer only maps these dicts to SVG.
"""

import numpy as np

from snowdelta.bands import classify_bands, legend_entries
from snowdelta.config import CFG
from snowdelta.features.month_diff import validate_month_range
from snowdelta.timeseries import build_year_series, month_extent, value_extent

SEA_OPACITY = 0.0


def _grid_geometry(config):
    size = config["grid"]["size"]
    canvas = config["grid"]["canvas_px"]
    return size, canvas, canvas / size


def heatmap_title(start_month, end_month, month_labels):
    return (
        "Change in Snow Coverage by Antarctica between "
        f"{month_labels[start_month - 1]} to {month_labels[end_month - 1]}"
    )


def landmark_marks(landmarks):
    """Circle + label positions; labels sit 8px above the point."""
    return [
        {
            "name": lm["name"],
            "cx": lm["pixel_x"],
            "cy": lm["pixel_y"],
            "label_x": lm["pixel_x"],
            "label_y": lm["pixel_y"] - 8,
        }
        for lm in landmarks
    ]


def heatmap_scene(diffs, start_month, end_month, config=CFG):
    """
    Describe the difference heatmap.

    Parameters
    ----------
    diffs : DataFrame with columns x, y, diff, is_sea
    start_month, end_month : int
    config : dict, defaults to the loaded CFG

    Returns
    -------
    dict with keys cells, legend, landmarks, title, extent
    """
    validate_month_range(start_month, end_month)
    _, canvas, cell = _grid_geometry(config)
    heat = config["heatmap"]
    thresholds, colors = heat["thresholds"], heat["colors"]

    is_sea = diffs["is_sea"].to_numpy(dtype=bool)
    bands = np.full(len(diffs), -1)
    bands[~is_sea] = classify_bands(diffs["diff"].to_numpy()[~is_sea], thresholds)

    cells = []
    for x, y, sea, band in zip(diffs["x"], diffs["y"], is_sea, bands):
        cells.append({
            "x": (int(x) - 1) * cell,
            "y": (int(y) - 1) * cell,
            "width": cell,
            "height": cell,
            "fill": heat["sea_color"] if sea else colors[band],
            "opacity": SEA_OPACITY if sea else 1.0,
            "band": None if sea else int(band),
        })

    return {
        "cells": cells,
        "legend": legend_entries(thresholds, colors),
        "landmarks": landmark_marks(config.get("landmarks", [])),
        "title": heatmap_title(start_month, end_month, heat["month_labels"]),
        "extent": [[0, 0], [canvas, canvas]],
    }


def line_plot_scene(series, start_year, end_year, config=CFG):
    """
    Describe the yearly line plot.

    Returns
    -------
    dict with keys series, x_domain, y_domain, legend
    """
    plot = config["lineplot"]
    lines = build_year_series(series, start_year, end_year,
                              palette=plot["palette"],
                              max_span=int(plot["max_span_years"]))
    return {
        "series": [
            {"year": s.year, "color": s.color, "points": s.points} for s in lines
        ],
        "x_domain": list(month_extent(series)),
        "y_domain": list(value_extent(series, start_year, end_year)),
        "legend": [{"color": s.color, "label": str(s.year)} for s in lines],
    }
