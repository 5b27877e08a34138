"""
Centralized configuration loader for SnowDelta.

Usage:
    from snowdelta.config import CFG, GRID_SIZE, THRESHOLDS

    colors = CFG["heatmap"]["colors"]
    landmarks = CFG["landmarks"]
"""

import os

import yaml

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "viz_config.yml")

N_BANDS = 5


def validate_config(cfg):
    """Check the keys the engine relies on. Raises ValueError."""
    if not isinstance(cfg, dict):
        raise ValueError("Config must be a YAML mapping")
    for section in ("grid", "heatmap", "lineplot"):
        if not isinstance(cfg.get(section), dict):
            raise ValueError(f"Config missing '{section}:' section")

    size = cfg["grid"].get("size")
    canvas = cfg["grid"].get("canvas_px")
    if not isinstance(size, int) or size <= 0:
        raise ValueError(f"grid.size must be a positive integer, got {size!r}")
    if not isinstance(canvas, (int, float)) or canvas <= 0:
        raise ValueError(f"grid.canvas_px must be positive, got {canvas!r}")

    heat = cfg["heatmap"]
    thresholds = heat.get("thresholds") or []
    if len(thresholds) != N_BANDS - 1:
        raise ValueError(f"heatmap.thresholds needs {N_BANDS - 1} values, got {len(thresholds)}")
    if any(b <= a for a, b in zip(thresholds, thresholds[1:])):
        raise ValueError(f"heatmap.thresholds must be strictly ascending: {thresholds}")
    for key in ("colors", "band_descriptions"):
        if len(heat.get(key) or []) != N_BANDS:
            raise ValueError(f"heatmap.{key} needs {N_BANDS} entries")
    if len(heat.get("month_labels") or []) != 12:
        raise ValueError("heatmap.month_labels needs 12 entries")
    default = heat.get("default_months") or []
    if len(default) != 2 or not 1 <= default[0] < default[1] <= 12:
        raise ValueError(f"heatmap.default_months must be [start, end] within 1..12, got {default}")

    if not cfg["lineplot"].get("palette"):
        raise ValueError("lineplot.palette must not be empty")
    if int(cfg["lineplot"].get("max_span_years", 0)) < 2:
        raise ValueError("lineplot.max_span_years must be >= 2")
    return cfg


def load_config(path=CONFIG_PATH):
    """Load and validate a visualization config file."""
    with open(path, "r") as f:
        cfg = yaml.safe_load(f)
    validate_config(cfg)
    cfg.setdefault("landmarks", [])
    return cfg


CFG = load_config()

# Convenience constants
GRID_SIZE = CFG["grid"]["size"]
CANVAS_PX = CFG["grid"]["canvas_px"]
CELL_SIZE = CANVAS_PX / GRID_SIZE
THRESHOLDS = tuple(CFG["heatmap"]["thresholds"])
BAND_COLORS = tuple(CFG["heatmap"]["colors"])
MAX_SPAN_YEARS = int(CFG["lineplot"]["max_span_years"])
