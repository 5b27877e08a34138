"""
Threshold classification of month-to-month differences.

Four ascending thresholds t0 < t1 < t2 < t3 split the real line into five
bands:

    band 0 : (-inf, t0)
    band 1 : [t0, t1)
    band 2 : [t1, t2)
    band 3 : [t2, t3)
    band 4 : [t3, +inf)

A value equal to a threshold falls in the band above it. With the default
thresholds (-25, 0, 1e-5, 25) band 2 is effectively "exactly 0%".

Usage:
    from snowdelta.bands import classify_band, classify_bands, legend_entries

    classify_band(-25.0)         # 1
    classify_bands(diffs["diff"])  # ndarray of band indices
"""

import math

import numpy as np

from snowdelta.config import BAND_COLORS, CFG, N_BANDS, THRESHOLDS

BAND_DESCRIPTIONS = tuple(CFG["heatmap"]["band_descriptions"])


def check_thresholds(thresholds):
    """Return thresholds as a tuple of floats, or raise ValueError."""
    t = tuple(float(v) for v in thresholds)
    if len(t) != N_BANDS - 1:
        raise ValueError(f"Expected {N_BANDS - 1} thresholds, got {len(t)}")
    if not all(math.isfinite(v) for v in t):
        raise ValueError(f"Thresholds must be finite: {t}")
    if any(b <= a for a, b in zip(t, t[1:])):
        raise ValueError(f"Thresholds must be strictly ascending: {t}")
    return t


def classify_band(diff, thresholds=THRESHOLDS):
    """Band index (0..4) for a single difference value."""
    t = check_thresholds(thresholds)
    if math.isnan(diff):
        raise ValueError("Cannot classify NaN difference")
    band = 0
    for cut in t:
        if diff >= cut:
            band += 1
    return band


def classify_bands(diffs, thresholds=THRESHOLDS):
    """
    Vectorized classify_band.

    Parameters
    ----------
    diffs : array-like of float
    thresholds : sequence of 4 floats

    Returns
    -------
    ndarray of int, same length as ``diffs``
    """
    t = np.asarray(check_thresholds(thresholds))
    values = np.asarray(diffs, dtype=float)
    if np.isnan(values).any():
        raise ValueError("Cannot classify NaN difference")
    return np.searchsorted(t, values, side="right")


def band_color(diff, thresholds=THRESHOLDS, colors=BAND_COLORS):
    """Color token for a difference value."""
    return colors[classify_band(diff, thresholds)]


def legend_entries(thresholds=THRESHOLDS, colors=BAND_COLORS):
    """
    Legend rows for the heatmap, one per band.

    Labels are rounded to whole percents, so the near-zero band collapses
    to "0%".
    """
    t0, t1, t2, t3 = check_thresholds(thresholds)
    labels = [
        f"< {t0:.0f}%",
        f"{t0:.0f} – {t1:.0f}%",
        f"{t1:.0f}%",
        f"{t2:.0f} – {t3:.0f}%",
        f"> {t3:.0f}%",
    ]
    return [{"color": c, "label": lab} for c, lab in zip(colors, labels)]
