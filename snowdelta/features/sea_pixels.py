"""
Sea-pixel classification.

A pixel is permanent open water ("sea") when it has exactly 12 monthly
records whose value is exactly zero. Missing months count against it: a
pixel with only 11 zero-valued records is land, even if nothing else is
recorded for it. Extra non-zero records do not affect membership.
"""

import logging

logger = logging.getLogger(__name__)

N_MONTHS = 12


def identify_sea_pixels(records):
    """
    Return the set of (x, y) keys classified as sea.

    Parameters
    ----------
    records : DataFrame with columns x, y, month, value

    Returns
    -------
    frozenset of (int, int)
    """
    zeros = records.loc[records["value"] == 0, ["x", "y"]]
    counts = zeros.groupby(["x", "y"]).size()
    sea = frozenset(
        (int(x), int(y)) for (x, y) in counts[counts == N_MONTHS].index
    )
    logger.info("Identified %d sea pixels", len(sea))
    return sea


def land_pixel_count(n_sea, grid_size):
    """Number of non-sea cells on a grid_size x grid_size grid."""
    return grid_size * grid_size - n_sea
