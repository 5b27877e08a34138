"""
Shared fixtures: small synthetic pixel grids.

Run with:  python -m pytest tests/ -v
"""

import sys
import os

import pandas as pd
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


def make_records(grid=4, months=range(1, 13), value=lambda x, y, m: float(x + y + m)):
    """Full grid x grid x months record table with a value function."""
    rows = [
        {"x": x, "y": y, "month": m, "value": value(x, y, m)}
        for m in months
        for x in range(1, grid + 1)
        for y in range(1, grid + 1)
    ]
    return pd.DataFrame(rows, columns=["x", "y", "month", "value"])


@pytest.fixture
def records():
    """4x4 grid, 12 months; pixel (1, 1) and (2, 1) are all-zero sea."""
    def value(x, y, m):
        if (x, y) in {(1, 1), (2, 1)}:
            return 0.0
        return float(10 * m + x - y)
    return make_records(grid=4, value=value)
