"""Ordinary least squares helpers."""

from collections.abc import Sequence

import numpy as np


def slope(x: Sequence[float], y: Sequence[float]) -> float:
    """Return the least squares slope of ``y`` against ``x``.

    Fewer than two points, or no spread in ``x``, gives ``0.0``.
    """
    if len(x) != len(y):
        raise ValueError(f"x and y differ in length ({len(x)} != {len(y)})")
    if len(x) < 2:
        return 0.0

    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    dx = xs - xs.mean()
    sxx = float(np.dot(dx, dx))
    if sxx == 0.0:
        return 0.0
    return float(np.dot(dx, ys - ys.mean()) / sxx)
