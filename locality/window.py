"""Clamped local windows on the unit interval.

A window of width ``lam`` is centered on the query coordinate when it fits
inside [0, 1] and is snapped to the nearest boundary otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


def check_fraction(lam: float) -> float:
    """Validate a window fraction and return it as float."""
    lam = float(lam)
    if not 0.0 < lam < 1.0:
        raise ValueError(f"lam must be in (0, 1), got {lam}")
    return lam


@dataclass(frozen=True)
class LocalWindow:
    """Interval [lo, hi] inside the unit interval."""

    lo: float
    hi: float

    def __post_init__(self):
        if not 0.0 <= self.lo < self.hi <= 1.0:
            raise ValueError(f"window must satisfy 0 <= lo < hi <= 1, got ({self.lo}, {self.hi})")

    @property
    def width(self) -> float:
        return self.hi - self.lo

    def contains(self, x):
        return contains(self, x)


def local_window(z: float, lam: float) -> LocalWindow:
    """Return the width-``lam`` window around ``z``, clamped to [0, 1]."""
    lam = check_fraction(lam)
    z = float(z)
    if not 0.0 <= z <= 1.0:
        raise ValueError(f"z must be in [0, 1], got {z}")

    half = lam / 2.0
    if z < half:
        return LocalWindow(0.0, lam)
    if z > 1.0 - half:
        return LocalWindow(1.0 - lam, 1.0)
    return LocalWindow(max(z - half, 0.0), min(z + half, 1.0))


def window_bounds(z: np.ndarray, lam: float) -> Tuple[np.ndarray, np.ndarray]:
    """Elementwise ``local_window`` returning (lo, hi) arrays shaped like ``z``."""
    lam = check_fraction(lam)
    z = np.asarray(z, dtype=float)
    if z.size and (z.min() < 0.0 or z.max() > 1.0):
        raise ValueError("query coordinates must lie in [0, 1]")

    half = lam / 2.0
    lo = np.clip(z - half, 0.0, 1.0 - lam)
    return lo, lo + lam


def contains(window: LocalWindow, x):
    """Open-interval membership; the endpoints are outside the window."""
    return (window.lo < x) & (x < window.hi)
