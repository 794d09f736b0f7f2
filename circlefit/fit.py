"""Least-squares circle fitting.

The geometric objective is the sum of squared radial residuals
``||x_i - c|| - r``. It is minimized with scipy, starting from the
closed-form algebraic (Kasa) fit.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import numpy as np
from scipy.optimize import minimize

from circlefit.circle import Circle, CircleFit

logger = logging.getLogger(__name__)

MIN_POINTS = 3


def _as_points(points) -> np.ndarray:
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"points must have shape (n, 2), got {pts.shape}")
    if np.unique(pts, axis=0).shape[0] < MIN_POINTS:
        raise ValueError(f"at least {MIN_POINTS} distinct points are needed to fit a circle")
    # [x y 1] must have full rank, otherwise the points are collinear
    if np.linalg.matrix_rank(pts - pts.mean(axis=0)) < 2:
        raise ValueError("points are collinear and do not determine a circle")
    return pts


def radial_residuals(params, points: np.ndarray) -> np.ndarray:
    """Distance of each point to the circle ``params = (cx, cy, r)``, signed."""
    cx, cy, r = params
    pts = np.asarray(points, dtype=float)
    return np.hypot(pts[:, 0] - cx, pts[:, 1] - cy) - r


def squared_error(params, points: np.ndarray) -> float:
    """Sum of squared radial residuals."""
    res = radial_residuals(params, points)
    return float(res @ res)


def initial_guess(points) -> Circle:
    """Centroid and mean distance to it."""
    pts = _as_points(points)
    center = pts.mean(axis=0)
    radius = float(np.mean(np.hypot(*(pts - center).T)))
    return Circle(cx=float(center[0]), cy=float(center[1]), radius=radius)


def algebraic_fit(points) -> Circle:
    """Kasa fit: solve x^2 + y^2 + D x + E y + F = 0 by linear least squares."""
    pts = _as_points(points)
    x, y = pts[:, 0], pts[:, 1]
    design = np.column_stack([x, y, np.ones_like(x)])
    rhs = -(x * x + y * y)
    (d, e, f), *_ = np.linalg.lstsq(design, rhs, rcond=None)

    cx, cy = -d / 2.0, -e / 2.0
    return Circle(cx=float(cx), cy=float(cy), radius=float(np.sqrt(cx * cx + cy * cy - f)))


def fit_circle(
    points,
    initial: Optional[Circle] = None,
    method: str = "Nelder-Mead",
    options: Optional[Dict[str, Any]] = None,
) -> CircleFit:
    """Minimize ``squared_error`` over (cx, cy, r).

    Starts from ``initial`` when given, otherwise from the algebraic fit.
    ``options`` is passed through to ``scipy.optimize.minimize``.
    """
    pts = _as_points(points)
    if initial is None:
        initial = algebraic_fit(pts)

    result = minimize(squared_error, initial.as_params(), args=(pts,), method=method, options=options)
    if not result.success:
        logger.warning("circle fit did not converge (%s): %s", method, result.message)

    return CircleFit(
        circle=Circle.from_params(result.x),
        cost=float(result.fun),
        iterations=int(getattr(result, "nit", 0)),
        success=bool(result.success),
        method=method,
    )
