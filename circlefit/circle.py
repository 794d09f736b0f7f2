"""Circle model and synthetic noisy point clouds."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Circle:
    """Circle with center (cx, cy) and positive radius."""

    cx: float
    cy: float
    radius: float

    def __post_init__(self):
        if not float(self.radius) > 0.0:
            raise ValueError("radius must be positive")

    @property
    def center(self) -> np.ndarray:
        return np.array([self.cx, self.cy], dtype=float)

    def as_params(self) -> np.ndarray:
        """Parameter vector (cx, cy, r) used by the objective."""
        return np.array([self.cx, self.cy, self.radius], dtype=float)

    @classmethod
    def from_params(cls, params) -> "Circle":
        cx, cy, r = (float(v) for v in params)
        return cls(cx=cx, cy=cy, radius=abs(r))


@dataclass(frozen=True)
class CircleFit:
    """Result of a circle fit."""

    circle: Circle
    cost: float
    iterations: int
    success: bool
    method: str


def sample_noisy_circle(
    circle: Circle,
    n_points: int,
    noise: float,
    rng: np.random.Generator,
    arc_start: float = 0.0,
    arc_end: float = 2.0 * np.pi,
) -> np.ndarray:
    """Draw ``n_points`` on an arc of ``circle`` with Gaussian radial noise.

    Angles are uniform on [arc_start, arc_end); ``noise`` is the standard
    deviation added to the radius of each point. Returns shape (n, 2).
    """
    if int(n_points) < 1:
        raise ValueError("n_points must be positive")
    if noise < 0.0:
        raise ValueError("noise must be non-negative")
    if not arc_end > arc_start:
        raise ValueError("arc_end must be greater than arc_start")

    theta = rng.uniform(arc_start, arc_end, size=int(n_points))
    radii = circle.radius + rng.normal(0.0, noise, size=int(n_points))
    x = circle.cx + radii * np.cos(theta)
    y = circle.cy + radii * np.sin(theta)
    return np.column_stack([x, y])
