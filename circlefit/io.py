"""Point-cloud definition loader utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import numpy as np

from circlefit.circle import Circle, sample_noisy_circle


@dataclass(frozen=True)
class PointCloudSpec:
    """Known circle plus the sampling parameters of a synthetic cloud."""

    name: str
    circle: Circle
    n_points: int
    noise: float
    arc_start: float = 0.0
    arc_end: float = 2.0 * np.pi
    seed: int = 0

    def __post_init__(self):
        if int(self.n_points) != self.n_points or int(self.n_points) < 1:
            raise ValueError("n_points must be a positive integer")
        if not float(self.noise) >= 0.0:
            raise ValueError("noise must be non-negative")
        if not float(self.arc_end) > float(self.arc_start):
            raise ValueError("arc_end must be greater than arc_start")

    def sample(self) -> np.ndarray:
        rng = np.random.default_rng(self.seed)
        return sample_noisy_circle(
            self.circle,
            self.n_points,
            self.noise,
            rng,
            arc_start=self.arc_start,
            arc_end=self.arc_end,
        )


def load_cloud_definition(path: str | Path) -> Dict[str, Any]:
    """Load a cloud definition from JSON and perform schema checks."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    required_fields = {"name", "center", "radius", "n_points", "noise"}
    missing = required_fields.difference(data.keys())
    if missing:
        raise ValueError(f"Missing required cloud fields: {sorted(missing)}")
    if not isinstance(data["center"], list) or len(data["center"]) != 2:
        raise ValueError("center must be a two-element list")
    return data


def build_cloud_from_definition(cloud_def: Dict[str, Any]) -> PointCloudSpec:
    """Instantiate a cloud spec from a validated definition."""
    cx, cy = (float(v) for v in cloud_def["center"])
    return PointCloudSpec(
        name=str(cloud_def["name"]),
        circle=Circle(cx=cx, cy=cy, radius=float(cloud_def["radius"])),
        n_points=cloud_def["n_points"],
        noise=float(cloud_def["noise"]),
        arc_start=float(cloud_def.get("arc_start", 0.0)),
        arc_end=float(cloud_def.get("arc_end", 2.0 * np.pi)),
        seed=int(cloud_def.get("seed", 0)),
    )


def load_cloud(path: str | Path) -> PointCloudSpec:
    """Convenience wrapper for loading and instantiating a cloud from JSON."""
    return build_cloud_from_definition(load_cloud_definition(path))
