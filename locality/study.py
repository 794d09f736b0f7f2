"""Parameter set for one curse-of-dimensionality study."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from locality.estimator import simulate_fractions


@dataclass(frozen=True)
class LocalityStudy:
    """Window fraction, dimension and sample sizes for a Monte Carlo run."""

    name: str
    lam: float
    p: int
    n0: int
    n1: int
    n_trials: int
    seed: int = 0

    def __post_init__(self):
        if not 0.0 < float(self.lam) < 1.0:
            raise ValueError("lam must be in (0, 1)")
        for field_name in ("p", "n0", "n1", "n_trials"):
            value = getattr(self, field_name)
            if int(value) != value or int(value) < 1:
                raise ValueError(f"{field_name} must be a positive integer")


def run_study(study: LocalityStudy) -> np.ndarray:
    """Run the Monte Carlo driver with the study's parameters."""
    return simulate_fractions(
        study.lam,
        study.p,
        study.n0,
        study.n1,
        study.n_trials,
        seed=study.seed,
    )
