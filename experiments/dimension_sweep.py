"""Experiment 2: how fast the local fraction vanishes as dimension grows."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np

from experiments.logging_config import setup_logging
from experiments.metrics import plot_dimension_sweep, plot_edge_lengths
from locality.estimator import dimension_sweep, edge_length_for_fraction


def run_dimension_sweep(
    lam: float = 0.5,
    dims: Sequence[int] = (1, 2, 3, 4, 5, 6, 8, 10),
    n0: int = 2000,
    n1: int = 50,
    n_trials: int = 20,
    seed: int = 5,
    out_dir: str = "experiments/results",
):
    rows = dimension_sweep(lam, dims, n0=n0, n1=n1, n_trials=n_trials, seed=seed)
    for p, simulated, analytic in rows:
        print(
            f"[sweep p={p:02d}] "
            f"simulated={simulated:.6f} lambda^p={analytic:.6f} "
            f"ratio={simulated / analytic:.3f}"
        )

    print("\nEdge length needed to capture 10% of the volume")
    for p in dims:
        print(f"- p={p}: {edge_length_for_fraction(0.1, p):.4f}")

    Path(out_dir).mkdir(parents=True, exist_ok=True)
    sweep_path = f"{out_dir}/dimension_sweep_lambda_{lam}.png"
    if plot_dimension_sweep(rows, out_path=sweep_path, title=f"Local window fraction vs dimension, lambda={lam}"):
        print(f"- saved plot: {sweep_path}")

    edge_path = f"{out_dir}/edge_length_vs_fraction.png"
    targets = np.linspace(0.01, 1.0, 100)
    if plot_edge_lengths(targets, (1, 2, 3, 10), out_path=edge_path, title="Edge length of a local hypercube"):
        print(f"- saved plot: {edge_path}")

    return rows


if __name__ == "__main__":
    setup_logging()
    run_dimension_sweep()
