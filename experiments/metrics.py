"""Summary metrics and lightweight plotting for the locality and circle experiments."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import numpy as np

from circlefit.circle import Circle, CircleFit
from locality.estimator import edge_length_for_fraction, expected_fraction

# Constant for missing matplotlib message
_MATPLOTLIB_MISSING_MSG = "matplotlib not installed; skipping plot generation."


def summarize_fractions(fractions: Sequence[float], lam: float, p: int) -> Dict[str, float]:
    """Compute distribution statistics of Monte Carlo fractions against lam**p."""
    expected = expected_fraction(lam, p)
    values = np.asarray(fractions, dtype=float)
    if values.size == 0:
        return {
            "n_trials": 0.0,
            "mean": 0.0,
            "std": 0.0,
            "std_error": 0.0,
            "min": 0.0,
            "max": 0.0,
            "expected": expected,
            "abs_error": expected,
        }

    mean = float(values.mean())
    std = float(values.std(ddof=1)) if values.size > 1 else 0.0
    return {
        "n_trials": float(values.size),
        "mean": mean,
        "std": std,
        "std_error": std / float(np.sqrt(values.size)),
        "min": float(values.min()),
        "max": float(values.max()),
        "expected": expected,
        "abs_error": abs(mean - expected),
    }


def summarize_circle_fit(fit: CircleFit, truth: Circle) -> Dict[str, float]:
    """Compare a fitted circle against the circle the cloud was drawn from."""
    center_error = float(np.hypot(fit.circle.cx - truth.cx, fit.circle.cy - truth.cy))
    return {
        "cx": fit.circle.cx,
        "cy": fit.circle.cy,
        "radius": fit.circle.radius,
        "center_error": center_error,
        "radius_error": abs(fit.circle.radius - truth.radius),
        "cost": fit.cost,
        "iterations": float(fit.iterations),
    }


def plot_fraction_histogram(
    fractions: Sequence[float], lam: float, p: int, out_path: str, title: str, bins: int = 30
) -> bool:
    """Histogram of per-trial fractions with the analytic lam**p marked."""
    try:
        import matplotlib.pyplot as plt  # pylint: disable=import-outside-toplevel
    except ModuleNotFoundError:
        print(_MATPLOTLIB_MISSING_MSG)
        return False

    values = np.asarray(fractions, dtype=float)

    plt.figure(figsize=(8, 4.5))
    plt.hist(values, bins=bins, alpha=0.75, label="simulated fraction")
    plt.axvline(float(values.mean()), color="black", linestyle="-", label="mean")
    plt.axvline(expected_fraction(lam, p), color="red", linestyle="--", label=f"lambda^p (p={p})")
    plt.xlabel("Fraction of points in local window")
    plt.ylabel("Trials")
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()
    return True


def plot_dimension_sweep(
    rows: List[Tuple[int, float, float]], out_path: str, title: str
) -> bool:
    """Plot simulated mean fraction vs dimension on a log scale."""
    try:
        import matplotlib.pyplot as plt  # pylint: disable=import-outside-toplevel
    except ModuleNotFoundError:
        print(_MATPLOTLIB_MISSING_MSG)
        return False

    dims = [r[0] for r in rows]
    simulated = [r[1] for r in rows]
    analytic = [r[2] for r in rows]

    plt.figure(figsize=(8, 4.5))
    plt.semilogy(dims, analytic, label="lambda^p", linestyle="--")
    # zero means cannot be drawn on a log axis
    plotted = [(d, s) for d, s in zip(dims, simulated) if s > 0]
    if plotted:
        plt.semilogy([d for d, _ in plotted], [s for _, s in plotted], "o", label="simulated mean")
    plt.xlabel("Dimension p")
    plt.ylabel("Fraction of points in local window")
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()
    return True


def plot_edge_lengths(
    fractions: Sequence[float], dims: Sequence[int], out_path: str, title: str
) -> bool:
    """Plot the per-axis window width needed to capture each target fraction."""
    try:
        import matplotlib.pyplot as plt  # pylint: disable=import-outside-toplevel
    except ModuleNotFoundError:
        print(_MATPLOTLIB_MISSING_MSG)
        return False

    plt.figure(figsize=(8, 4.5))
    for p in dims:
        y = [edge_length_for_fraction(r, p) for r in fractions]
        plt.plot(fractions, y, label=f"p={p}")
    plt.xlabel("Fraction of volume")
    plt.ylabel("Edge length")
    plt.ylim(0.0, 1.0)
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()
    return True


def plot_circle_fit(
    points: np.ndarray, truth: Circle, fits: Dict[str, Circle], out_path: str, title: str
) -> bool:
    """Scatter the cloud and overlay the true and fitted circles."""
    try:
        import matplotlib.pyplot as plt  # pylint: disable=import-outside-toplevel
    except ModuleNotFoundError:
        print(_MATPLOTLIB_MISSING_MSG)
        return False

    theta = np.linspace(0.0, 2.0 * np.pi, 256)

    plt.figure(figsize=(6, 6))
    plt.scatter(points[:, 0], points[:, 1], s=12, alpha=0.7, label="points")
    plt.plot(
        truth.cx + truth.radius * np.cos(theta),
        truth.cy + truth.radius * np.sin(theta),
        linestyle="--",
        color="black",
        label="true circle",
    )
    for label, circle in fits.items():
        plt.plot(
            circle.cx + circle.radius * np.cos(theta),
            circle.cy + circle.radius * np.sin(theta),
            label=label,
        )
    plt.gca().set_aspect("equal", adjustable="datalim")
    plt.xlabel("x")
    plt.ylabel("y")
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()
    return True
