"""Experiment 3: least-squares circle fit on noisy point clouds."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from circlefit.fit import algebraic_fit, fit_circle, squared_error
from circlefit.io import load_cloud
from experiments.logging_config import setup_logging
from experiments.metrics import plot_circle_fit, summarize_circle_fit


def run_circle_fit_demo(
    cloud_paths: Sequence[str] = (
        "circlefit/clouds/noisy_ring.json",
        "circlefit/clouds/partial_arc.json",
    ),
    out_dir: str = "experiments/results",
):
    Path(out_dir).mkdir(parents=True, exist_ok=True)
    summaries = {}
    for path in cloud_paths:
        cloud = load_cloud(path)
        points = cloud.sample()

        algebraic = algebraic_fit(points)
        fit = fit_circle(points, initial=algebraic)
        truth = cloud.circle
        print(
            f"[circle {cloud.name}] n={cloud.n_points} noise={cloud.noise} "
            f"true=({truth.cx:.3f}, {truth.cy:.3f}, r={truth.radius:.3f})"
        )
        print(
            f"  algebraic=({algebraic.cx:.3f}, {algebraic.cy:.3f}, r={algebraic.radius:.3f}) "
            f"cost={squared_error(algebraic.as_params(), points):.5f}"
        )
        print(
            f"  least_squares=({fit.circle.cx:.3f}, {fit.circle.cy:.3f}, r={fit.circle.radius:.3f}) "
            f"cost={fit.cost:.5f} iterations={fit.iterations} success={fit.success}"
        )

        summary = summarize_circle_fit(fit, truth)
        summaries[cloud.name] = summary
        print(f"\n{cloud.name} summary")
        for key, value in summary.items():
            print(f"- {key}: {value:.5f}")

        plot_path = f"{out_dir}/circle_fit_{cloud.name}.png"
        saved = plot_circle_fit(
            points,
            truth,
            {"algebraic fit": algebraic, "least-squares fit": fit.circle},
            out_path=plot_path,
            title=f"Circle fit: {cloud.name}",
        )
        if saved:
            print(f"- saved plot: {plot_path}")

    return summaries


if __name__ == "__main__":
    setup_logging()
    run_circle_fit_demo()
