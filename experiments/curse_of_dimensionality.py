"""Experiment 1: share of uniform points inside a local window, p = 1 vs p > 1."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from experiments.logging_config import setup_logging
from experiments.metrics import plot_fraction_histogram, summarize_fractions
from locality.io import load_study
from locality.study import LocalityStudy, run_study

logger = logging.getLogger(__name__)


def _run_one(study: LocalityStudy, tag: str, out_dir: Path):
    fractions = run_study(study)
    for trial, value in enumerate(fractions[:10], start=1):
        print(f"[{tag} trial={trial:03d}] fraction={value:.5f}")
    if len(fractions) > 10:
        print(f"[{tag}] ... {len(fractions) - 10} more trials")

    summary = summarize_fractions(fractions, study.lam, study.p)
    print(f"\n{tag} summary (lam={study.lam} p={study.p} n0={study.n0} n1={study.n1})")
    for key, value in summary.items():
        print(f"- {key}: {value:.6f}")

    plot_path = out_dir / f"{study.name}_{tag}_histogram.png"
    saved = plot_fraction_histogram(
        fractions,
        study.lam,
        study.p,
        out_path=str(plot_path),
        title=f"Local window fraction, lambda={study.lam}, p={study.p}",
    )
    if saved:
        print(f"- saved plot: {plot_path}")
    return fractions, summary


def run_curse_of_dimensionality(
    study_path: str = "locality/studies/unit_cube.json",
    out_dir: str = "experiments/results",
):
    """Run the configured study and its one-dimensional baseline."""
    study = load_study(study_path)
    logger.info("loaded study %s from %s", study.name, study_path)

    results_dir = Path(out_dir)
    results_dir.mkdir(parents=True, exist_ok=True)

    summaries = {}
    if study.p != 1:
        baseline = LocalityStudy(
            name=study.name,
            lam=study.lam,
            p=1,
            n0=study.n0,
            n1=study.n1,
            n_trials=study.n_trials,
            seed=study.seed,
        )
        _, summaries["p1"] = _run_one(baseline, "p1", results_dir)
    tag = f"p{int(study.p)}"
    fractions, summary = _run_one(study, tag, results_dir)
    summaries[tag] = summary

    summary_path = results_dir / f"{study.name}_summary.json"
    summary_path.write_text(json.dumps(summaries, indent=2))
    print(f"- saved summary: {summary_path}")

    return fractions, summary


if __name__ == "__main__":
    setup_logging()
    run_curse_of_dimensionality()
