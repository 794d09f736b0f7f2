"""
Tests for experiment metrics, logging setup and the runnable experiments.
"""

import json
import logging
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

from circlefit.circle import Circle, CircleFit
from experiments.circle_fit_demo import run_circle_fit_demo
from experiments.curse_of_dimensionality import run_curse_of_dimensionality
from experiments.dimension_sweep import run_dimension_sweep
from experiments.logging_config import PACKAGE_LOGGERS, setup_logging
from experiments.metrics import summarize_circle_fit, summarize_fractions

ROOT = Path(__file__).resolve().parent.parent


# =============================================================================
# METRICS
# =============================================================================

class TestSummaries:
    """Summary dictionaries."""

    def test_summarize_fractions(self):
        summary = summarize_fractions([0.2, 0.3, 0.25], lam=0.5, p=2)
        assert summary["mean"] == pytest.approx(0.25)
        assert summary["expected"] == pytest.approx(0.25)
        assert summary["abs_error"] == pytest.approx(0.0, abs=1e-12)
        assert summary["std"] == pytest.approx(0.05)
        assert summary["min"] == 0.2
        assert summary["max"] == 0.3

    def test_summarize_single_trial(self):
        summary = summarize_fractions([0.1], lam=0.1, p=1)
        assert summary["std"] == 0.0
        assert summary["std_error"] == 0.0

    def test_summarize_empty(self):
        summary = summarize_fractions([], lam=0.1, p=2)
        assert summary["n_trials"] == 0.0
        assert summary["expected"] == pytest.approx(0.01)

    def test_summarize_circle_fit(self):
        truth = Circle(0.0, 0.0, 1.0)
        fit = CircleFit(circle=Circle(0.3, 0.4, 1.2), cost=0.5, iterations=12, success=True, method="Nelder-Mead")
        summary = summarize_circle_fit(fit, truth)
        assert summary["center_error"] == pytest.approx(0.5)
        assert summary["radius_error"] == pytest.approx(0.2)
        assert summary["iterations"] == 12.0


# =============================================================================
# LOGGING
# =============================================================================

@pytest.fixture
def restore_package_loggers():
    saved = {}
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        saved[name] = (logger.level, list(logger.handlers), logger.propagate)
    yield
    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.setLevel(level)
        logger.handlers[:] = handlers
        logger.propagate = propagate


class TestLoggingConfig:
    """Package logger setup."""

    def test_handlers_not_duplicated(self, tmp_path, restore_package_loggers):
        log_file = tmp_path / "run.log"
        setup_logging(logging.DEBUG, log_file=str(log_file))
        setup_logging(logging.DEBUG, log_file=str(log_file))
        for name in PACKAGE_LOGGERS:
            logger = logging.getLogger(name)
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 2
        for handler in logging.getLogger("experiments").handlers:
            handler.flush()
        assert "Logging initialized." in log_file.read_text(encoding="utf-8")


# =============================================================================
# EXPERIMENT RUNS
# =============================================================================

class TestExperimentRuns:
    """End-to-end runs write summaries and plots."""

    def test_curse_of_dimensionality(self, tmp_path, capsys):
        fractions, summary = run_curse_of_dimensionality(
            study_path=str(ROOT / "locality" / "studies" / "unit_cube.json"),
            out_dir=str(tmp_path),
        )
        assert len(fractions) == 200
        assert summary["mean"] == pytest.approx(0.01, abs=0.003)
        saved = json.loads((tmp_path / "unit_cube_summary.json").read_text())
        assert set(saved) == {"p1", "p2"}
        assert (tmp_path / "unit_cube_p2_histogram.png").exists()
        assert "p2 summary" in capsys.readouterr().out

    def test_one_dimensional_study_runs_once(self, tmp_path, capsys):
        """A p=1 study is its own baseline and keeps its summary entry."""
        study_path = tmp_path / "line.json"
        study_path.write_text(json.dumps(
            {"name": "line", "lam": 0.2, "p": 1, "n0": 200, "n1": 10, "n_trials": 5, "seed": 1}
        ))
        fractions, summary = run_curse_of_dimensionality(study_path=str(study_path), out_dir=str(tmp_path))
        assert len(fractions) == 5
        saved = json.loads((tmp_path / "line_summary.json").read_text())
        assert list(saved) == ["p1"]
        assert saved["p1"]["mean"] == pytest.approx(summary["mean"])
        assert capsys.readouterr().out.count("p1 summary") == 1

    def test_dimension_sweep(self, tmp_path):
        rows = run_dimension_sweep(lam=0.5, dims=(1, 2), n0=200, n1=10, n_trials=5, out_dir=str(tmp_path))
        assert [r[0] for r in rows] == [1, 2]
        assert (tmp_path / "dimension_sweep_lambda_0.5.png").exists()
        assert (tmp_path / "edge_length_vs_fraction.png").exists()

    def test_circle_fit_demo(self, tmp_path):
        summaries = run_circle_fit_demo(
            cloud_paths=[str(ROOT / "circlefit" / "clouds" / "noisy_ring.json")],
            out_dir=str(tmp_path),
        )
        assert summaries["noisy_ring"]["center_error"] < 0.1
        assert summaries["noisy_ring"]["radius_error"] < 0.1
        assert (tmp_path / "circle_fit_noisy_ring.png").exists()
