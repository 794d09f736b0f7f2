"""Local-neighborhood fractions in the unit hypercube."""

from locality.estimator import (
    dimension_sweep,
    edge_length_for_fraction,
    expected_fraction,
    fraction_within,
    fraction_within_1d,
    simulate_fractions,
    trial_fraction,
)
from locality.io import build_study_from_definition, load_study, load_study_definition
from locality.study import LocalityStudy, run_study
from locality.window import LocalWindow, contains, local_window, window_bounds

__all__ = [
    "LocalWindow",
    "local_window",
    "window_bounds",
    "contains",
    "fraction_within_1d",
    "fraction_within",
    "trial_fraction",
    "simulate_fractions",
    "expected_fraction",
    "edge_length_for_fraction",
    "dimension_sweep",
    "LocalityStudy",
    "run_study",
    "load_study",
    "load_study_definition",
    "build_study_from_definition",
]
