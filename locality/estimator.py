"""Fraction-of-neighbors estimators and the Monte Carlo driver."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from locality.window import check_fraction, contains, local_window, window_bounds

logger = logging.getLogger(__name__)


def _check_count(name: str, value: int) -> int:
    if int(value) != value or int(value) < 1:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return int(value)


def fraction_within_1d(z: float, samples: np.ndarray, lam: float) -> float:
    """Share of 1D ``samples`` strictly inside the local window of ``z``."""
    samples = np.asarray(samples, dtype=float).ravel()
    if samples.size == 0:
        raise ValueError("samples must not be empty")
    window = local_window(z, lam)
    return float(np.count_nonzero(contains(window, samples)) / samples.size)


def fraction_within(query: np.ndarray, samples: np.ndarray, lam: float) -> float:
    """Share of p-dimensional ``samples`` inside the local hypercube of ``query``.

    Each axis gets its own clamped window around the query coordinate; a
    sample counts only when it is strictly inside all of them.
    """
    query = np.atleast_1d(np.asarray(query, dtype=float))
    samples = np.asarray(samples, dtype=float)
    if samples.ndim == 1:
        samples = samples[:, None]
    if samples.shape[0] == 0:
        raise ValueError("samples must not be empty")
    if samples.shape[1] != query.shape[0]:
        raise ValueError(
            f"dimension mismatch: query has {query.shape[0]} axes, samples have {samples.shape[1]}"
        )

    lo, hi = window_bounds(query, lam)
    inside = np.all((samples > lo) & (samples < hi), axis=1)
    return float(np.count_nonzero(inside) / samples.shape[0])


def trial_fraction(lam: float, p: int, n0: int, n1: int, rng: np.random.Generator) -> float:
    """One trial: mean neighbor fraction of ``n1`` queries against ``n0`` references."""
    lam = check_fraction(lam)
    p = _check_count("p", p)
    n0 = _check_count("n0", n0)
    n1 = _check_count("n1", n1)

    reference = rng.random((n0, p))
    queries = rng.random((n1, p))
    fractions = [fraction_within(q, reference, lam) for q in queries]
    return float(np.mean(fractions))


def simulate_fractions(
    lam: float,
    p: int,
    n0: int,
    n1: int,
    n_trials: int,
    seed: int = 0,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Repeat ``trial_fraction`` ``n_trials`` times with fresh samples.

    A caller-supplied ``rng`` takes precedence over ``seed``.
    """
    n_trials = _check_count("n_trials", n_trials)
    if rng is None:
        rng = np.random.default_rng(seed)

    out = np.empty(n_trials, dtype=float)
    for trial in range(n_trials):
        out[trial] = trial_fraction(lam, p, n0, n1, rng)
    logger.debug(
        "simulated %d trials (lam=%.3f p=%d n0=%d n1=%d): mean=%.6f",
        n_trials, lam, p, n0, n1, float(out.mean()),
    )
    return out


def expected_fraction(lam: float, p: int) -> float:
    """Fraction of the unit hypercube covered by a width-``lam`` local cube."""
    return check_fraction(lam) ** _check_count("p", p)


def edge_length_for_fraction(r: float, p: int) -> float:
    """Per-axis window width needed to cover fraction ``r`` of [0, 1]^p."""
    r = float(r)
    if not 0.0 < r <= 1.0:
        raise ValueError(f"r must be in (0, 1], got {r}")
    return r ** (1.0 / _check_count("p", p))


def dimension_sweep(
    lam: float,
    dims: Iterable[int],
    n0: int,
    n1: int,
    n_trials: int,
    seed: int = 0,
) -> List[Tuple[int, float, float]]:
    """Return (p, simulated mean, lam**p) for each dimension in ``dims``."""
    rng = np.random.default_rng(seed)
    rows = []
    for p in dims:
        fractions = simulate_fractions(lam, p, n0, n1, n_trials, rng=rng)
        rows.append((int(p), float(fractions.mean()), expected_fraction(lam, p)))
    return rows
