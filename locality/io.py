"""Study-definition loader utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from locality.study import LocalityStudy


def load_study_definition(path: str | Path) -> Dict[str, Any]:
    """Load a study definition from JSON and perform schema checks."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    required_fields = {"name", "lam", "p", "n0", "n1", "n_trials"}
    missing = required_fields.difference(data.keys())
    if missing:
        raise ValueError(f"Missing required study fields: {sorted(missing)}")
    return data


def build_study_from_definition(study_def: Dict[str, Any]) -> LocalityStudy:
    """Instantiate a study from a validated definition."""
    return LocalityStudy(
        name=str(study_def["name"]),
        lam=float(study_def["lam"]),
        p=study_def["p"],
        n0=study_def["n0"],
        n1=study_def["n1"],
        n_trials=study_def["n_trials"],
        seed=int(study_def.get("seed", 0)),
    )


def load_study(path: str | Path) -> LocalityStudy:
    """Convenience wrapper for loading and instantiating a study from JSON."""
    return build_study_from_definition(load_study_definition(path))
