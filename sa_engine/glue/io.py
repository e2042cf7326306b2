"""Configuration and dataset helpers for the command-line glue layer.

Configuration comes from YAML (or JSON) files; group assignments and pairwise
preferences come from CSV/Parquet tables read through pandas. The helpers
return plain lists and NumPy arrays so they compose directly with the
grouping problem and stay easy to use inside tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np
import yaml

from ..problems.grouping import members_of, parity_preferences


def load_config(path_yaml: Path) -> Dict:
    """Read a YAML (or JSON) configuration file.

    Parameters
    ----------
    path_yaml:
        Path to the configuration file.

    Returns
    -------
    dict
        Parsed configuration dictionary.  Empty files resolve to ``{}``.
    """

    path = Path(path_yaml)
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return {}

    if path.suffix.lower() == ".json":
        return json.loads(text)

    cfg = yaml.safe_load(text)
    return cfg or {}


def _read_frame(path_like: Path):
    """Return a Pandas ``DataFrame`` from CSV or Parquet input."""

    import pandas as pd

    path = Path(path_like)
    if path.suffix.lower() in {".parquet", ".pq"}:
        df = pd.read_parquet(path)
    else:
        df = pd.read_csv(path)
    if df.empty:
        raise ValueError(f"empty table: {path}")
    return df


def load_groups(path_table: Path) -> List[List[int]]:
    """Load a ``group,member`` table into a list of groups ordered by group id."""

    df = _read_frame(path_table)
    if not {"group", "member"}.issubset(df.columns):
        raise ValueError("group table must contain 'group' and 'member' columns")

    groups = []
    for _, frame in df.groupby("group", sort=True):
        groups.append(frame["member"].astype(np.int64).tolist())
    return groups


def load_preferences(path_table: Path, max_member: int) -> np.ndarray:
    """Load an ``a,b,score`` table into a symmetric ``(max_member+1)^2`` matrix.

    Pairs absent from the table score 0.
    """

    df = _read_frame(path_table)
    if not {"a", "b", "score"}.issubset(df.columns):
        raise ValueError("preference table must contain 'a', 'b' and 'score' columns")

    a = df["a"].to_numpy(dtype=np.int64, copy=True)
    b = df["b"].to_numpy(dtype=np.int64, copy=True)
    score = df["score"].fillna(0).to_numpy(dtype=np.float64, copy=True)

    if np.any(a < 0) or np.any(b < 0):
        raise ValueError("preference member ids must be >= 0")
    size = max(int(max_member), int(a.max()), int(b.max())) + 1

    prefs = np.zeros((size, size), dtype=np.float64)
    prefs[a, b] = score
    prefs[b, a] = score
    return prefs


def validate_groups(groups: Sequence[Sequence[int]]) -> None:
    """Members must be unique non-negative ints and all groups the same size."""

    members = members_of(groups)
    if any(m < 0 for m in members):
        raise ValueError("member ids must be >= 0")
    if len(set(members)) != len(members):
        raise ValueError("member ids must be unique across groups")
    sizes = {len(group) for group in groups}
    if len(sizes) > 1:
        raise ValueError(f"all groups must have the same size, got sizes {sorted(sizes)}")


def validate_preferences(prefs: np.ndarray, groups: Sequence[Sequence[int]]) -> None:
    prefs = np.asarray(prefs)
    if prefs.ndim != 2 or prefs.shape[0] != prefs.shape[1]:
        raise ValueError("preferences must be a square matrix")
    members = members_of(groups)
    if members and max(members) >= prefs.shape[0]:
        raise ValueError("preferences do not cover every member id")
    if not np.all(np.isfinite(prefs)):
        raise ValueError("preferences must be finite")


def default_preferences(groups: Sequence[Sequence[int]], max_member: Optional[int] = None) -> np.ndarray:
    members = members_of(groups)
    if max_member is None:
        max_member = max(members) if members else 0
    return parity_preferences(max_member)


__all__ = [
    "default_preferences",
    "load_config",
    "load_groups",
    "load_preferences",
    "validate_groups",
    "validate_preferences",
]
