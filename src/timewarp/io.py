"""Loading sequences and fixture files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np
import pandas as pd
import yaml

_PAIR_FIELDS = ("warp_path", "low_res_path", "projected_window")


def load_sequence(path: Union[str, Path], column: Optional[str] = None) -> np.ndarray:
    """Load one numeric column of a CSV file as a float64 array.

    Uses ``column`` when given, else a ``value`` column when present, else
    the first numeric column. Empty cells are dropped.
    """
    df = pd.read_csv(path)
    if column is not None:
        if column not in df.columns:
            raise KeyError(f"column {column!r} not found in {path}")
        series = df[column]
    elif "value" in df.columns:
        series = df["value"]
    else:
        numeric = df.select_dtypes(include="number")
        if numeric.columns.empty:
            raise ValueError(f"no numeric column in {path}")
        series = numeric.iloc[:, 0]
    return pd.to_numeric(series, errors="raise").dropna().to_numpy(dtype=np.float64)


def load_test_cases(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read a YAML list of test case records; index pairs become tuples."""
    with open(path, "r", encoding="utf-8") as f:
        cases = yaml.safe_load(f) or []
    if not isinstance(cases, list):
        raise RuntimeError(f"expected a list of test cases in {path}")
    for case in cases:
        for key in _PAIR_FIELDS:
            if key in case:
                case[key] = [tuple(pair) for pair in case[key]]
    return cases
