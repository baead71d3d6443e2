"""Process-wide settings and YAML configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml

# 32 GiB worth of dense float64 cost cells
DEFAULT_MAX_COST_STORAGE_MATRIX = 32 * 1024 * 1024 * 1024

_max_cost_storage_matrix = DEFAULT_MAX_COST_STORAGE_MATRIX


def config_max_cost_storage_matrix(max_bytes: int) -> None:
    """Set the dense/sparse cost storage threshold for the whole process.

    Not synchronized: call it during start-up, before any concurrent
    computation reads it.
    """
    global _max_cost_storage_matrix
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int):
        raise ValueError(f"max_bytes must be an integer, got {max_bytes!r}")
    if max_bytes < 0:
        raise ValueError("max_bytes must be non-negative")
    _max_cost_storage_matrix = max_bytes


def max_cost_storage_matrix() -> int:
    return _max_cost_storage_matrix


def resolve_max_matrix_bytes(max_matrix_bytes: int | None) -> int:
    """Explicit budget if given, otherwise the process-wide one."""
    if max_matrix_bytes is None:
        return _max_cost_storage_matrix
    if max_matrix_bytes < 0:
        raise ValueError("max_matrix_bytes must be non-negative")
    return max_matrix_bytes


# ---------------- config files ----------------

DTW_DEFAULTS: Dict[str, Any] = {
    "fast": False,
    "resolution_factor": 2,
    "search_radius": 1,
    "distance_mode": "euclidean",
    "max_matrix_bytes": None,
}


def load_config(cfg_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML config file and fill in the ``dtw`` section defaults."""
    cfg_file = Path(cfg_path)
    if not cfg_file.exists():
        raise FileNotFoundError(f"[config] Config not found: {cfg_file.resolve()}")
    try:
        cfg = yaml.safe_load(cfg_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise RuntimeError(f"[config] Failed to parse YAML: {cfg_file}") from e
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise RuntimeError(f"[config] Config must be a mapping: {cfg_file}")

    dtw_cfg = cfg.setdefault("dtw", {})
    if dtw_cfg is None:
        dtw_cfg = cfg["dtw"] = {}
    if not isinstance(dtw_cfg, dict):
        raise RuntimeError(f"[config] 'dtw' section must be a mapping: {cfg_file}")
    for key, value in DTW_DEFAULTS.items():
        dtw_cfg.setdefault(key, value)

    for key in ("resolution_factor", "search_radius"):
        if not isinstance(dtw_cfg[key], int) or isinstance(dtw_cfg[key], bool):
            raise RuntimeError(f"[config] '{key}' must be an integer: {cfg_file}")
    budget = dtw_cfg["max_matrix_bytes"]
    if budget is not None and (not isinstance(budget, int) or budget < 0):
        raise RuntimeError(f"[config] 'max_matrix_bytes' must be a non-negative integer: {cfg_file}")
    dtw_cfg["fast"] = bool(dtw_cfg["fast"])
    return cfg
