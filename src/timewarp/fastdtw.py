"""FastDTW: approximate DTW in linear time and space.

The series are averaged down by ``resolution_factor``, the coarse problem is
solved recursively, and its warp path is projected back as a narrow
:class:`~timewarp.windows.ConstrainedWindow` in which the finer problem is
solved exactly (Salvador & Chan, 2007).
"""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from .actions import DistanceMode
from .config import resolve_max_matrix_bytes
from .dtw import WarpPath, as_sequence, dtw_ex
from .windows import ConstrainedWindow, FullWindow

logger = logging.getLogger(__name__)


def coarsen(sequence: Sequence[float], resolution_factor: int) -> np.ndarray:
    """Average non-overlapping blocks of ``resolution_factor`` samples.

    The last block may be shorter and averages only what is left.
    """
    if resolution_factor < 1:
        raise ValueError("resolution_factor must be at least 1")
    arr = as_sequence(sequence)
    size = math.ceil(len(arr) / resolution_factor)
    result = np.empty(size, dtype=np.float64)
    for i in range(size):
        block = arr[i * resolution_factor:(i + 1) * resolution_factor]
        result[i] = block.sum() / len(block)
    return result


def fastdtw(x: Sequence[float], y: Sequence[float], max_matrix_bytes: int | None = None) -> Tuple[float, WarpPath]:
    """FastDTW with resolution factor 2, search radius 1 and Euclidean distance."""
    return fastdtw_ex(x, y, 2, 1, DistanceMode.EUCLIDEAN, max_matrix_bytes=max_matrix_bytes)


def fastdtw_ex(
    x: Sequence[float],
    y: Sequence[float],
    resolution_factor: int = 2,
    search_radius: int = 1,
    distance_mode: DistanceMode | str = DistanceMode.EUCLIDEAN,
    max_matrix_bytes: int | None = None,
) -> Tuple[float, WarpPath]:
    if resolution_factor < 1:
        raise ValueError("resolution_factor must be at least 1")
    if search_radius < 0:
        raise ValueError("search_radius must be non-negative")
    mode = DistanceMode.parse(distance_mode)
    # one budget for every level of the recursion
    budget = resolve_max_matrix_bytes(max_matrix_bytes)
    return _fastdtw(as_sequence(x, "x"), as_sequence(y, "y"), resolution_factor, search_radius, mode, budget, 0)


def _fastdtw(
    x: np.ndarray,
    y: np.ndarray,
    resolution_factor: int,
    search_radius: int,
    mode: DistanceMode,
    budget: int,
    depth: int,
) -> Tuple[float, WarpPath]:
    rows, columns = len(y), len(x)
    min_size = search_radius + 2

    # a factor of 1 never shrinks the problem, so solve it exactly right away
    if columns <= min_size or rows <= min_size or resolution_factor == 1:
        logger.debug("fastdtw depth %d: full window %dx%d", depth, rows, columns)
        return dtw_ex(x, y, FullWindow(rows, columns), mode, max_matrix_bytes=budget)

    _, low_res_path = _fastdtw(
        coarsen(x, resolution_factor),
        coarsen(y, resolution_factor),
        resolution_factor,
        search_radius,
        mode,
        budget,
        depth + 1,
    )
    window = ConstrainedWindow.from_low_res_path(
        low_res_path,
        resolution_factor,
        search_radius,
        rows,
        columns,
    )
    logger.debug(
        "fastdtw depth %d: constrained window %dx%d from a %d-step coarse path",
        depth, rows, columns, len(low_res_path),
    )
    return dtw_ex(x, y, window, mode, max_matrix_bytes=budget)
