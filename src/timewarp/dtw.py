from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .actions import Action, DistanceMode
from .config import resolve_max_matrix_bytes
from .storage import CostStorage, cost_storage
from .windows import FullWindow

WarpPath = List[Tuple[int, int]]


def as_sequence(values: Sequence[float], name: str = "sequence") -> np.ndarray:
    """Convert a 1-D numeric sequence to a float64 array."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    return arr


def minimum(insertion: float, deletion: float, match: float) -> Tuple[float, Action]:
    """Smallest of the three predecessor costs and the move that reaches it.

    Insertion must be strictly smaller than both others to win, deletion
    strictly smaller than match; every other case, ties included, is a match.
    """
    if insertion < deletion:
        if insertion < match:
            return insertion, Action.INSERTED
    elif deletion < match:
        return deletion, Action.DELETED
    return match, Action.MATCHED


def dtw(x: Sequence[float], y: Sequence[float], max_matrix_bytes: int | None = None) -> Tuple[float, WarpPath]:
    """Exact DTW with Euclidean distance over the full cost table."""
    return dtw_ex(
        x,
        y,
        FullWindow(len(y), len(x)),
        DistanceMode.EUCLIDEAN,
        max_matrix_bytes=max_matrix_bytes,
    )


def dtw_ex(
    x: Sequence[float],
    y: Sequence[float],
    window: Iterable[Tuple[int, int]],
    distance_mode: DistanceMode | str = DistanceMode.EUCLIDEAN,
    max_matrix_bytes: int | None = None,
) -> Tuple[float, WarpPath]:
    """DTW restricted to the cells produced by ``window``.

    x runs along the columns and y along the rows of the cost table. Returns
    the distance and the warp path as 0-based ``(y_index, x_index)`` pairs
    from the first samples to the last.
    """
    mode = DistanceMode.parse(distance_mode)
    xs = as_sequence(x, "x").tolist()
    ys = as_sequence(y, "y").tolist()
    x_size, y_size = len(xs), len(ys)

    costs = cost_storage(y_size, x_size, resolve_max_matrix_bytes(max_matrix_bytes))
    local_cost = mode.local_cost
    for row, column in window:
        cost = local_cost(xs[column - 1], ys[row - 1])
        value, action = minimum(
            costs.get_cost(row - 1, column),  # insertion, the cell above
            costs.get_cost(row, column - 1),  # deletion, the cell to the left
            costs.get_cost(row - 1, column - 1),  # match, the diagonal
        )
        costs.set_cost(row, column, cost + value)
        costs.set_action(row, column, action)

    distance = mode.finalize(costs.get_cost(y_size, x_size))
    return distance, backtrack(costs, y_size, x_size)


def backtrack(costs: CostStorage, rows: int, columns: int) -> WarpPath:
    """Follow the stored actions from the bottom-right cell back to the boundary."""
    path: WarpPath = []
    row, column = rows, columns
    while row != 0 and column != 0:
        path.append((row - 1, column - 1))
        try:
            action = costs.get_action(row, column)
        except KeyError as e:
            raise RuntimeError(f"cell ({row}, {column}) on the warp path was never computed") from e
        if action is Action.INSERTED:
            row -= 1
        elif action is Action.DELETED:
            column -= 1
        elif action is Action.MATCHED:
            row -= 1
            column -= 1
        else:
            # the window never reached a cell on the optimal path
            raise RuntimeError(f"no action recorded for cell ({row}, {column}) on the warp path")
    path.reverse()
    return path
