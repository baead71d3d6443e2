from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np


# --- Alignment plot ----------------------------------------------------------

def plot_alignment(
    x: Sequence[float],
    y: Sequence[float],
    path: Sequence[Tuple[int, int]],
    ax=None,
    title: str = "DTW alignment",
    offset: Optional[float] = None,
    out_path: str | None = None,
):
    """
    Plot x above y and join every pair of samples matched by the warp path.
    Path entries are (y_index, x_index).
    """
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    if offset is None:
        span = max(np.ptp(xs) if xs.size else 0.0, np.ptp(ys) if ys.size else 0.0)
        offset = 1.5 * span if span > 0 else 1.0
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 4))
    for yi, xi in path:
        ax.plot([xi, yi], [xs[xi] + offset, ys[yi]], color="grey", lw=0.5, alpha=0.6)
    ax.plot(xs + offset, color="tab:blue", label="x")
    ax.plot(ys, color="tab:orange", label="y")
    ax.set_title(title)
    ax.legend(loc="upper right")
    if out_path:
        ax.figure.savefig(out_path, dpi=150)
        print(f"[saved] alignment → {out_path}")
    return ax


# --- Cost table plot ---------------------------------------------------------

def plot_warp_path(
    path: Sequence[Tuple[int, int]],
    rows: int,
    columns: int,
    ax=None,
    window: Optional[Iterable[Tuple[int, int]]] = None,
    title: str = "Warp path",
):
    """
    Draw the warp path on the cost table grid (rows = y, columns = x).
    If a window is given, its 1-based cells are shaded underneath.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(5, 5))
    if window is not None:
        mask = np.zeros((rows, columns), dtype=float)
        for row, column in window:
            mask[row - 1, column - 1] = 1.0
        ax.imshow(mask, cmap="Greys", alpha=0.3, origin="lower", aspect="auto",
                  extent=(-0.5, columns - 0.5, -0.5, rows - 0.5))
    if path:
        p = np.asarray(path)
        ax.plot(p[:, 1], p[:, 0], color="r", marker=".", lw=1)
    ax.set_xlim(-0.5, columns - 0.5)
    ax.set_ylim(-0.5, rows - 0.5)
    ax.set_xlabel("x index")
    ax.set_ylabel("y index")
    ax.set_title(title)
    return ax
