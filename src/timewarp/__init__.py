"""Dynamic time warping and FastDTW for one-dimensional numeric sequences."""

from .actions import Action, DistanceMode
from .config import config_max_cost_storage_matrix, max_cost_storage_matrix
from .dtw import dtw, dtw_ex
from .fastdtw import coarsen, fastdtw, fastdtw_ex
from .storage import CostCache, CostMatrix, CostStorage, cost_storage
from .windows import ConstrainedWindow, FullWindow

__all__ = [
    "Action",
    "DistanceMode",
    "config_max_cost_storage_matrix",
    "max_cost_storage_matrix",
    "dtw",
    "dtw_ex",
    "fastdtw",
    "fastdtw_ex",
    "coarsen",
    "CostStorage",
    "CostMatrix",
    "CostCache",
    "cost_storage",
    "FullWindow",
    "ConstrainedWindow",
]

__version__ = "0.1.0"
