import sys, os; sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))
import pytest

from timewarp.io import load_test_cases
from timewarp.windows import EMPTY_ROW, ConstrainedWindow, FullWindow

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


def _assert_row_major(cells):
    for (r1, c1), (r2, c2) in zip(cells, cells[1:]):
        assert r2 > r1 or (r2 == r1 and c2 > c1)


def test_full_window_order():
    cells = list(FullWindow(2, 3))
    assert cells == [(1, 1), (1, 2), (1, 3), (2, 1), (2, 2), (2, 3)]


def test_full_window_single_pass():
    window = FullWindow(2, 2)
    assert len(list(window)) == 4
    assert list(window) == []


def test_full_window_empty():
    assert list(FullWindow(0, 3)) == []
    assert list(FullWindow(3, 0)) == []


def test_projection_fixtures():
    for tc in load_test_cases(os.path.join(FIXTURES, "projection.yaml")):
        window = ConstrainedWindow.from_low_res_path(
            tc["low_res_path"],
            tc["resolution_factor"],
            tc["search_radius"],
            tc["high_res_rows"],
            tc["high_res_columns"],
        )
        assert list(window) == tc["projected_window"], tc["name"]


def test_projection_constraints():
    window = ConstrainedWindow.from_low_res_path([(0, 0), (1, 1)], 2, 0, 4, 4)
    assert window.constraints[1:] == [(1, 2), (1, 3), (2, 4), (3, 4)]


def test_cells_stay_inside_band():
    path = [(0, 0), (0, 1), (1, 2), (2, 2), (3, 3), (4, 4), (4, 5), (5, 6)]
    window = ConstrainedWindow.from_low_res_path(path, 2, 1, 12, 14)
    constraints = list(window.constraints)
    cells = list(window)
    _assert_row_major(cells)
    assert cells[0] == (1, 1)
    assert cells[-1] == (12, 14)
    for row, column in cells:
        low, high = constraints[row]
        assert low <= column <= high
        assert 1 <= column <= 14


def test_expanded_band_is_monotone():
    path = [(0, 0), (1, 0), (2, 1), (2, 2), (3, 3), (4, 3), (5, 4)]
    window = ConstrainedWindow.from_low_res_path(path, 2, 2, 11, 9)
    bands = window.constraints[1:]
    for (low1, high1), (low2, high2) in zip(bands, bands[1:]):
        assert low2 >= low1
        assert high2 >= high1


def test_empty_rows_are_skipped():
    window = ConstrainedWindow([EMPTY_ROW, (1, 2), EMPTY_ROW, (2, 3)])
    assert list(window) == [(1, 1), (1, 2), (3, 2), (3, 3)]


def test_rejects_bad_factor():
    with pytest.raises(ValueError):
        ConstrainedWindow.from_low_res_path([(0, 0)], 0, 1, 2, 2)
