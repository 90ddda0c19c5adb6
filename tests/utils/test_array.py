# tests/utils/test_array.py

import numpy as np
import pytest

from grid_toolkit.coordinate import Coordinate
from grid_toolkit.errors import MalformedInputError
from grid_toolkit.grid import Grid
from grid_toolkit.utils.array import grid_from_array, grid_to_array


def test_grid_to_array_is_indexed_y_then_x() -> None:
    grid = Grid.from_text("123\n456\n", int)
    array = grid_to_array(grid)
    assert array.shape == (2, 3)
    for coord, value in grid.cells():
        assert array[coord.y, coord.x] == value


def test_grid_to_array_dtype() -> None:
    grid = Grid.from_text("#.\n", lambda c: c == "#")
    array = grid_to_array(grid, dtype=np.bool_)
    assert array.dtype == np.bool_
    assert array.tolist() == [[True, False]]


def test_grid_from_array() -> None:
    grid = grid_from_array(np.arange(6).reshape(2, 3))
    assert (grid.width, grid.height) == (3, 2)
    assert grid.get(Coordinate(2, 1)) == 5
    assert type(grid.get(Coordinate(0, 0))) is int


def test_grid_from_array_rejects_non_2d() -> None:
    with pytest.raises(MalformedInputError):
        grid_from_array(np.zeros(4))


def test_grid_to_array_keeps_sequence_cells_whole() -> None:
    grid = Grid(2, 2, [(0, 1), (2, 3), (4, 5), (6, 7)])
    array = grid_to_array(grid)
    assert array.shape == (2, 2)
    assert array.dtype == object
    assert array[1, 0] == (4, 5)


def test_grid_to_array_strings_stay_scalar() -> None:
    array = grid_to_array(Grid.from_text("ab\ncd\n"))
    assert array.shape == (2, 2)
    assert array[1, 1] == "d"
