"""Conversion between :class:`Grid` and ``numpy`` arrays.

Arrays are indexed ``[y, x]`` (row-major), matching the grid's storage order,
so ``grid_to_array(g)[y, x] == g.get(Coordinate(x, y))``.
"""

from collections.abc import Sequence
from typing import Any, Optional

import numpy as np

from grid_toolkit.errors import MalformedInputError
from grid_toolkit.grid import Grid


def _is_nested(value: Any) -> bool:
    return isinstance(value, (Sequence, np.ndarray)) and not isinstance(
        value, (str, bytes)
    )


def grid_to_array(grid: Grid[Any], dtype: Optional[Any] = None) -> np.ndarray:
    """Return a ``(height, width)`` array holding the grid's values.

    Cells that are themselves sequences (tuples, lists, arrays) are stored as
    objects in an ``object`` array instead of adding a dimension.
    """
    values = list(grid.values)
    if any(_is_nested(value) for value in values):
        array = np.empty(len(values), dtype=object)
        for index, value in enumerate(values):
            array[index] = value
    else:
        array = np.array(values, dtype=dtype)
    return array.reshape(grid.height, grid.width)


def grid_from_array(array: np.ndarray) -> Grid[Any]:
    """Build a grid from a 2D array; cells hold plain Python scalars."""
    if array.ndim != 2:
        raise MalformedInputError(f"Expected a 2D array, got {array.ndim} dimensions")
    height, width = array.shape
    return Grid(width, height, array.reshape(-1).tolist())
