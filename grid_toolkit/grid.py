"""Dense 2D grid addressed by :class:`~grid_toolkit.coordinate.Coordinate`.

Cells are stored row-major in a single persistent vector
(``pyrsistent.PVector``): the value at ``(x, y)`` lives at offset
``y * width + x``. The ``Grid`` object is mutable (``set`` swaps in a new
vector) while snapshots taken with :meth:`Grid.copy` or held by an in-progress
iteration stay untouched.

Design notes:

* Storage is always exactly ``width * height`` cells.
* Every access outside ``[0, width) x [0, height)`` raises
  :class:`~grid_toolkit.errors.OutOfBoundsError`; there is no wraparound and no
  clamping, and negative coordinates are out of bounds.
* Neighbor queries filter :meth:`Coordinate.orthogonal_neighbors` /
  :meth:`Coordinate.diagonal_neighbors` to in-bounds cells, preserving their
  fixed base order.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_toolkit.coordinate import Coordinate
from grid_toolkit.errors import MalformedInputError, OutOfBoundsError
from grid_toolkit.parsing import to_matrix
from grid_toolkit.types import Convert, Predicate, T
from grid_toolkit.utils.render import render_grid

logger = logging.getLogger(__name__)

Cell = Tuple[Coordinate[int], T]


def _identity(char: str) -> Any:
    return char


@dataclass
class Grid(Generic[T]):
    """Row-major matrix of values.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        values: Row-major cell values, ``len(values) == width * height``.
    """

    width: int
    height: int
    values: PVector[T]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise MalformedInputError(
                f"Grid dimensions must be non-negative, got {self.width}x{self.height}"
            )
        if not isinstance(self.values, type(pvector())):
            self.values = pvector(self.values)
        if len(self.values) != self.width * self.height:
            raise MalformedInputError(
                f"Expected {self.width * self.height} values for a "
                f"{self.width}x{self.height} grid, got {len(self.values)}"
            )

    # -------- Construction --------

    @classmethod
    def new(
        cls, width: int, height: int, default_factory: Optional[Callable[[], T]] = None
    ) -> "Grid[T]":
        """Grid where every cell holds ``default_factory()`` (``None`` without one)."""
        factory = default_factory or (lambda: None)
        return cls(width, height, pvector(factory() for _ in range(width * height)))

    @classmethod
    def with_value(cls, width: int, height: int, value: T) -> "Grid[T]":
        """Grid where every cell holds its own copy of ``value``."""
        return cls(
            width, height, pvector(copy.copy(value) for _ in range(width * height))
        )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Grid[T]":
        """Build a grid from equal-length rows (``rows[y][x]``).

        Raises:
            MalformedInputError: ``rows`` is empty, has zero-width rows, or is
                ragged.
        """
        if not rows or not rows[0]:
            raise MalformedInputError("Cannot build a grid from empty input")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise MalformedInputError(
                    f"Row {y} has {len(row)} cells, expected {width}"
                )
        return cls(width, len(rows), pvector(value for row in rows for value in row))

    @classmethod
    def from_text(cls, text: str, convert: Convert[T] = _identity) -> "Grid[T]":
        """Parse one row per non-empty line and one cell per character.

        Whatever ``convert`` raises propagates unchanged on the first failing
        character.

        Raises:
            MalformedInputError: No non-empty lines, or lines of differing length.
        """
        rows = to_matrix(text, convert)
        grid = cls.from_rows(rows)
        logger.debug("Parsed %dx%d grid from text", grid.width, grid.height)
        return grid

    # -------- Cell access --------

    def in_bounds(self, coord: Coordinate[Any]) -> bool:
        """Return True if ``coord`` lies within the grid rectangle."""
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def get(self, coord: Coordinate[int]) -> T:
        return self.values[self._index(coord)]

    def set(self, coord: Coordinate[int], value: T) -> None:
        self.values = self.values.set(self._index(coord), value)

    def update(self, coord: Coordinate[int], fn: Callable[[T], T]) -> T:
        """Replace the value at ``coord`` with ``fn(old)`` and return it."""
        index = self._index(coord)
        new_value = fn(self.values[index])
        self.values = self.values.set(index, new_value)
        return new_value

    def __getitem__(self, coord: Coordinate[int]) -> T:
        return self.get(coord)

    def __setitem__(self, coord: Coordinate[int], value: T) -> None:
        self.set(coord, value)

    # -------- Neighbors --------

    def orthogonal_neighbors(self, coord: Coordinate[int]) -> List[Coordinate[int]]:
        """In-bounds neighbors in the order left, right, up, down."""
        return [n for n in coord.orthogonal_neighbors() if self.in_bounds(n)]

    def diagonal_neighbors(self, coord: Coordinate[int]) -> List[Coordinate[int]]:
        """In-bounds neighbors in the order up-left, up-right, down-left, down-right."""
        return [n for n in coord.diagonal_neighbors() if self.in_bounds(n)]

    def neighbors(self, coord: Coordinate[int]) -> List[Coordinate[int]]:
        """Orthogonal neighbors followed by diagonal neighbors."""
        return self.orthogonal_neighbors(coord) + self.diagonal_neighbors(coord)

    # -------- Bulk operations --------

    def replace(self, predicate: Predicate[T], value: T) -> int:
        """Set every cell whose current value satisfies ``predicate`` to ``value``.

        Single row-major pass. Returns the number of replaced cells.
        """
        evolver = self.values.evolver()
        replaced = 0
        for index, old in enumerate(self.values):
            if predicate(old):
                evolver[index] = value
                replaced += 1
        self.values = evolver.persistent()
        return replaced

    # -------- Enumeration --------

    def cells(self) -> Iterator[Cell[T]]:
        """Lazy ``(coordinate, value)`` pairs, y ascending then x ascending."""
        return self._cells(self.values, self.width)

    def coordinates(self) -> Iterator[Coordinate[int]]:
        for y in range(self.height):
            for x in range(self.width):
                yield Coordinate(x, y)

    def true_coordinates(self) -> Iterator[Coordinate[int]]:
        """Coordinates whose value is ``True``, in row-major order.

        Only the ``True`` singleton counts; truthy non-boolean cells such as
        ``1`` or ``"x"`` are skipped.
        """
        return (coord for coord, value in self.cells() if value is True)

    def drain(self) -> Iterator[Cell[T]]:
        """Hand over every cell and leave this grid empty (``0x0``)."""
        values, width = self.values, self.width
        self.width = 0
        self.height = 0
        self.values = pvector()
        return self._cells(values, width)

    def copy(self) -> "Grid[T]":
        """Snapshot sharing storage with this grid."""
        return Grid(self.width, self.height, self.values)

    def __iter__(self) -> Iterator[Cell[T]]:
        return self.cells()

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        return render_grid(self)

    # -------- Internal helpers --------

    def _index(self, coord: Coordinate[int]) -> int:
        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord, self.width, self.height)
        return coord.y * self.width + coord.x

    @staticmethod
    def _cells(values: Iterable[T], width: int) -> Iterator[Cell[T]]:
        for index, value in enumerate(values):
            yield Coordinate(index % width, index // width), value
