"""Coordinate value type.

Immutable 2D position over a numeric domain. No validation happens here:
negative or out-of-range coordinates are legal values, bounds are enforced by
:class:`grid_toolkit.grid.Grid` only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Tuple

from grid_toolkit.types import DIAGONAL_OFFSETS, ORTHOGONAL_OFFSETS, N, Offset


@dataclass(frozen=True)
class Coordinate(Generic[N]):
    """Grid coordinate.

    Attributes:
        x: Column (0 at left).
        y: Row (0 at top).
    """

    x: N
    y: N

    @classmethod
    def from_tuple(cls, pair: Tuple[N, N]) -> "Coordinate[N]":
        x, y = pair
        return cls(x, y)

    def as_tuple(self) -> Tuple[N, N]:
        return (self.x, self.y)

    def __add__(self, other: "Coordinate[N]") -> "Coordinate[N]":
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Coordinate[N]") -> "Coordinate[N]":
        return Coordinate(self.x - other.x, self.y - other.y)

    def manhattan_distance(self, other: "Coordinate[N]") -> N:
        """Return ``|dx| + |dy|`` between ``self`` and ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def orthogonal_neighbors(self) -> List["Coordinate[N]"]:
        """Left, right, up, down. Results are not bounds-checked."""
        return self._offset_all(ORTHOGONAL_OFFSETS)

    def diagonal_neighbors(self) -> List["Coordinate[N]"]:
        """Up-left, up-right, down-left, down-right. Not bounds-checked."""
        return self._offset_all(DIAGONAL_OFFSETS)

    def neighbors(self) -> List["Coordinate[N]"]:
        """Orthogonal neighbors followed by diagonal neighbors."""
        return self.orthogonal_neighbors() + self.diagonal_neighbors()

    def line(self, other: "Coordinate[N]") -> List["Coordinate[N]"]:
        """Every lattice point of the rectangle spanned by ``self`` and ``other``.

        This is a rectangle fill, not a straight segment: points are produced
        x-major then y-minor, stepping from ``self`` toward ``other``, both
        corners included. ``Coordinate(0, 0).line(Coordinate(1, 1))`` yields
        ``(0, 0), (0, 1), (1, 0), (1, 1)``.
        """
        one = self._one()
        x_steps = int(abs(other.x - self.x))
        y_steps = int(abs(other.y - self.y))
        x_step = one if self.x < other.x else -one
        y_step = one if self.y < other.y else -one

        points: List[Coordinate[N]] = []
        for i in range(x_steps + 1):
            for j in range(y_steps + 1):
                points.append(Coordinate(self.x + i * x_step, self.y + j * y_step))
        return points

    # -------- Internal helpers --------

    def _one(self) -> N:
        # Unit value in the coordinate's own numeric type
        return type(self.x)(1)

    def _offset_all(self, offsets: List[Offset]) -> List["Coordinate[N]"]:
        one = self._one()
        return [
            Coordinate(self.x + dx * one, self.y + dy * one) for dx, dy in offsets
        ]
