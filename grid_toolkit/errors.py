"""Exception hierarchy.

Every toolkit exception carries an :class:`~grid_toolkit.types.ErrorKind` and
also derives from the closest builtin (``IndexError``, ``ValueError``,
``FileNotFoundError``) so callers can catch either. Conversion failures raised
by caller-supplied functions are never wrapped; they reach the caller as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from grid_toolkit.types import ErrorKind

if TYPE_CHECKING:
    from grid_toolkit.coordinate import Coordinate


class GridToolkitError(Exception):
    """Base class for toolkit failures."""

    kind: ErrorKind


class OutOfBoundsError(GridToolkitError, IndexError):
    """Coordinate access outside ``[0, width) x [0, height)``."""

    kind = ErrorKind.OUT_OF_BOUNDS

    def __init__(self, coordinate: "Coordinate[Any]", width: int, height: int) -> None:
        self.coordinate = coordinate
        self.width = width
        self.height = height
        super().__init__(
            f"Out of bounds: {coordinate.as_tuple()} for grid {width}x{height}"
        )


class MalformedInputError(GridToolkitError, ValueError):
    """Ragged, empty or otherwise unusable ingestion input."""

    kind = ErrorKind.MALFORMED_INPUT


class ResourceNotFoundError(GridToolkitError, FileNotFoundError):
    """Named input resource does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: Any, message: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message or f"File not found: {path}")
