"""Common type aliases, offset tables and enumerations.

``Convert`` is the extension point used by text ingestion: a caller-supplied
function mapping one character (or one line) to a cell value. Whatever it
raises is propagated unchanged.
"""

from enum import StrEnum, auto
from typing import Callable, List, Tuple, TypeVar

T = TypeVar("T")
P = TypeVar("P")

# Numeric coordinate domain (int, float, Fraction, numpy scalars, ...)
N = TypeVar("N")

Convert = Callable[[str], T]
Predicate = Callable[[T], bool]

Offset = Tuple[int, int]

# Left, right, up, down
ORTHOGONAL_OFFSETS: List[Offset] = [(-1, 0), (1, 0), (0, -1), (0, 1)]

# Up-left, up-right, down-left, down-right
DIAGONAL_OFFSETS: List[Offset] = [(-1, -1), (1, -1), (-1, 1), (1, 1)]


class ErrorKind(StrEnum):
    """Failure categories surfaced by the toolkit."""

    NOT_FOUND = auto()
    OUT_OF_BOUNDS = auto()
    MALFORMED_INPUT = auto()
    CONVERSION_FAILED = auto()
