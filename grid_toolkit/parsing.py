"""Text ingestion helpers.

Both helpers skip blank lines and apply a caller-supplied conversion. The
first exception raised by the conversion propagates unchanged; errors are
never aggregated.
"""

from typing import List

from grid_toolkit.types import Convert, T


def non_empty_lines(text: str) -> List[str]:
    """Return the lines of ``text`` in order, without blank ones.

    Lines end at ``\\n`` only, with one trailing ``\\r`` dropped, so other
    control characters (``\\r`` mid-line, form feeds, ...) stay cells.
    """
    lines = (line.removesuffix("\r") for line in text.split("\n"))
    return [line for line in lines if line]


def to_matrix(text: str, convert: Convert[T]) -> List[List[T]]:
    """Convert every character of every non-empty line.

    Rows follow line order; columns follow character order. Row lengths are
    not checked here (see :meth:`grid_toolkit.grid.Grid.from_rows`).
    """
    return [[convert(char) for char in line] for line in non_empty_lines(text)]


def to_lines(text: str, convert: Convert[T]) -> List[T]:
    """Convert each non-empty line as a whole."""
    return [convert(line) for line in non_empty_lines(text)]
