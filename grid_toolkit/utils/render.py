"""Text rendering of grids.

Rows are emitted top to bottom and joined with ``\\n``; there is no trailing
newline. Boolean cells render as ``#`` (True) and ``.`` (False).
"""

from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from grid_toolkit.grid import Grid

TRUE_CHAR = "#"
FALSE_CHAR = "."


def format_cell(value: Any) -> str:
    """Default per-cell formatter (``#``/``.`` for booleans, ``str`` otherwise)."""
    if isinstance(value, bool):
        return TRUE_CHAR if value else FALSE_CHAR
    return str(value)


def render_grid(
    grid: "Grid[Any]", fmt: Optional[Callable[[Any], str]] = None, sep: str = ""
) -> str:
    """Render every row of ``grid`` with ``fmt`` applied per cell."""
    fmt = fmt or format_cell
    width = grid.width
    values = grid.values
    rows = [
        sep.join(fmt(values[y * width + x]) for x in range(width))
        for y in range(grid.height)
    ]
    return "\n".join(rows)


def render_bool_grid(
    grid: "Grid[bool]", true_char: str = TRUE_CHAR, false_char: str = FALSE_CHAR
) -> str:
    """Render a boolean grid using ``true_char`` / ``false_char``."""
    return render_grid(grid, lambda value: true_char if value else false_char)
