from typing import List, Optional, Tuple

from grid_toolkit.coordinate import Coordinate
from grid_toolkit.grid import Grid
from grid_toolkit.queue import PriorityQueue

SAMPLE_RISK_MAP = """\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""


def make_char_grid(text: str) -> Grid[str]:
    """Character grid, one cell per character of each non-empty line."""
    return Grid.from_text(text)


def make_wall_grid(text: str) -> Grid[bool]:
    """Boolean grid where ``#`` marks a wall (True)."""
    return Grid.from_text(text, lambda char: char == "#")


def coords(*pairs: Tuple[int, int]) -> List[Coordinate[int]]:
    return [Coordinate(x, y) for x, y in pairs]


def drain_queue(queue: PriorityQueue[str, int]) -> List[Optional[str]]:
    """Pop until empty, returning items in extraction order."""
    items: List[Optional[str]] = []
    while not queue.is_empty():
        items.append(queue.pop())
    return items
