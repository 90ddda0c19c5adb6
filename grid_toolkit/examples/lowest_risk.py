"""Lowest-risk path through a grid of digits.

Each cell holds a risk level 1-9; entering a cell costs its risk. The answer
is the cheapest total from the top-left to the bottom-right corner, moving
orthogonally. Part two tiles the input five times in each direction, adding
the tile's distance to every risk and wrapping values above 9 back to 1.

Run with ``python -m grid_toolkit.examples.lowest_risk [test]`` from a
directory holding ``day-15/input.txt``.
"""

from typing import Dict, Optional

from grid_toolkit.coordinate import Coordinate
from grid_toolkit.grid import Grid
from grid_toolkit.queue import PriorityQueue
from grid_toolkit.solution import solution

TILE_FACTOR = 5


def lowest_total_risk(
    grid: Grid[int],
    start: Optional[Coordinate[int]] = None,
    goal: Optional[Coordinate[int]] = None,
) -> Optional[int]:
    """Dijkstra over ``grid``; ``None`` if ``goal`` is unreachable.

    The start cell's own risk is not counted. Priorities are negated costs
    because :class:`PriorityQueue` pops the highest priority first.
    """
    start = start or Coordinate(0, 0)
    goal = goal or Coordinate(grid.width - 1, grid.height - 1)

    frontier: PriorityQueue[Coordinate[int], int] = PriorityQueue()
    frontier.push(start, 0)
    best: Dict[Coordinate[int], int] = {start: 0}

    while frontier:
        coord, priority = frontier.pop_with_priority()  # type: ignore[misc]
        cost = -priority
        if coord == goal:
            return cost
        if cost > best[coord]:
            # Stale entry superseded by a cheaper push
            continue
        for neighbor in grid.orthogonal_neighbors(coord):
            candidate = cost + grid.get(neighbor)
            if candidate < best.get(neighbor, candidate + 1):
                best[neighbor] = candidate
                frontier.push(neighbor, -candidate)

    return None


def expand_tiles(grid: Grid[int], factor: int = TILE_FACTOR) -> Grid[int]:
    """Tile ``grid`` ``factor`` times along both axes with incremented risks."""
    expanded: Grid[int] = Grid.with_value(grid.width * factor, grid.height * factor, 0)
    for coord, risk in grid.cells():
        for tile_y in range(factor):
            for tile_x in range(factor):
                target = Coordinate(
                    coord.x + tile_x * grid.width, coord.y + tile_y * grid.height
                )
                expanded.set(target, (risk + tile_x + tile_y - 1) % 9 + 1)
    return expanded


def solve_part_one(text: str) -> Optional[int]:
    return lowest_total_risk(Grid.from_text(text, int))


def solve_part_two(text: str) -> Optional[int]:
    return lowest_total_risk(expand_tiles(Grid.from_text(text, int)))


part_one = solution(day=15, part=1)(solve_part_one)
part_two = solution(day=15, part=2)(solve_part_two)


if __name__ == "__main__":
    part_one()
    part_two()
