"""Puzzle solution runner.

``@solution(day=..., part=...)`` turns ``solve(input_text) -> result`` into a
zero-argument callable that loads the day's input, times ``solve`` and prints::

    Day 15, part 1 solution: 40
    Time elapsed: 0s 1ms 234µs 567ns

The decorated callable returns ``str(result)``; the undecorated function stays
reachable as ``__wrapped__``.

Examples
--------
>>> from grid_toolkit.solution import solution
>>> @solution(day=1, part=1)
... def part_one(text: str) -> int:
...     return len(text.splitlines())
>>> part_one()  # reads ./day-1/input.txt  # doctest: +SKIP
"""

import functools
import logging
import time
from typing import Any, Callable, Optional

from grid_toolkit.config import SolutionConfig
from grid_toolkit.files import read

logger = logging.getLogger(__name__)

SolveFn = Callable[[str], Any]
Runner = Callable[[], str]


def format_elapsed(elapsed_ns: int) -> str:
    """Split nanoseconds into ``"{s}s {ms}ms {µs}µs {ns}ns"``."""
    seconds = elapsed_ns // 1_000_000_000
    millis = elapsed_ns // 1_000_000 % 1000
    micros = elapsed_ns // 1_000 % 1000
    nanos = elapsed_ns % 1000
    return f"{seconds}s {millis}ms {micros}µs {nanos}ns"


def _check_positive(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def solution(
    day: int, part: int, config: Optional[SolutionConfig] = None
) -> Callable[[SolveFn], Runner]:
    """Wrap a solver with input loading, timing and printed output.

    Arguments:
        day: Puzzle day, used to locate the input file.
        part: Puzzle part, only used in the printed header.
        config: Fixed configuration; read from the environment on every call
            when omitted.
    """
    _check_positive("day", day)
    _check_positive("part", part)

    def decorator(solve: SolveFn) -> Runner:
        @functools.wraps(solve)
        def run() -> str:
            cfg = config or SolutionConfig.from_env()
            logging.basicConfig(level=cfg.log_level)
            path = cfg.input_path(day)
            logger.debug("Running day %d part %d on %s", day, part, path)
            text = read(path)

            start = time.perf_counter_ns()
            result = solve(text)
            elapsed = time.perf_counter_ns() - start

            print(f"Day {day}, part {part} solution: {result}")
            print(f"Time elapsed: {format_elapsed(elapsed)}")
            return str(result)

        return run

    return decorator
