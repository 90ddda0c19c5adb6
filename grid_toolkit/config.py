"""Solution runner configuration.

Settings come from environment variables, optionally seeded from a ``.env``
file in the working directory (existing variables win):

* ``GRID_TOOLKIT_INPUT_DIR``: directory holding ``day-N`` folders (default ``.``).
* ``GRID_TOOLKIT_INPUT_PATTERN``: input path template relative to the input
  directory, formatted with ``day`` and ``suffix`` (default
  ``day-{day}/input{suffix}.txt``).
* ``GRID_TOOLKIT_TEST``: truthy to read the ``.test`` input instead. Passing
  ``test`` as the first command line argument has the same effect.
* ``GRID_TOOLKIT_LOG_LEVEL``: root log level name (default ``WARNING``).
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

DEFAULT_INPUT_PATTERN = "day-{day}/input{suffix}.txt"
TEST_SUFFIX = ".test"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SolutionConfig:
    input_dir: Path = Path(".")
    input_pattern: str = DEFAULT_INPUT_PATTERN
    test_mode: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, argv: Optional[Sequence[str]] = None) -> "SolutionConfig":
        """Build a config from the environment and command line arguments."""
        load_dotenv(find_dotenv(usecwd=True), override=False)
        args = sys.argv if argv is None else argv
        test_flag = os.getenv("GRID_TOOLKIT_TEST", "").strip().lower() in _TRUTHY
        return cls(
            input_dir=Path(os.getenv("GRID_TOOLKIT_INPUT_DIR", ".")),
            input_pattern=os.getenv("GRID_TOOLKIT_INPUT_PATTERN", DEFAULT_INPUT_PATTERN),
            test_mode=test_flag or (len(args) > 1 and args[1] == "test"),
            log_level=os.getenv("GRID_TOOLKIT_LOG_LEVEL", "WARNING").upper(),
        )

    def input_path(self, day: int) -> Path:
        """Location of the puzzle input for ``day``."""
        suffix = TEST_SUFFIX if self.test_mode else ""
        return self.input_dir / self.input_pattern.format(day=day, suffix=suffix)
