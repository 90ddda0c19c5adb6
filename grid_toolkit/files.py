"""Input file access."""

import logging
from os import PathLike
from pathlib import Path
from typing import Union

from grid_toolkit.errors import ResourceNotFoundError

logger = logging.getLogger(__name__)

PathArg = Union[str, "PathLike[str]"]


def read(path: PathArg) -> str:
    """Return the full text contents of ``path``.

    Raises:
        ResourceNotFoundError: ``path`` does not exist. Any other ``OSError``
            (permissions, decoding, ...) propagates unchanged.
    """
    try:
        contents = Path(path).read_text()
    except FileNotFoundError as exc:
        raise ResourceNotFoundError(path) from exc
    logger.debug("Read %d characters from %s", len(contents), path)
    return contents
