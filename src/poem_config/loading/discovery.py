"""Config file discovery.

Walks up from the working directory looking for the config file, the way
git looks for `.git/`.
"""

import typing as t
from pathlib import Path

from ..config.settings import CONFIG_FILENAME
from ..domain.exceptions import ConfigNotFoundError
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru


def find_config(
    filename: str = CONFIG_FILENAME,
    start: Path | None = None,
    logger: "loguru.Logger" = get_logger(__name__),
) -> Path:
    """Find the nearest `filename` in `start` or one of its ancestors.

    Args:
        filename: Relative path of the config file inside a directory
        start: Directory to start from. Defaults to the working directory.
        logger: Logger for recording the search

    Returns:
        Path of the config file in the nearest directory that has one

    Raises:
        ConfigNotFoundError: If no directory up to the filesystem root has the
            file, or the working directory cannot be determined
    """
    if start is None:
        try:
            start = Path.cwd()
        except OSError:
            raise ConfigNotFoundError() from None

    current = start.absolute()
    while True:
        candidate = current / filename
        logger.trace(f"Looking for config at {candidate}")
        try:
            found = candidate.is_file()
        except OSError:
            # Unreadable directories count as not having the file
            found = False
        if found:
            logger.debug(f"Found config file: {candidate}")
            return candidate

        parent = current.parent
        if parent == current:
            break
        current = parent

    logger.debug(f"No {filename} found above {start}")
    raise ConfigNotFoundError()
