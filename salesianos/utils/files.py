"""Utility functions for file and directory management."""

import logging
from pathlib import Path

from salesianos.exceptions import StorageError

logger = logging.getLogger(__name__)


def ensure_directory(path: Path | str) -> Path:
    """Create a directory and its parents if they do not exist yet.

    An existing directory is not an error; any other failure is.

    Args:
        path: Directory to create

    Returns:
        The directory as a Path.

    Raises:
        StorageError: If the directory cannot be created (e.g. a file is in the way).

    """
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(str(directory), str(e)) from e
    logger.debug('Directory ready: %s', directory)
    return directory
