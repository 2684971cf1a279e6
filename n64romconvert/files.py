"""
Opening and creating ROM files on disk.

These are the only places where the library acquires file handles on
behalf of the caller; everything else works on already-open streams.
"""

import logging

from n64romconvert.exceptions import RomCreateError, RomOpenError

logger = logging.getLogger(__name__)


def open_source(path):
    """
    Open an existing ROM file for reading, in binary mode.

    :param path: path to the source ROM
    :raises: :py:exc:`~n64romconvert.exceptions.RomOpenError` if the file
        does not exist or cannot be read
    """
    try:
        fp = open(path, "rb")
    except OSError as e:
        raise RomOpenError(e.errno, e.strerror, path) from e
    logger.debug("Opened source ROM %s", path)
    return fp


def create_sink(path):
    """
    Create (or truncate) a ROM file for writing, in binary mode.

    :param path: path to the destination ROM
    :raises: :py:exc:`~n64romconvert.exceptions.RomCreateError` if the file
        cannot be created
    """
    try:
        fp = open(path, "wb")
    except OSError as e:
        raise RomCreateError(e.errno, e.strerror, path) from e
    logger.debug("Created destination ROM %s", path)
    return fp
