"""
Module providing low-level facilities for reading and writing
raw ROM data from binary streams.
"""

import logging

from n64romconvert import strictness as strictness
from n64romconvert.exceptions import TruncatedRomError

logger = logging.getLogger(__name__)


def read_up_to(stream, size):
    """
    Read at most ``size`` bytes from a stream, retrying short reads
    until either ``size`` bytes were collected or the stream is exhausted.

    :param stream: an object providing a ``read()`` method
    :param size: the amount of bytes to read
    :returns: the read data, possibly shorter than ``size``
    """
    data = b""
    while len(data) < size:
        part = stream.read(size - len(data))
        if not part:
            break
        data += part
    return data


def read_bytes(stream, size):
    """
    Read the given amount of raw bytes from a stream.

    :param stream: the stream from which to read data
    :param size: the size to read, in bytes
    :returns: the read data
    :raises: :py:exc:`~n64romconvert.exceptions.TruncatedRomError` if
        fewer than ``size`` bytes were read
    """

    if size == 0:
        return b""

    data = read_up_to(stream, size)
    if len(data) < size:
        raise TruncatedRomError(
            "Trying to read {0} bytes, only got {1}".format(size, len(data))
        )
    return data


def write_bytes(stream, data):
    """
    Write the given raw bytes to a stream.

    :param stream: the stream into which to write data
    :param data: the data to write
    """
    stream.write(data)


def iter_chunks(stream, chunk_size):
    """
    Iterate over full ``chunk_size``-sized chunks read from a stream.

    Iteration stops at the first chunk that cannot be read in full; those
    trailing bytes are discarded, and reported according to the current
    :py:mod:`~n64romconvert.strictness` level once every full chunk has
    been consumed.

    :param stream: the stream from which to read data
    :param chunk_size: the chunk size, in bytes
    """
    while True:
        chunk = read_up_to(stream, chunk_size)
        if len(chunk) < chunk_size:
            break
        yield chunk

    if chunk:
        logger.debug("Dropping %d trailing bytes", len(chunk))
        strictness.problem(
            "Dropped {0} trailing bytes not filling a whole {1}-byte chunk".format(
                len(chunk), chunk_size
            )
        )
