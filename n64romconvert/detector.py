import logging

from n64romconvert.constants import MAGIC_SIZE
from n64romconvert.exceptions import InvalidFormatError
from n64romconvert.files import open_source
from n64romconvert.ordering import RomOrdering
from n64romconvert.structs import read_bytes

logger = logging.getLogger(__name__)


def detect(stream):
    """
    Detect the byte ordering of a ROM image.

    The stream is rewound to offset 0 before the magic number is read,
    and is left positioned right after it (offset 4).

    Example usage:

        .. code-block:: python

            from n64romconvert import detect

            with open('/tmp/baserom.us.z64', 'rb') as fp:
                ordering = detect(fp)

    :param stream: a seekable binary file-like object
    :returns: the detected :py:class:`~n64romconvert.ordering.RomOrdering`
    :raises: :py:exc:`~n64romconvert.exceptions.InvalidFormatError` if the
        magic number matches no known ordering
    :raises: :py:exc:`~n64romconvert.exceptions.TruncatedRomError` if the
        stream is shorter than the magic number
    """
    stream.seek(0)
    magic = read_bytes(stream, MAGIC_SIZE)

    for ordering in RomOrdering:
        if magic == ordering.magic:
            logger.debug("Detected ROM ordering %s", ordering.name)
            return ordering

    raise InvalidFormatError(
        "Unrecognized ROM magic: got 0x{0}, expected one of {1}".format(
            magic.hex(), ", ".join("0x" + o.magic.hex() for o in RomOrdering)
        )
    )


def detect_path(path):
    """
    Detect the byte ordering of the ROM file at ``path``.

    :raises: :py:exc:`~n64romconvert.exceptions.RomOpenError` if the file
        cannot be opened
    """
    with open_source(path) as fp:
        return detect(fp)
