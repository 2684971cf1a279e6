"""
Byte reordering between the three ROM orderings.

Every conversion permutes the bytes inside each 4-byte word of the image.
Each of the three permutations is its own inverse, so the direction of
a conversion does not matter: only the unordered pair of orderings does.
"""

import logging
import os

from n64romconvert.constants import CHUNK_SIZE, WORD_SIZE
from n64romconvert.detector import detect
from n64romconvert.exceptions import SameFileError, SameOrderingError
from n64romconvert.files import create_sink, open_source
from n64romconvert.ordering import RomOrdering
from n64romconvert.structs import iter_chunks, write_bytes
from n64romconvert.utils import target_from_path

logger = logging.getLogger(__name__)

# output[i] = input[perm[i]], within each word
BYTE_SWAP = (1, 0, 3, 2)
ENDIAN_SWAP = (3, 2, 1, 0)
BYTE_ENDIAN_SWAP = (2, 3, 0, 1)


def permute_words(data, perm):
    """
    Reorder the bytes of every 4-byte word in ``data`` according to ``perm``.

    :param data: a bytes-like object whose length is a multiple of 4
    :param perm: a 4-tuple of source offsets, one per output byte
    :returns: the permuted data, as :py:class:`bytes`
    """
    if len(data) % WORD_SIZE != 0:
        raise ValueError(
            "Data length must be a multiple of {0}, got {1}".format(
                WORD_SIZE, len(data)
            )
        )
    out = bytearray(len(data))
    for i, j in enumerate(perm):
        out[i::WORD_SIZE] = data[j::WORD_SIZE]
    return bytes(out)


def byte_swap(data):
    """Swap each adjacent byte pair (z64 <-> v64)"""
    return permute_words(data, BYTE_SWAP)


def endian_swap(data):
    """Reverse each 4-byte word (z64 <-> n64)"""
    return permute_words(data, ENDIAN_SWAP)


def byte_endian_swap(data):
    """Swap the two halves of each 4-byte word (n64 <-> v64)"""
    return permute_words(data, BYTE_ENDIAN_SWAP)


TRANSFORMS = {
    frozenset((RomOrdering.BIG_ENDIAN, RomOrdering.BYTE_SWAPPED)): byte_swap,
    frozenset((RomOrdering.BIG_ENDIAN, RomOrdering.LITTLE_ENDIAN)): endian_swap,
    frozenset((RomOrdering.LITTLE_ENDIAN, RomOrdering.BYTE_SWAPPED)): byte_endian_swap,
}


def get_transform(a, b):
    """
    Return the transform converting between orderings ``a`` and ``b``,
    in either direction.

    :raises: :py:exc:`~n64romconvert.exceptions.SameOrderingError` if ``a``
        and ``b`` are the same ordering
    """
    if a == b:
        raise SameOrderingError(
            "will not convert between the same formats ({0})".format(a.name)
        )
    return TRANSFORMS[frozenset((a, b))]


def convert(
    source_ordering, target_ordering, instream, outstream, chunk_size=CHUNK_SIZE
):
    """
    Convert ROM data from one ordering to another.

    Data is read from ``instream`` in ``chunk_size``-byte chunks, starting
    at its current position, and every transformed chunk is written to
    ``outstream`` right away. Reading stops at the first chunk that
    cannot be read in full; those trailing bytes are **not** written.
    See :py:mod:`n64romconvert.strictness` to get warned about it.

    Neither stream is closed.

    :param source_ordering: ordering of the data in ``instream``
    :param target_ordering: wanted ordering of the data in ``outstream``
    :param instream: a binary file-like object providing ``read()``
    :param outstream: a binary file-like object providing ``write()``
    :param chunk_size: the chunk size, in bytes; a positive multiple of 4
    :returns: the number of bytes written
    :raises: :py:exc:`~n64romconvert.exceptions.SameOrderingError` if the
        two orderings are the same
    """
    transform = get_transform(source_ordering, target_ordering)
    if chunk_size <= 0 or chunk_size % WORD_SIZE != 0:
        raise ValueError(
            "Chunk size must be a positive multiple of {0}, got {1}".format(
                WORD_SIZE, chunk_size
            )
        )

    logger.debug(
        "Converting %s -> %s using %s",
        source_ordering.name,
        target_ordering.name,
        transform.__name__,
    )

    written = 0
    for chunk in iter_chunks(instream, chunk_size):
        write_bytes(outstream, transform(chunk))
        written += len(chunk)

    logger.debug("Wrote %d bytes", written)
    return written


def convert_file(src_path, dest_path, target=None, chunk_size=CHUNK_SIZE):
    """
    Convert the ROM file at ``src_path`` into a new file at ``dest_path``.

    The source ordering is detected from the file contents. If ``target``
    is not given, it is inferred from the extension of ``dest_path``
    (``.z64``, ``.n64`` or ``.v64``).

    The destination is created (or truncated) before the source ordering
    is checked, and is not removed if the conversion fails.

    :returns: a ``(source_ordering, target_ordering)`` tuple
    :raises: :py:exc:`~n64romconvert.exceptions.InvalidTargetFormatError`
        if ``target`` is not given and cannot be inferred
    :raises: :py:exc:`~n64romconvert.exceptions.SameFileError` if
        ``src_path`` and ``dest_path`` are the same file
    :raises: :py:exc:`~n64romconvert.exceptions.SameOrderingError` if the
        source already has the target ordering
    """
    if target is None:
        target = target_from_path(dest_path)

    if os.path.exists(dest_path) and os.path.exists(src_path):
        if os.path.samefile(src_path, dest_path):
            raise SameFileError(
                "will not convert `{0}` onto itself".format(src_path)
            )

    with open_source(src_path) as infile, create_sink(dest_path) as outfile:
        source = detect(infile)
        infile.seek(0)
        convert(source, target, infile, outfile, chunk_size=chunk_size)

    return source, target
