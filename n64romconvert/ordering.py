"""
The three on-disk byte orderings of an N64 cartridge image.
"""

from enum import Enum
from typing import Optional

from n64romconvert.constants import (
    MAGIC_BIG_ENDIAN,
    MAGIC_BYTE_SWAPPED,
    MAGIC_LITTLE_ENDIAN,
)


class RomOrdering(Enum):
    """
    Byte ordering of a ROM image.

    Each member's value is a ``(magic, char)`` tuple: the 4-byte prefix
    identifying the ordering, and the one-character code used in the
    conventional file extension (``z64``, ``n64``, ``v64``).
    """

    BIG_ENDIAN = (MAGIC_BIG_ENDIAN, "z")
    LITTLE_ENDIAN = (MAGIC_LITTLE_ENDIAN, "n")
    BYTE_SWAPPED = (MAGIC_BYTE_SWAPPED, "v")

    @property
    def magic(self):
        # type: () -> bytes
        return self.value[0]

    @property
    def char(self):
        # type: () -> str
        return self.value[1]

    @property
    def extension(self):
        # type: () -> str
        return ".{0}64".format(self.char)

    @classmethod
    def from_char(cls, char):
        """
        Return the ordering identified by ``char`` (``'z'``, ``'n'`` or
        ``'v'``), or ``None`` if the character names no ordering.
        """
        for ordering in cls:
            if ordering.char == char:
                return ordering
        return None

    def __str__(self):
        return "{0} ({1}64)".format(self.name, self.char)


def parse_ordering_code(char):
    # type: (str) -> Optional[RomOrdering]
    return RomOrdering.from_char(char)


def ordering_display_char(ordering):
    # type: (RomOrdering) -> str
    return ordering.char
