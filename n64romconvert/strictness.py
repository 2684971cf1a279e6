"""
Module for alerting the user when a conversion does something
lossy with the ROM data, such as dropping a trailing partial chunk.
"""

import warnings
from enum import Enum

from n64romconvert.exceptions import RomTruncationError, RomTruncationWarning


class Strictness(Enum):
    NONE = 0  # Silently drop, as the original tool does
    WARN = 1  # Drop, but warn about it
    FORBID = 2  # raise exception when data gets dropped


strict_level = Strictness.NONE


def set_strictness(level):
    assert type(level) is Strictness
    global strict_level
    strict_level = level


def get_strictness():
    return strict_level


def problem(msg):
    "Warn or raise an exception with the given message."
    if strict_level == Strictness.FORBID:
        raise RomTruncationError(msg)
    elif strict_level == Strictness.WARN:
        warnings.warn(RomTruncationWarning(msg))
