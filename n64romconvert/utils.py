import os

from n64romconvert.exceptions import InvalidTargetFormatError
from n64romconvert.ordering import RomOrdering


def get_path_extension(path):
    # type: (str) -> str
    """
    Return the text after the last dot in the file name part of ``path``,
    or an empty string if there is none.

    Example::

        >>> get_path_extension("roms/baserom.us.z64")
        'z64'

    """
    name = os.path.basename(path)
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def parse_target_format(text):
    # type: (str) -> RomOrdering
    """
    Parse a target format string such as ``"z64"``, ``"n64"`` or ``"v64"``.

    The string must end in ``64``, so a bare ``file.z`` or ``file.v``
    extension is not taken as a false positive; its first character
    selects the ordering.

    :raises: :py:exc:`~n64romconvert.exceptions.InvalidTargetFormatError`
    """
    if len(text) < 3 or not text.endswith("64"):
        raise InvalidTargetFormatError(
            "supplied target format `{0}`, but it is invalid".format(text)
        )
    ordering = RomOrdering.from_char(text[0])
    if ordering is None:
        raise InvalidTargetFormatError(
            "supplied target format `{0}`, but it is invalid".format(text)
        )
    return ordering


def target_from_path(path):
    # type: (str) -> RomOrdering
    return parse_target_format(get_path_extension(path))
