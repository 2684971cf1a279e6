class N64RomException(Exception):
    """Base for all the n64romconvert exceptions"""

    pass


class N64RomWarning(Warning):
    """Base for all the n64romconvert warnings"""

    pass


class InvalidFormatError(N64RomException):
    """
    Exception used to indicate that the magic number at the start
    of a stream does not match any known ROM ordering.
    """

    pass


class TruncatedRomError(InvalidFormatError):
    """
    Exception indicating that fewer bytes than the magic number
    size could be read from the start of the stream.
    """

    pass


class InvalidTargetFormatError(N64RomException, ValueError):
    """Indicate a target format string that names no ROM ordering"""

    pass


class SameOrderingError(N64RomException, ValueError):
    """Indicate a request to convert a ROM into the ordering it already has"""

    pass


class RomTruncationError(N64RomException):
    """
    Raised when trailing data shorter than one chunk was dropped
    during a conversion, and the strictness level forbids it.
    """


class RomTruncationWarning(N64RomWarning):
    """Trailing data shorter than one chunk was dropped during a conversion"""


class RomIOError(N64RomException, OSError):
    """
    Indicate an error while opening or creating a ROM file.

    Built like :py:exc:`OSError`, from ``(errno, strerror, filename)``.
    """

    action = "access ROM at"

    def __str__(self):
        return "could not {0} `{1}`: {2}".format(
            self.action, self.filename, self.strerror
        )


class RomOpenError(RomIOError):
    """The source ROM could not be opened for reading"""

    action = "open ROM at"


class RomCreateError(RomIOError):
    """The destination ROM could not be created"""

    action = "create new ROM at"


class SameFileError(N64RomException, ValueError):
    """Indicate a request to convert a ROM file onto itself"""

    pass
