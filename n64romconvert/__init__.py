# ----------------------------------------------------------------------
# Library to detect and convert the byte ordering of N64 ROM images
#
# Supported orderings: big endian (.z64), little endian (.n64)
# and byte-swapped (.v64)
# ----------------------------------------------------------------------

from .constants import VERSION as __version__  # noqa
from .detector import detect, detect_path  # noqa
from .files import create_sink, open_source  # noqa
from .ordering import RomOrdering, ordering_display_char, parse_ordering_code  # noqa
from .swap import convert, convert_file  # noqa
