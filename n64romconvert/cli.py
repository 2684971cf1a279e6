"""
Command line entry points: ``n64romconvert`` and ``n64romtype``.
"""

import argparse
import logging
import os
import sys

from n64romconvert.constants import VERSION
from n64romconvert.detector import detect_path
from n64romconvert.exceptions import N64RomException
from n64romconvert.swap import convert_file
from n64romconvert.utils import parse_target_format

logger = logging.getLogger(__name__)


def bold(text):
    return "\x1b[1m{0}\x1b[0m".format(text)


def label(text, color):
    return "\x1b[{0};1m{1}\x1b[0m".format(color, text)


def setup_logging(quiet=False):
    package_logger = logging.getLogger("n64romconvert")
    package_logger.setLevel(logging.WARNING if quiet else logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("\x1b[31;1m%(levelname)s:\x1b[0m %(message)s")
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)
    return handler


def describe(ordering):
    return "{0} ({1})".format(ordering.name, bold(ordering.char + "64"))


def build_convert_parser():
    parser = argparse.ArgumentParser(
        prog="n64romconvert", description="convert between N64 ROM formats"
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version="%(prog)s version {0}".format(VERSION),
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress output messages"
    )
    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument(
        "-f", "--format", metavar="FMT", help="Specify explicit target ROM format"
    )
    fmt.add_argument(
        "-t",
        "--type",
        metavar="FMT",
        dest="format",
        help="Specify explicit target ROM format (same as --format)",
    )
    parser.add_argument("src", help="Path to source ROM")
    parser.add_argument(
        "dest", help="Destination ROM (file type can be automatically detected)"
    )
    return parser


def build_type_parser():
    parser = argparse.ArgumentParser(
        prog="n64romtype", description="check the type of an N64 ROM"
    )
    parser.add_argument("romfile", help="Path to the ROM to inspect")
    return parser


def main_convert(argv=None):
    args = build_convert_parser().parse_args(argv)
    handler = setup_logging(quiet=args.quiet)

    try:
        target = None
        if args.format is not None:
            target = parse_target_format(args.format)
        source, target = convert_file(args.src, args.dest, target=target)
    except (N64RomException, OSError) as e:
        logger.error("%s", e)
        return 1
    finally:
        logging.getLogger("n64romconvert").removeHandler(handler)

    if not args.quiet:
        print("{0}\t{1}".format(label("rom type:", 36), describe(source)))
        print("{0}\t{1}".format(label("out type:", 36), describe(target)))
        print(
            "{0}\t{1}".format(
                label("new file name:", 32), os.path.basename(args.dest)
            )
        )
    return 0


def main_type(argv=None):
    args = build_type_parser().parse_args(argv)
    handler = setup_logging()

    try:
        ordering = detect_path(args.romfile)
    except (N64RomException, OSError) as e:
        logger.error("%s", e)
        return 1
    finally:
        logging.getLogger("n64romconvert").removeHandler(handler)

    print("{0} {1}".format(label("type:", 36), describe(ordering)))
    return 0


def run_convert():
    sys.exit(main_convert())


def run_type():
    sys.exit(main_type())
