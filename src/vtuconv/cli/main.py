"""Main CLI entry point for vtuconv."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .. import __version__
from ..exceptions import VtuconvError
from ..vtk import Settings, convert, export, load

logger = logging.getLogger("vtuconv")

PROG = "vtuconv"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the vtuconv command."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="vtuconv: VTK Unstructured Grid Converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vtuconv in.vtu out.vtu                 Re-export with the input's settings
  vtuconv in.vtu out.vtu --be            Convert to big endian
  vtuconv in.vtu out.vtu --ascii         Write ASCII DataArrays
  vtuconv --version                      Show version
        """,
    )

    parser.add_argument("input", metavar="INPUT", help="Sets the input VTK file to load")
    parser.add_argument("output", metavar="OUTPUT", help="Sets the output VTK file to export")

    endian = parser.add_mutually_exclusive_group()
    endian.add_argument("--le", action="store_true", help="Sets little endian output format")
    endian.add_argument("--be", action="store_true", help="Sets big endian output format")

    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument("-a", "--ascii", action="store_true", help="Sets ASCII output format")
    fmt.add_argument(
        "-b",
        "--binary",
        action="store_true",
        help="Sets binary (base64 encoded) output format",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log per-array codec details"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"{PROG} {__version__}",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the vtuconv CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    # Leave room for settings from other sources later
    settings = Settings(
        input=args.input,
        output=args.output,
        le=args.le,
        be=args.be,
        ascii=args.ascii,
        binary=args.binary,
    )

    logger.info("%s: starting", PROG)

    try:
        vtk_file = load(settings.input)
        vtk_file = convert(vtk_file, settings)
        export(vtk_file, settings.output)
    except VtuconvError as e:
        logger.error("%s", e)
        return 1

    logger.info("%s: done", PROG)
    return 0


if __name__ == "__main__":
    sys.exit(main())
