"""Command-line build adapter.

Runs a conversion the way a build step invokes it: resource files as
positional arguments (or ``@listfile``), project and output paths as
options, progress reported through logging.

Usage:
    resx2json -o wwwroot/i18n Resources.Strings.resx Resources.Strings.de-DE.resx
    resx2json -p /src/app -o bin/i18n @obj/resources.txt

Exit Codes:
    0   All files converted, or no resource files given
    1   Conversion failed (unreadable resource, I/O error)
    2   Invalid arguments

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from resx2json import __version__
from resx2json.config import ConverterConfig
from resx2json.conversion import BuildStamp, ResourceConverter
from resx2json.errors import ResxToJsonError

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["build_parser", "main"]

logger = logging.getLogger("resx2json")

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the resx2json command."""
    parser = argparse.ArgumentParser(
        prog="resx2json",
        description="Convert ResX resource files into JSON documents for client-side code.",
        fromfile_prefix_chars="@",
    )
    parser.add_argument(
        "resource_files",
        nargs="*",
        type=Path,
        help="ResX files to convert, in order (use @FILE to read a list)",
    )
    parser.add_argument(
        "-p",
        "--project-path",
        type=Path,
        default=Path.cwd(),
        help="project root; generated files are copied here (default: current directory)",
    )
    parser.add_argument(
        "-o",
        "--output-path",
        type=Path,
        required=True,
        help="output directory, relative to the project root or absolute; must exist",
    )
    parser.add_argument(
        "-a",
        "--assembly-name",
        default="",
        help="assembly being built (accepted for build integration, not used in file names)",
    )
    parser.add_argument(
        "--ensure-ascii",
        action="store_true",
        help="escape non-ASCII characters in the JSON output",
    )
    parser.add_argument(
        "--build-stamp",
        type=int,
        metavar="FILETIME",
        help="fixed build stamp in FILETIME ticks (default: current UTC time)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="log debug details")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="log warnings and errors only")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return logging.INFO


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=_log_level(args), format=_LOG_FORMAT)

    try:
        if args.build_stamp is None:
            stamp = BuildStamp.now()
        else:
            stamp = BuildStamp.from_filetime(args.build_stamp)
        config = ConverterConfig(
            args.project_path,
            args.output_path,
            assembly_name=args.assembly_name,
            ensure_ascii=args.ensure_ascii,
        )
    except (ValueError, OverflowError) as e:
        parser.error(str(e))

    try:
        result = ResourceConverter(config).run(args.resource_files, stamp)
    except (ResxToJsonError, OSError) as e:
        logger.error("Conversion failed: %s", e)
        return 1

    # An empty resource list is not a build failure.
    if result.success:
        logger.debug("Wrote %d files", len(result.files))
    return 0


if __name__ == "__main__":
    sys.exit(main())
