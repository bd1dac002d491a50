"""
CLI entry point for the gctk command.

Reads a G-code program, runs one operation on it and writes the result:
the extent as JSON, or the transformed program one command per line.
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from gctk import config
from gctk.config import TRACE
from gctk.extent import compute_extent
from gctk.gcode.parser import GcodeParser, format_program
from gctk.transform import MirrorAxis, Point3, mirror, translate
from gctk.utils.errors import GctkError

logger = logging.getLogger("gctk.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gctk", description="G-code Toolkit")
    parser.add_argument("-i", "--input", help="G-code file to read (default: stdin)")
    parser.add_argument("-o", "--output", help="File to write the result to (default: stdout)")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument(
        "--log-level", choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set specific log level",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("get-extent", help="Print the XY extent of all motion as JSON")

    p_translate = subparsers.add_parser("translate", help="Shift all motion by an offset")
    p_translate.add_argument("-x", type=float, default=0.0, help="X offset")
    p_translate.add_argument("-y", type=float, default=0.0, help="Y offset")
    p_translate.add_argument("-z", type=float, default=0.0, help="Z offset")

    p_mirror = subparsers.add_parser("mirror", help="Mirror all motion about one axis line")
    axis_group = p_mirror.add_mutually_exclusive_group(required=True)
    axis_group.add_argument("-x", type=float, help="Mirror about the line X=value")
    axis_group.add_argument("-y", type=float, help="Mirror about the line Y=value")
    axis_group.add_argument("-z", type=float, help="Mirror about the line Z=value")

    return parser


def _resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        if args.log_level == "TRACE":
            config.TRACE_ENABLED = True
            return TRACE
        return getattr(logging, args.log_level)
    if args.verbose >= 3:
        config.TRACE_ENABLED = True
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    if config.TRACE_ENABLED:
        return TRACE
    level = logging.getLevelName(config.LOG_LEVEL_DEFAULT)
    return level if isinstance(level, int) else logging.WARNING


def _mirror_axis(args: argparse.Namespace) -> tuple[MirrorAxis, float]:
    for axis in MirrorAxis:
        value = getattr(args, axis.letter.lower())
        if value is not None:
            return axis, value
    raise ValueError("No mirror axis given")


def run(args: argparse.Namespace, source: str) -> str:
    """
    Run the selected operation on a G-code program

    Args:
        args: Parsed command line
        source: Program text

    Returns:
        Output text, newline terminated
    """
    lines = GcodeParser().parse_program(source)

    if args.command == "get-extent":
        extent = compute_extent(lines)
        logger.info(f"Extent: {extent}")
        return json.dumps(asdict(extent)) + "\n"

    if args.command == "translate":
        offset = Point3(args.x, args.y, args.z)
        logger.info(f"Translating by {offset}")
        translate(lines, offset)
    elif args.command == "mirror":
        axis, value = _mirror_axis(args)
        logger.info(f"Mirroring about {axis.letter}={value}")
        mirror(lines, axis, value)

    return "".join(f"{text}\n" for text in format_program(lines))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the toolkit. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=_resolve_log_level(args),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )

    try:
        if args.input:
            with open(args.input) as f:
                source = f.read()
        else:
            source = sys.stdin.read()
        result = run(args, source)
        if args.output:
            with open(args.output, "w") as f:
                f.write(result)
        else:
            sys.stdout.write(result)
    except GctkError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    return 0


def main_entry():
    """Entry point for the gctk command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
