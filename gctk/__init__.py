"""
gctk - G-code Toolkit

Analyzes and transforms G-code motion programs.

Key components:
- GcodeParser: tokenizes G-code text into lines, commands and arguments
- compute_extent: XY bounding box of toolpath travel
- translate: additive offset on X/Y/Z motion arguments
- mirror: reflection of motion arguments about an axis line
"""

from ._version import __version__
from .extent import Extent, compute_extent
from .gcode.parser import Argument, Command, GcodeParser, Line, Mnemonic, format_program
from .transform import MirrorAxis, Point3, mirror, translate
from .utils.errors import (
    EmptyExtent,
    GcodeParseError,
    GctkError,
    UnknownPosition,
    UnsupportedCommand,
)

__all__ = [
    "__version__",
    "Argument",
    "Command",
    "GcodeParser",
    "Line",
    "Mnemonic",
    "format_program",
    "Extent",
    "compute_extent",
    "MirrorAxis",
    "Point3",
    "mirror",
    "translate",
    "GctkError",
    "UnsupportedCommand",
    "EmptyExtent",
    "UnknownPosition",
    "GcodeParseError",
]
