"""
G-code command tables for gctk operations

Each operation declares the G major numbers it accepts and what it does
with them. A G-code missing from an operation's table is rejected rather
than skipped, since ignoring an unknown motion code could silently
produce a wrong extent or toolpath.
"""

from enum import Enum

from gctk.utils.errors import UnsupportedCommand

from .parser import Command


class Behavior(Enum):
    LINEAR = "linear"  # G0 rapid, G1 feed
    ARC = "arc"  # G2, carries I/J/K center offsets
    ABSOLUTE_MODE = "absolute_mode"  # G90
    RELATIVE_MODE = "relative_mode"  # G91
    NO_OP = "no_op"


# G-codes that never change geometry
_PASSTHROUGH = {
    4: Behavior.NO_OP,  # Dwell
    21: Behavior.NO_OP,  # Millimeter units
    64: Behavior.NO_OP,  # Path blending
    94: Behavior.NO_OP,  # Units per minute feed
}

EXTENT_TABLE: dict[int, Behavior] = {
    0: Behavior.LINEAR,
    1: Behavior.LINEAR,
    90: Behavior.ABSOLUTE_MODE,
    91: Behavior.RELATIVE_MODE,
    **_PASSTHROUGH,
}

TRANSLATE_TABLE: dict[int, Behavior] = {
    0: Behavior.LINEAR,
    1: Behavior.LINEAR,
    2: Behavior.ARC,
    90: Behavior.NO_OP,
    91: Behavior.NO_OP,
    **_PASSTHROUGH,
}

MIRROR_TABLE: dict[int, Behavior] = {
    0: Behavior.LINEAR,
    1: Behavior.LINEAR,
    2: Behavior.ARC,
    90: Behavior.NO_OP,
    91: Behavior.RELATIVE_MODE,
    **_PASSTHROUGH,
}


def behavior_for(table: dict[int, Behavior], command: Command) -> Behavior:
    """
    Look up what an operation does with a G-code

    Args:
        table: The operation's command table
        command: A command of the GENERAL class

    Returns:
        The behavior tag for the command's major number

    Raises:
        UnsupportedCommand: the major number is not in the table
    """
    try:
        return table[command.major_number]
    except KeyError:
        raise UnsupportedCommand(command) from None
