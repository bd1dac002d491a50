"""
Coordinate transforms for G-code programs

Both transforms rewrite argument values of motion commands in place and
leave every other command untouched. A G-code outside the transform's
table aborts the whole operation with UnsupportedCommand.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from gctk.config import AXES
from gctk.gcode.commands import MIRROR_TABLE, TRANSLATE_TABLE, Behavior, behavior_for
from gctk.gcode.parser import Line


@dataclass(frozen=True)
class Point3:
    """Offset along X, Y and Z"""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


class MirrorAxis(Enum):
    X = "X"
    Y = "Y"
    Z = "Z"

    @property
    def letter(self) -> str:
        """Argument letter reflected by this axis"""
        return self.value

    @property
    def arc_offset_letter(self) -> str | None:
        """Arc center offset negated on G2 when mirroring about this axis"""
        return _ARC_OFFSET_LETTERS[self]


_ARC_OFFSET_LETTERS: dict[MirrorAxis, str | None] = {
    MirrorAxis.X: "J",
    MirrorAxis.Y: "I",
    MirrorAxis.Z: None,
}


def translate(lines: list[Line], offset: Point3) -> None:
    """
    Shift every X/Y/Z argument of G0, G1 and G2 by an offset

    Arc center offsets (I/J/K) are relative to the arc start and stay as
    they are. The positioning mode is not consulted, so in G91 sections
    the offset is added to deltas as well.

    Args:
        lines: Program to modify in place
        offset: Amount added per axis

    Raises:
        UnsupportedCommand: a G-code outside the translate table
    """
    delta = offset.as_array()
    for line in lines:
        for command in line.general_commands():
            behavior = behavior_for(TRANSLATE_TABLE, command)
            if behavior not in (Behavior.LINEAR, Behavior.ARC):
                continue
            for argument in command.arguments:
                letter = argument.letter.upper()
                if letter in AXES:
                    argument.value += float(delta[AXES.index(letter)])


def mirror(lines: list[Line], axis: MirrorAxis, value: float) -> None:
    """
    Reflect a program about the line ``axis = value``

    - G0/G1: the axis argument v becomes 2 * value - v
    - G2: same reflection; about X the J offset is negated, about Y the
      I offset is negated
    - G91: the axis argument is negated, a delta has no position to
      reflect about

    Args:
        lines: Program to modify in place
        axis: Axis whose arguments are reflected
        value: Coordinate of the mirror line on that axis

    Raises:
        UnsupportedCommand: a G-code outside the mirror table
    """
    arc_letter = axis.arc_offset_letter
    for line in lines:
        for command in line.general_commands():
            behavior = behavior_for(MIRROR_TABLE, command)
            for argument in command.arguments:
                letter = argument.letter.upper()
                if behavior in (Behavior.LINEAR, Behavior.ARC) and letter == axis.letter:
                    argument.value = 2.0 * value - argument.value
                elif behavior is Behavior.ARC and letter == arc_letter:
                    argument.value = -argument.value
                elif behavior is Behavior.RELATIVE_MODE and letter == axis.letter:
                    argument.value = -argument.value
