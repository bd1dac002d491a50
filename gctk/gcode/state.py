"""
Positioning State for gctk

Tracks the positioning mode (G90/G91) and the accumulated absolute
position during one traversal of a program. A fresh state is created for
every operation and discarded when it ends.
"""

from enum import Enum

import numpy as np

from gctk.config import AXES
from gctk.utils.errors import UnknownPosition


class PositioningMode(Enum):
    ABSOLUTE = "G90"
    RELATIVE = "G91"


class PositioningState:
    """Position accumulator plus positioning mode"""

    def __init__(self):
        self.mode = PositioningMode.ABSOLUTE
        self.position = np.zeros(len(AXES))
        # An axis is known once an absolute coordinate was seen on it
        self.known = np.zeros(len(AXES), dtype=bool)

    def set_mode(self, mode: PositioningMode) -> None:
        self.mode = mode

    def resolve(self, axis: str, value: float, line_idx: int) -> float:
        """
        Resolve an axis argument to an absolute coordinate

        In absolute mode the value is the coordinate and becomes the axis
        reference. In relative mode the value is added to the running
        position, which is updated so later relative moves accumulate.

        Args:
            axis: Axis letter (X, Y or Z), case-insensitive
            value: Argument value from the motion command
            line_idx: 0-based index of the line holding the command

        Returns:
            The absolute coordinate on that axis

        Raises:
            UnknownPosition: relative move on an axis with no absolute reference
        """
        i = AXES.index(axis.upper())
        if self.mode is PositioningMode.ABSOLUTE:
            self.position[i] = value
            self.known[i] = True
        elif not self.known[i]:
            raise UnknownPosition(line_idx + 1)
        else:
            self.position[i] += value
        return float(self.position[i])
