"""
XY extent of the toolpath described by a G-code program.
"""

from dataclasses import dataclass

from gctk.gcode.commands import EXTENT_TABLE, Behavior, behavior_for
from gctk.gcode.parser import Line
from gctk.gcode.state import PositioningMode, PositioningState
from gctk.utils.errors import EmptyExtent


@dataclass
class Extent:
    """Axis-aligned bounding rectangle of traversed X/Y positions"""

    min_x: float
    min_y: float
    max_x: float
    max_y: float


class _Bounds:
    """Running min/max for one axis; the first value seeds both."""

    def __init__(self):
        self.low: float | None = None
        self.high: float | None = None

    def observe(self, value: float) -> None:
        if self.low is None or value < self.low:
            self.low = value
        if self.high is None or value > self.high:
            self.high = value


def compute_extent(lines: list[Line]) -> Extent:
    """
    Compute the XY bounding box of all G0/G1 motion

    Args:
        lines: Parsed program, read but never modified

    Returns:
        Extent of all X and Y coordinates reached

    Raises:
        UnsupportedCommand: a G-code the analyzer does not understand
        UnknownPosition: relative move before any absolute position on its axis
        EmptyExtent: no X or no Y motion anywhere in the program
    """
    state = PositioningState()
    bounds = {"X": _Bounds(), "Y": _Bounds()}

    for line_idx, line in enumerate(lines):
        for command in line.general_commands():
            behavior = behavior_for(EXTENT_TABLE, command)
            if behavior is Behavior.LINEAR:
                for axis, axis_bounds in bounds.items():
                    value = command.value_for(axis)
                    if value is not None:
                        axis_bounds.observe(state.resolve(axis, value, line_idx))
            elif behavior is Behavior.ABSOLUTE_MODE:
                state.set_mode(PositioningMode.ABSOLUTE)
            elif behavior is Behavior.RELATIVE_MODE:
                state.set_mode(PositioningMode.RELATIVE)

    x, y = bounds["X"], bounds["Y"]
    if x.low is None or x.high is None or y.low is None or y.high is None:
        raise EmptyExtent()
    return Extent(min_x=x.low, min_y=y.low, max_x=x.high, max_y=y.high)
