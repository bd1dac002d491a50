"""
G-code program model and interpretation helpers for gctk

Main components:
- parser.py: G-code tokenization, program model and rendering
- state.py: Positioning mode and position tracking (G90/G91)
- commands.py: Per-operation tables of accepted G-codes
"""

from .commands import Behavior, behavior_for
from .parser import Argument, Command, GcodeParser, Line, Mnemonic, format_program
from .state import PositioningMode, PositioningState

__all__ = [
    "Argument",
    "Command",
    "GcodeParser",
    "Line",
    "Mnemonic",
    "format_program",
    "Behavior",
    "behavior_for",
    "PositioningMode",
    "PositioningState",
]
