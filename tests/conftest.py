"""
Pytest configuration and shared fixtures for gctk tests.
"""

import pytest

from gctk.gcode.parser import GcodeParser, Line, format_program


@pytest.fixture
def parse():
    """Parse G-code text (or a list of lines) into a program."""

    def _parse(program: str | list[str]) -> list[Line]:
        return GcodeParser().parse_program(program)

    return _parse


@pytest.fixture
def render():
    """Render a program back to a list of command strings."""

    def _render(lines: list[Line]) -> list[str]:
        return list(format_program(lines))

    return _render


@pytest.fixture
def square_program() -> str:
    return "\n".join(["G90", "G1 X0 Y0", "G1 X10 Y0", "G1 X10 Y5", "G1 X0 Y5"])
