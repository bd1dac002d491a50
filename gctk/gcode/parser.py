"""
G-code Parser for gctk

Tokenizes G-code text into lines of commands, each command holding its
ordered letter/value arguments, and renders commands back to text.
"""

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from gctk.config import NUMBER_FORMAT_DIGITS, TRACE
from gctk.utils.errors import GcodeParseError

logger = logging.getLogger(__name__)


class Mnemonic(Enum):
    """Command class, keyed by the letter that introduces the command."""

    GENERAL = "G"
    MISCELLANEOUS = "M"
    TOOL_CHANGE = "T"
    PROGRAM_NUMBER = "O"


@dataclass
class Argument:
    """A single letter/value word attached to a command"""

    letter: str
    value: float

    def __str__(self):
        return f"{self.letter}{format_number(self.value)}"


@dataclass
class Command:
    """A G, M, T or O code together with its arguments"""

    mnemonic: Mnemonic
    major_number: int
    minor_number: int = 0
    arguments: list[Argument] = field(default_factory=list)

    def value_for(self, letter: str) -> float | None:
        """
        Get the value of the first argument with the given letter

        Args:
            letter: Argument letter, compared case-insensitively

        Returns:
            The argument value, or None when the command has no such argument
        """
        letter = letter.upper()
        for argument in self.arguments:
            if argument.letter.upper() == letter:
                return argument.value
        return None

    def __str__(self):
        result = f"{self.mnemonic.value}{self.major_number}"
        if self.minor_number:
            result += f".{self.minor_number}"
        for argument in self.arguments:
            result += f" {argument}"
        return result


@dataclass
class Line:
    """One source line: its commands plus the optional N number and comment"""

    commands: list[Command] = field(default_factory=list)
    number: int | None = None
    comment: str | None = None

    def general_commands(self) -> Iterator[Command]:
        """Iterate over the G-codes of this line, the only ones the core interprets."""
        return (c for c in self.commands if c.mnemonic is Mnemonic.GENERAL)


def format_number(value: float) -> str:
    """Render a value the short way G-code is usually written (10, -2.5, 0.001)."""
    text = f"{value:.{NUMBER_FORMAT_DIGITS}g}"
    if "e" in text:
        text = f"{value:.{NUMBER_FORMAT_DIGITS}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_program(lines: list[Line]) -> Iterator[str]:
    """
    Render a program back to text, one command per output line

    Args:
        lines: Parsed program

    Yields:
        Rendered commands in program order
    """
    for line in lines:
        for command in line.commands:
            yield str(command)


class GcodeParser:
    """G-code parser that tokenizes lines into commands and arguments"""

    # Regex patterns for parsing
    COMMENT_PATTERN = re.compile(r"\((.*?)\)|;(.*)$")
    LINE_NUMBER_PATTERN = re.compile(r"^\s*N\s*(\d+)", re.IGNORECASE)
    WORD_PATTERN = re.compile(r"\s*([A-Z])\s*([+-]?(?:\d+\.?\d*|\.\d+))", re.IGNORECASE)

    COMMAND_LETTERS = {m.value: m for m in Mnemonic}

    def __init__(self):
        self.line_count = 0

    def parse_line(self, text: str) -> Line:
        """
        Parse a single line of G-code

        Args:
            text: Raw G-code line

        Returns:
            Line holding the commands found, possibly none
        """
        self.line_count += 1
        line = Line()

        stripped = text.strip()
        if not stripped or stripped == "%":
            return line

        # Extract and remove comments
        comments = [(paren or semi).strip() for paren, semi in self.COMMENT_PATTERN.findall(stripped)]
        if comments:
            line.comment = " ".join(c for c in comments if c) or None
            stripped = self.COMMENT_PATTERN.sub(" ", stripped)

        # Extract line number if present
        line_num_match = self.LINE_NUMBER_PATTERN.match(stripped)
        if line_num_match:
            line.number = int(line_num_match.group(1))
            stripped = stripped[line_num_match.end() :]

        pos = 0
        command: Command | None = None
        while pos < len(stripped):
            if stripped[pos:].isspace():
                break
            match = self.WORD_PATTERN.match(stripped, pos)
            if match is None:
                raise GcodeParseError(
                    self.line_count, f"Unexpected text: {stripped[pos:].strip()!r}"
                )
            pos = match.end()
            letter = match.group(1).upper()
            number = match.group(2)

            if letter in self.COMMAND_LETTERS:
                command = self._make_command(letter, number)
                line.commands.append(command)
            elif command is None:
                raise GcodeParseError(
                    self.line_count, f"Argument {letter}{number} without a preceding command"
                )
            else:
                command.arguments.append(Argument(letter, float(number)))

        if logger.isEnabledFor(TRACE):
            logger.log(TRACE, f"Line {self.line_count}: {' '.join(map(str, line.commands))}")
        return line

    def _make_command(self, letter: str, number: str) -> Command:
        if number.startswith(("+", "-")):
            raise GcodeParseError(self.line_count, f"Invalid code number: {letter}{number}")
        major, _, minor = number.partition(".")
        return Command(
            mnemonic=self.COMMAND_LETTERS[letter],
            major_number=int(major or "0"),
            minor_number=int(minor[:1] or "0"),
        )

    def parse_program(self, program: str | list[str]) -> list[Line]:
        """
        Parse a complete G-code program

        Args:
            program: Either a string with newlines or a list of lines

        Returns:
            One Line per source line, so index + 1 is the source line number
        """
        if isinstance(program, str):
            lines = program.splitlines()
        else:
            lines = program

        self.line_count = 0
        parsed = [self.parse_line(line) for line in lines]
        logger.debug(
            f"Parsed {len(parsed)} lines, {sum(len(line.commands) for line in parsed)} commands"
        )
        return parsed
