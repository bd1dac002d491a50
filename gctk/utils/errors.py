"""
Exception types for the gctk interpretation and transform pipeline.
Every error here is fatal to the operation that raised it.
"""


class GctkError(RuntimeError):
    """Base class for all toolkit failures."""

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(message)

    def __str__(self):
        return self.original_message


class UnsupportedCommand(GctkError):
    """A G-code whose major number the active operation does not handle."""

    def __init__(self, command):
        self.command = command
        super().__init__(f"Found unsupported command {command}")


class EmptyExtent(GctkError):
    """Extent traversal finished without seeing motion on X or on Y."""

    def __init__(self):
        super().__init__(
            "Found empty extent (maybe input contains no movement commands on some axis?)"
        )


class UnknownPosition(GctkError):
    """Relative move on an axis that never had an absolute position."""

    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(
            "Found relative motion command with unknown absolute position "
            f"on line number {line_number}"
        )


class GcodeParseError(GctkError):
    """Malformed G-code text."""

    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        super().__init__(f"Parse error on line {line_number}: {message}")
