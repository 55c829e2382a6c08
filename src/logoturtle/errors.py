"""Errors raised while building or running turtle programs."""


class TurtleError(Exception):
    """Base class for all turtle errors."""


class MissingInitialPose(TurtleError):
    def __init__(self):
        super().__init__("Starting pose required")


class InvalidRepeatCount(TurtleError):
    def __init__(self, count):
        self.count = count
        super().__init__(f"Repeat count must be >= 0, got {count!r}")


class InvalidPenSize(TurtleError):
    def __init__(self, size):
        self.size = size
        super().__init__(f"Pen size must be > 0, got {size!r}")


class InvalidPenColor(TurtleError):
    def __init__(self, color):
        self.color = color
        super().__init__(f"Pen color must be a non-empty string, got {color!r}")


class UnknownInstruction(TurtleError):
    def __init__(self, instruction):
        self.instruction = instruction
        super().__init__(f"Unknown instruction: {instruction!r}")


class ProgramFormatError(TurtleError):
    """A JSON program did not match the expected step format."""
