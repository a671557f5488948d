"""
Error types raised by the twenty questions engine.
"""


class GameError(Exception):
    """Base class for all engine errors."""


class RecordParseError(GameError, ValueError):
    """A question or character record could not be parsed."""

    def __init__(self, message: str, line: int = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class NotFoundError(GameError, LookupError):
    """No character record exists for the requested ID."""

    def __init__(self, character_id: int):
        self.character_id = character_id
        super().__init__(f"Character with ID {character_id} not found")


class PreconditionViolation(GameError, RuntimeError):
    """The engine was called in a state where the operation is undefined."""
