"""
Statement errors.

Every failure aborts statement generation; no partial statement is returned.
"""


class StatementError(Exception):
    """Base class for errors raised while building a statement."""


class UnknownPlayType(StatementError):
    """Raised when a play's genre has no pricing strategy."""

    def __init__(self, play_type: str):
        super().__init__(f"unknown type: {play_type}")
        self.play_type = play_type


class PlayNotFound(StatementError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str):
        super().__init__(f"play not found: {play_id}")
        self.play_id = play_id


class InvalidAudience(StatementError, ValueError):
    """Raised when a performance or pricing call has a negative audience."""

    def __init__(self, audience: int):
        super().__init__(f"audience must be >= 0, got {audience}")
        self.audience = audience
