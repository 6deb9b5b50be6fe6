"""Errors raised by AdventureStore operations.

All of them are recoverable: the store leaves the published snapshot
untouched and the caller decides whether to re-prompt.
"""


class AdventureError(ValueError):
    """Base class for rejected state transitions."""


class InvalidTimeValue(AdventureError):
    """Hour or minute outside the 24-hour clock range."""


class InvalidMission(AdventureError):
    """Empty mission name or a duration that is not a non-negative integer."""


class IndexOutOfRange(AdventureError, IndexError):
    """Reorder index outside the current mission list."""


class MissionNotFound(AdventureError, KeyError):
    """No mission with the requested id."""

    def __str__(self) -> str:
        # KeyError.__str__ repr()s the message; keep it readable for HTTP errors
        return str(self.args[0]) if self.args else ""
