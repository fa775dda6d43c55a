"""Exception hierarchy for DocAdventure."""

from typing import Any, Optional


class DocAdventureError(Exception):
    """Base exception for all DocAdventure errors."""


class GenerationFailure(DocAdventureError):
    """The content generator is unreachable or errored out (network, timeout, quota)."""


class SchemaError(DocAdventureError):
    """A generator payload failed validation against the expected shape."""

    def __init__(self, message: str, raw_output: Optional[Any] = None, errors: Optional[list[Any]] = None) -> None:
        self.raw_output = raw_output
        self.errors = errors or []
        super().__init__(message)


class InvariantViolation(AssertionError):
    """A stat escaped its legal range after clamping. This is a programming defect."""

    def __init__(self, stat_name: str, value: int, low: int, high: int) -> None:
        self.stat_name = stat_name
        self.value = value
        super().__init__(f"Stat '{stat_name}' is {value}, outside [{low}, {high}]")


class SessionClosed(DocAdventureError):
    """The presentation adapter was closed while the game loop waited for input."""
