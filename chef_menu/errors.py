"""Errors raised by the menu model, codec and screen bridge."""

from __future__ import annotations

REQUIRED_MESSAGE = "is required"


class MenuError(Exception):
    """Base class for chef menu errors."""


class ValidationError(MenuError):
    """User input for a new dish is missing or malformed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class MalformedStateError(MenuError):
    """A transport string could not be decoded into a menu."""


class VisitClosedError(MenuError):
    """A screen visit was used after its outbound message was produced."""
