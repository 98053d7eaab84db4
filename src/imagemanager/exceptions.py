"""Custom exceptions related to image manager functionality."""

from __future__ import annotations


class ImageManagerError(Exception):
    """Base exceptions class."""


class EmptyInputError(ImageManagerError, ValueError):
    """Raised when a serialized stream is empty or missing."""


class ParseError(ImageManagerError, ValueError):
    """Raised when a serialized stream can't be turned into an entity.

    Args:
        message: Message to show with the exception.
        details: Individual problems found while parsing, for the `message`.
    """

    def __init__(self, message: str, details: list[str] | None = None):
        self.details = details or []
        if self.details:
            extras = "; ".join(self.details)
            message = f"{message} - {extras}"

        super().__init__(message)


class DivisionError(ImageManagerError, ZeroDivisionError):
    """Raised when a ratio is requested with a zero or missing divisor."""
