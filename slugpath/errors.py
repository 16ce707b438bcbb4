"""Exceptions shared across the helpers."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a required argument is blank or malformed."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument
