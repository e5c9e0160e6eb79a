"""Root exceptions shared by every solid-* package."""

from __future__ import annotations


class SolidError(Exception):
    """Root exception for the entire toolkit."""


class InvalidArgumentError(SolidError, ValueError):
    """Raised when a caller passes an argument the operation cannot accept.

    These are programmer errors: they are reported immediately and are
    never retried.
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        self.message = message
        self.argument = argument
        super().__init__(message)
