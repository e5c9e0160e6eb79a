"""Journal package exceptions."""

from __future__ import annotations

from solid_core.primitives.exceptions import SolidError


class JournalError(SolidError):
    """Base class for journal persistence errors."""


class JournalNotFoundError(JournalError):
    """Raised when a saved journal cannot be found."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"No journal found at {location!r}")


class JournalFormatError(JournalError):
    """Raised when a saved journal contains a line that is not ``"<n>: <text>"``."""

    def __init__(self, location: str, line_number: int, line: str) -> None:
        self.location = location
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Malformed journal entry in {location!r} at line {line_number}: {line!r}"
        )


class UnsupportedSchemeError(JournalError):
    """Raised when a journal URI uses a scheme no loader handles."""

    def __init__(self, uri: str, scheme: str) -> None:
        self.uri = uri
        self.scheme = scheme
        super().__init__(f"Cannot load journal from {uri!r}: unsupported scheme {scheme!r}")
