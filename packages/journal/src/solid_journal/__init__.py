"""solid-journal — journal entries and their persistence, kept apart."""

from __future__ import annotations

from .config import JournalDemoConfig
from .exceptions import (
    JournalError,
    JournalFormatError,
    JournalNotFoundError,
    UnsupportedSchemeError,
)
from .journal import Journal
from .persistence import JournalPersistence

__all__ = [
    "Journal",
    "JournalDemoConfig",
    "JournalError",
    "JournalFormatError",
    "JournalNotFoundError",
    "JournalPersistence",
    "UnsupportedSchemeError",
]
