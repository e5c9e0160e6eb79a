"""JournalPersistence — saves and loads journals; the journal itself never touches I/O."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from .exceptions import JournalFormatError, JournalNotFoundError, UnsupportedSchemeError
from .journal import Journal

logger = logging.getLogger("solid.journal.persistence")

_ENTRY_RE = re.compile(r"^(\d+): (.*)$")


class JournalPersistence:
    """Whole-file text persistence for :class:`Journal`."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def save_journal(self, file_name: str | Path, journal: Journal) -> Path:
        """Write *journal* to *file_name*, replacing any existing content."""
        path = Path(file_name)
        try:
            with path.open("w", encoding=self.encoding, newline="") as fh:
                fh.write(str(journal))
        except OSError:
            logger.exception("Failed to save journal to %s", path)
            raise
        logger.info("Saved %d journal entries to %s", len(journal), path)
        return path

    def load_from_disk(self, file_name: str | Path) -> Journal:
        """Read a journal written by :meth:`save_journal`."""
        path = Path(file_name)
        try:
            text = path.read_text(encoding=self.encoding)
        except FileNotFoundError as exc:
            raise JournalNotFoundError(str(path)) from exc
        except OSError:
            logger.exception("Failed to load journal from %s", path)
            raise

        numbered: list[tuple[int, str]] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            match = _ENTRY_RE.match(line)
            if match is None:
                raise JournalFormatError(str(path), line_number, line)
            numbered.append((int(match.group(1)), match.group(2)))

        logger.info("Loaded %d journal entries from %s", len(numbered), path)
        return Journal.restore(numbered)

    def load_from_uri(self, uri: str) -> Journal:
        """Load a journal from a URI. Only ``file://`` is supported."""
        parsed = urlparse(uri)
        if parsed.scheme != "file":
            raise UnsupportedSchemeError(uri, parsed.scheme)
        return self.load_from_disk(url2pathname(parsed.path))
