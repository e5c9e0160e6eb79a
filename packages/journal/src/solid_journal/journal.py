"""Journal — keeps numbered entries and nothing else.

Saving and loading live in :mod:`solid_journal.persistence`.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from solid_core.primitives.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Journal:
    """Ordered journal entries, each prefixed with a running number.

    Numbers start at 1 and keep increasing after removals. Not safe for
    concurrent ``add_entry``/``remove`` on the same instance.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._count = 0

    @classmethod
    def restore(cls, numbered: Iterable[tuple[int, str]]) -> Journal:
        """Rebuild a journal from ``(number, text)`` pairs, as persisted."""
        journal = cls()
        for number, text in numbered:
            journal._entries.append(f"{number}: {text}")
            journal._count = max(journal._count, number)
        return journal

    def add_entry(self, text: str) -> str:
        """Append *text* as the next numbered entry and return the entry."""
        # any str.splitlines() boundary, not just \n and \r
        if "".join(text.splitlines()) != text:
            raise InvalidArgumentError(
                "Journal entries must be a single line", argument="text"
            )
        self._count += 1
        entry = f"{self._count}: {text}"
        self._entries.append(entry)
        return entry

    def remove(self, index: int) -> None:
        """Delete the entry at zero-based *index*."""
        if not 0 <= index < len(self._entries):
            raise InvalidArgumentError(
                f"Entry index {index} out of range (0..{len(self._entries) - 1})",
                argument="index",
            )
        del self._entries[index]

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def count(self) -> int:
        """Number given to the most recent entry."""
        return self._count

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __str__(self) -> str:
        return os.linesep.join(self._entries)
