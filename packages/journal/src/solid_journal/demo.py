#!/usr/bin/env python
"""Demo: a journal that only keeps entries, saved by a separate class (Single Responsibility)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import JournalDemoConfig
from .journal import Journal
from .persistence import JournalPersistence

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger("solid.journal.demo")


def run(config: JournalDemoConfig) -> tuple[Journal, Path]:
    journal = Journal()
    journal.add_entry("I ate a bug today")
    journal.add_entry("I feel sad")

    print("Journal =========")
    print(journal)

    config.output_dir.mkdir(parents=True, exist_ok=True)
    persistence = JournalPersistence(encoding=config.encoding)
    path = persistence.save_journal(config.output_path, journal)
    return journal, path


def main() -> int:
    config = JournalDemoConfig.from_env()
    logging.basicConfig(level=config.log_level)
    _, path = run(config)
    logger.info("Journal written to %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
