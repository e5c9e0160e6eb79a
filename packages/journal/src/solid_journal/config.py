"""Configuration for the journal demo."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

OUTPUT_DIR_ENV = "SOLID_DEMO_OUTPUT_DIR"
LOG_LEVEL_ENV = "SOLID_LOG_LEVEL"


@dataclass(frozen=True)
class JournalDemoConfig:
    """Where and how the journal demo writes its output.

    Attributes:
        output_dir: Directory that receives the saved journal.
        file_name: Name of the journal file inside ``output_dir``.
        encoding: Text encoding of the saved file.
        log_level: Root logging level used by the demo.
    """

    output_dir: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))
    file_name: str = "journal.txt"
    encoding: str = "utf-8"
    log_level: str = "INFO"

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.file_name

    @classmethod
    def from_env(cls) -> JournalDemoConfig:
        """Build a config from ``SOLID_DEMO_OUTPUT_DIR`` and ``SOLID_LOG_LEVEL``."""
        output_dir = os.environ.get(OUTPUT_DIR_ENV)
        return cls(
            output_dir=Path(output_dir) if output_dir else Path(tempfile.gettempdir()),
            log_level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
        )
