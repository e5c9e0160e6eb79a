"""Tests for JournalPersistence."""

from __future__ import annotations

import logging

import pytest

from solid_core import InvalidArgumentError
from solid_journal import (
    Journal,
    JournalFormatError,
    JournalNotFoundError,
    JournalPersistence,
    UnsupportedSchemeError,
)


@pytest.fixture
def journal() -> Journal:
    j = Journal()
    j.add_entry("I ate a bug today")
    j.add_entry("I feel sad")
    return j


@pytest.fixture
def persistence() -> JournalPersistence:
    return JournalPersistence()


def test_save_writes_journal_text(persistence, journal, tmp_path):
    target = tmp_path / "journal.txt"
    path = persistence.save_journal(target, journal)

    assert path == target
    assert target.read_bytes() == str(journal).encode("utf-8")


def test_save_overwrites(persistence, journal, tmp_path):
    target = tmp_path / "journal.txt"
    target.write_text("old content", encoding="utf-8")
    persistence.save_journal(str(target), journal)
    assert "old content" not in target.read_text(encoding="utf-8")


def test_save_keeps_unicode(persistence, tmp_path):
    j = Journal()
    j.add_entry("café ☕")
    target = persistence.save_journal(tmp_path / "u.txt", j)
    assert target.read_text(encoding="utf-8") == "1: café ☕"


def test_load_from_disk_restores_entries_and_counter(persistence, journal, tmp_path):
    journal.remove(0)
    target = persistence.save_journal(tmp_path / "journal.txt", journal)

    loaded = persistence.load_from_disk(target)
    assert loaded.entries == ("2: I feel sad",)
    assert loaded.add_entry("next") == "3: next"


def test_load_empty_journal(persistence, tmp_path):
    target = persistence.save_journal(tmp_path / "empty.txt", Journal())
    assert len(persistence.load_from_disk(target)) == 0


def test_load_missing_file(persistence, tmp_path):
    with pytest.raises(JournalNotFoundError) as exc_info:
        persistence.load_from_disk(tmp_path / "missing.txt")
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_load_malformed_line(persistence, tmp_path):
    target = tmp_path / "bad.txt"
    target.write_text("1: fine\nnot an entry\n", encoding="utf-8")
    with pytest.raises(JournalFormatError) as exc_info:
        persistence.load_from_disk(target)
    assert exc_info.value.line_number == 2
    assert exc_info.value.line == "not an entry"


def test_load_from_file_uri(persistence, journal, tmp_path):
    target = persistence.save_journal(tmp_path / "journal.txt", journal)
    loaded = persistence.load_from_uri(target.as_uri())
    assert loaded.entries == journal.entries


def test_load_from_unsupported_uri(persistence):
    with pytest.raises(UnsupportedSchemeError) as exc_info:
        persistence.load_from_uri("https://example.com/journal.txt")
    assert exc_info.value.scheme == "https"


def test_save_logs(persistence, journal, tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="solid.journal.persistence"):
        persistence.save_journal(tmp_path / "journal.txt", journal)
    assert "Saved 2 journal entries" in caplog.text


def test_save_failure_is_logged_and_raised(persistence, journal, tmp_path, caplog):
    missing_dir = tmp_path / "nope" / "journal.txt"
    with pytest.raises(OSError), caplog.at_level(logging.ERROR):
        persistence.save_journal(missing_dir, journal)
    assert "Failed to save journal" in caplog.text


LINE_BOUNDARIES = [
    "\n",
    "\r",
    "\r\n",
    "\x0b",
    "\x0c",
    "\x1c",
    "\x1d",
    "\x1e",
    "\x85",
    "\u2028",
    "\u2029",
]


@pytest.mark.parametrize("separator", LINE_BOUNDARIES)
def test_entries_that_would_split_on_load_are_rejected(separator):
    with pytest.raises(InvalidArgumentError) as exc_info:
        Journal().add_entry(f"a{separator}b")
    assert exc_info.value.argument == "text"


@pytest.mark.parametrize("text", ["tab\tseparated", "café ☕", "", "trailing "])
def test_saved_journal_loads_back(persistence, tmp_path, text):
    journal = Journal()
    journal.add_entry(text)
    journal.add_entry("second")

    loaded = persistence.load_from_disk(
        persistence.save_journal(tmp_path / "journal.txt", journal)
    )
    assert loaded.entries == journal.entries
