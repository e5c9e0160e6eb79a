import os

import pytest

from solid_core import InvalidArgumentError
from solid_journal import Journal


@pytest.fixture
def journal() -> Journal:
    j = Journal()
    j.add_entry("I ate a bug today")
    j.add_entry("I feel sad")
    return j


def test_add_entry_numbers_from_one(journal: Journal) -> None:
    assert journal.entries == ("1: I ate a bug today", "2: I feel sad")
    assert journal.count == 2
    assert len(journal) == 2


def test_add_entry_returns_entry() -> None:
    assert Journal().add_entry("hello") == "1: hello"


def test_counter_keeps_increasing_after_remove(journal: Journal) -> None:
    journal.remove(0)
    assert journal.add_entry("better now") == "3: better now"
    assert journal.entries == ("2: I feel sad", "3: better now")


def test_remove_out_of_range(journal: Journal) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        journal.remove(5)
    assert exc_info.value.argument == "index"
    with pytest.raises(InvalidArgumentError):
        journal.remove(-1)


def test_add_entry_rejects_multiline_text() -> None:
    with pytest.raises(InvalidArgumentError):
        Journal().add_entry("first\nsecond")


def test_str_joins_with_platform_newline(journal: Journal) -> None:
    assert str(journal) == f"1: I ate a bug today{os.linesep}2: I feel sad"
    assert str(Journal()) == ""


def test_entries_is_a_copy(journal: Journal) -> None:
    assert list(journal) == list(journal.entries)
    assert isinstance(journal.entries, tuple)


def test_restore_sets_counter_to_highest_number() -> None:
    restored = Journal.restore([(2, "b"), (5, "e")])
    assert restored.entries == ("2: b", "5: e")
    assert restored.add_entry("f") == "6: f"
