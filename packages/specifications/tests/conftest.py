"""Shared fixtures for specifications tests."""

from __future__ import annotations

from typing import Any

import pytest

from solid_core.domain.value_object import ValueObject


class Person(ValueObject):
    name: str
    age: int
    status: str


class CountingSpecification:
    """Records every candidate it sees; satisfied when ``predicate`` says so."""

    def __init__(self, predicate: Any) -> None:
        self.predicate = predicate
        self.seen: list[Any] = []

    def is_satisfied_by(self, candidate: Any) -> bool:
        self.seen.append(candidate)
        return bool(self.predicate(candidate))

    def to_dict(self) -> dict[str, Any]:
        return {"op": "=", "attr": "counting", "val": None}


@pytest.fixture
def people() -> list[Person]:
    return [
        Person(name="Alice", age=28, status="active"),
        Person(name="Bob", age=45, status="inactive"),
        Person(name="Carol", age=33, status="active"),
        Person(name="Dave", age=45, status="active"),
    ]


@pytest.fixture
def alice(people: list[Person]) -> Person:
    return people[0]


@pytest.fixture
def counting() -> type[CountingSpecification]:
    return CountingSpecification
