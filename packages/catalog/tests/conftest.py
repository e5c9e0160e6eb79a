"""Shared fixtures for catalog tests."""

from __future__ import annotations

import pytest

from solid_catalog import Color, Product, Size


@pytest.fixture
def apple() -> Product:
    return Product("Apple", Size.SMALL, Color.GREEN)


@pytest.fixture
def potter() -> Product:
    return Product("Harry Potter", Size.MEDIUM, Color.BLUE)


@pytest.fixture
def truck() -> Product:
    return Product("Ford F150", Size.LARGE, Color.RED)


@pytest.fixture
def mansion() -> Product:
    return Product("Mansion", Size.YUGE, Color.BLUE)


@pytest.fixture
def products(apple, potter, truck, mansion) -> list[Product]:
    return [apple, potter, truck, mansion]
