"""Domain primitives: value objects and the specification protocol."""

from __future__ import annotations

from .specification import ISpecification
from .value_object import ValueObject

__all__: list[str] = [
    "ISpecification",
    "ValueObject",
]
