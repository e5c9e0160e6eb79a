"""Cross-cutting primitives."""

from __future__ import annotations

from .exceptions import InvalidArgumentError, SolidError

__all__ = [
    "InvalidArgumentError",
    "SolidError",
]
