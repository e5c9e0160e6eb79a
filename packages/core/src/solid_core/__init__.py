"""solid-core — Foundation package for the SOLID principles toolkit.

Zero infrastructure dependencies. Pydantic for immutable value objects.
"""

from __future__ import annotations

# ── Domain ───────────────────────────────────────────────────────
from .domain import ISpecification, ValueObject

# ── Primitives ───────────────────────────────────────────────────
from .primitives import InvalidArgumentError, SolidError

__all__ = [
    # Domain
    "ISpecification",
    "ValueObject",
    # Primitives
    "InvalidArgumentError",
    "SolidError",
]
