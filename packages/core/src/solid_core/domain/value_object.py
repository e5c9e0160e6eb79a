"""Immutable Value Object base class."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable record compared by its field values.

    Fields cannot be reassigned and undeclared keyword arguments are
    rejected. Two instances of the same class with equal fields are equal
    and hash alike, so value objects work as set members and dict keys.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def _field_values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject) or type(other) is not type(self):
            return NotImplemented
        return self._field_values() == other._field_values()

    def __hash__(self) -> int:
        return hash((type(self).__qualname__, self._field_values()))
