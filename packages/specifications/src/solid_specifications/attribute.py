from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from .base import BaseSpecification
from .exceptions import InvalidSpecificationError

T = TypeVar("T", contravariant=True)

EQ = "="


class AttributeSpecification(BaseSpecification[T]):
    """
    Specification that checks a single attribute for equality.

    Subclasses bind ``attr`` to a fixed attribute and may override
    :meth:`coerce` to validate the expected value at construction time,
    which is how new criteria are added without touching existing ones.
    """

    attr: str = ""

    def __init__(self, value: Any, *, attr: str | None = None) -> None:
        attr = attr if attr is not None else type(self).attr
        if not attr or not isinstance(attr, str):
            raise InvalidSpecificationError(
                "An attribute name is required", argument="attr"
            )
        self.attr = attr
        self.value = self.coerce(value)

    def coerce(self, value: Any) -> Any:
        """Validate and normalise the expected value; identity by default."""
        return value

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._resolve_field(candidate, self.attr) == self.value)

    # -- field resolution ----------------------------------------------------

    @staticmethod
    def _resolve_field(obj: Any, attr_path: str) -> Any:
        """
        Resolve a dot-separated attribute path on *obj*.

        Supports nested attribute access (``address.city``) and dict keys.
        Missing attributes resolve to ``None``.
        """
        for part in attr_path.split("."):
            if obj is None:
                return None
            obj = obj.get(part) if isinstance(obj, dict) else getattr(obj, part, None)
        return obj

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        val = self.value.value if isinstance(self.value, Enum) else self.value
        return {
            "op": EQ,
            "attr": self.attr,
            "val": val,
        }


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_type: type[E], value: Any, argument: str) -> E:
    """
    Return *value* as a member of *enum_type*.

    Accepts members, member values (``"Blue"``) and member names
    (``"BLUE"``); anything else is an out-of-range categorical value.
    """
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except (TypeError, ValueError):
        pass
    if isinstance(value, str) and value.upper() in enum_type.__members__:
        return enum_type[value.upper()]
    valid = ", ".join(str(m.value) for m in enum_type)
    raise InvalidSpecificationError(
        f"{value!r} is not a valid {enum_type.__name__} (expected one of: {valid})",
        argument=argument,
    )
