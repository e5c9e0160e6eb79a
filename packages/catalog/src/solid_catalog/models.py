"""Product catalog value objects."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from solid_core.domain.value_object import ValueObject
from solid_core.primitives.exceptions import InvalidArgumentError


class Size(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    YUGE = "Yuge"


class Color(str, Enum):
    GREEN = "Green"
    RED = "Red"
    BLUE = "Blue"


class Product(ValueObject):
    """A named product classified by size and color.

    Accepts positional or keyword arguments. Enum members and their display
    values (``"Blue"``) are both accepted; anything else, including an
    undeclared keyword such as ``colour=``, raises :class:`InvalidArgumentError`.
    """

    name: str
    size: Size
    color: Color

    def __init__(
        self,
        name: str,
        size: Size | str,
        color: Color | str,
        **data: Any,
    ) -> None:
        try:
            super().__init__(name=name, size=size, color=color, **data)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            argument = ".".join(str(part) for part in first["loc"]) or None
            raise InvalidArgumentError(
                f"Invalid product {argument}: {first['msg']}", argument=argument
            ) from exc

    def __str__(self) -> str:
        return f"{self.name} has a color {self.color.value} and is {self.size.value}"
