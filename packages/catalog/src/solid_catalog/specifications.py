"""
Product specifications.

Each criterion is its own class; adding one (``NameSpecification`` is the
latest) leaves the other criteria and the filter untouched.
"""

from __future__ import annotations

from typing import Any

from solid_specifications import (
    AttributeSpecification,
    InvalidSpecificationError,
    SpecificationFactory,
    coerce_enum,
)

from .models import Color, Product, Size


class ColorSpecification(AttributeSpecification[Product]):
    """Satisfied by products of the given color."""

    attr = "color"

    def __init__(self, color: Color | str) -> None:
        super().__init__(color)

    def coerce(self, value: Any) -> Color:
        return coerce_enum(Color, value, argument="color")


class SizeSpecification(AttributeSpecification[Product]):
    """Satisfied by products of the given size."""

    attr = "size"

    def __init__(self, size: Size | str) -> None:
        super().__init__(size)

    def coerce(self, value: Any) -> Size:
        return coerce_enum(Size, value, argument="size")


class NameSpecification(AttributeSpecification[Product]):
    """Satisfied by products with exactly the given name."""

    attr = "name"

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def coerce(self, value: Any) -> str:
        if not isinstance(value, str):
            raise InvalidSpecificationError(
                f"name must be a string, got {type(value).__name__}",
                argument="name",
            )
        return value


def product_specification_factory() -> SpecificationFactory[Product]:
    """Strict factory that rebuilds product specifications from ``to_dict()`` output."""
    return SpecificationFactory(
        {
            "color": ColorSpecification,
            "size": SizeSpecification,
            "name": NameSpecification,
        },
        model_name=Product.__name__,
        strict=True,
    )
