"""solid-catalog — products filtered through composable specifications."""

from __future__ import annotations

from .models import Color, Product, Size
from .specifications import (
    ColorSpecification,
    NameSpecification,
    SizeSpecification,
    product_specification_factory,
)

__all__ = [
    "Color",
    "ColorSpecification",
    "NameSpecification",
    "Product",
    "Size",
    "SizeSpecification",
    "product_specification_factory",
]
