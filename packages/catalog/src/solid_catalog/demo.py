#!/usr/bin/env python
"""Demo: filtering products with composable specifications (Open/Closed)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from solid_specifications import SpecificationFilter

from .models import Color, Product, Size
from .specifications import ColorSpecification, SizeSpecification

if TYPE_CHECKING:
    from collections.abc import Sequence

    from solid_core.domain.specification import ISpecification

logger = logging.getLogger("solid.catalog.demo")


def sample_products() -> list[Product]:
    return [
        Product("Apple", Size.SMALL, Color.GREEN),
        Product("Harry Potter", Size.MEDIUM, Color.BLUE),
        Product("Ford F150", Size.LARGE, Color.RED),
        Product("Mansion", Size.YUGE, Color.BLUE),
    ]


def demo_scenarios() -> list[tuple[str, ISpecification[Product]]]:
    """Headers and specifications shown by the demo, in display order."""
    blue = ColorSpecification(Color.BLUE)
    return [
        ("Filter By Color Red", ColorSpecification(Color.RED)),
        ("Filter By Size Medium", SizeSpecification(Size.MEDIUM)),
        ("Blue Items", blue),
        ("Size Yuge", SizeSpecification(Size.YUGE)),
        ("Color Blue and Size Medium", blue & SizeSpecification(Size.MEDIUM)),
        ("Color Blue and Size Yuge", blue & SizeSpecification(Size.YUGE)),
    ]


def run(products: Sequence[Product]) -> list[str]:
    """Render every scenario as console lines."""
    better_filter: SpecificationFilter[Product] = SpecificationFilter()
    lines: list[str] = []
    for header, spec in demo_scenarios():
        lines.append(f"{header}: ********")
        lines.extend(str(p) for p in better_filter.filter(products, spec))
    return lines


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    products = sample_products()
    logger.info("Filtering %d products", len(products))
    for line in run(products):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
