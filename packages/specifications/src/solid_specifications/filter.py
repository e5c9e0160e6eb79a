"""
Specification-driven filtering.

``SpecificationFilter`` never changes when new criteria appear: a new
criterion is a new :class:`ISpecification`, and combinations are built
with ``&``, ``|`` and ``~``.

Usage::

    blue_and_medium = ColorSpecification(Color.BLUE) & SizeSpecification(Size.MEDIUM)
    for product in SpecificationFilter().filter(products, blue_and_medium):
        print(product)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from .base import ensure_specification
from .exceptions import InvalidSpecificationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from solid_core.domain.specification import ISpecification

logger = logging.getLogger("solid.specifications.filter")

T = TypeVar("T")


@runtime_checkable
class IFilter(Protocol[T]):
    """Select the items of a sequence that satisfy a specification."""

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
        """Return a lazy iterator over the matching items, in input order."""
        ...


class SpecificationFilter(IFilter[T]):
    """
    Stateless filter over any iterable.

    Arguments are checked when :meth:`filter` is called; the returned
    generator is single-pass, so iterating again requires a new call.
    """

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
        if items is None:
            raise InvalidSpecificationError(
                "'items' is required, got None", argument="items"
            )
        ensure_specification(spec)
        logger.debug("Filtering with %s", type(spec).__name__)
        return self._select(items, spec)

    @staticmethod
    def _select(items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
        for item in items:
            if spec.is_satisfied_by(item):
                yield item


_default_filter: SpecificationFilter[object] = SpecificationFilter()


def filter_items(items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
    """Shortcut for ``SpecificationFilter().filter(items, spec)``."""
    return _default_filter.filter(items, spec)  # type: ignore[arg-type,return-value]
