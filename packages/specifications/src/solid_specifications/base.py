from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from solid_core.domain.specification import ISpecification

from .exceptions import InvalidSpecificationError, SpecificationError

T = TypeVar("T", contravariant=True)


def ensure_specification(spec: Any, argument: str = "spec") -> None:
    """
    Fail fast when *spec* is absent or cannot be evaluated.

    Only ``is_satisfied_by`` is required here; ``to_dict`` matters only
    when the specification is serialised.
    """
    if spec is None:
        raise InvalidSpecificationError(
            f"'{argument}' is required, got None", argument=argument
        )
    if not callable(getattr(spec, "is_satisfied_by", None)):
        raise InvalidSpecificationError(
            f"'{argument}' must implement is_satisfied_by(), "
            f"got {type(spec).__name__}",
            argument=argument,
        )


def specification_to_dict(spec: Any) -> dict[str, Any]:
    """Serialise *spec*, failing with :class:`SpecificationError` if it can't."""
    to_dict = getattr(spec, "to_dict", None)
    if not callable(to_dict):
        raise SpecificationError(
            f"{type(spec).__name__} does not implement to_dict() "
            "and cannot be serialised"
        )
    result: dict[str, Any] = to_dict()
    return result


class BaseSpecification(ABC, Generic[T]):
    """Base class for specifications with logic operator support."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    def __and__(self, other: ISpecification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: ISpecification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return NotSpecification(self)

    def merge(self, other: ISpecification[T]) -> AndSpecification[T]:
        """Merge with another specification using logical AND."""
        return AndSpecification(self, other)

    def __repr__(self) -> str:
        try:
            return f"{type(self).__name__}({self.to_dict()!r})"
        except SpecificationError:
            return f"{type(self).__name__}(<not serialisable>)"


class _CompositeSpecification(BaseSpecification[T]):
    """Shared validation for the n-ary logical combinators."""

    op: str

    def __init__(self, *specifications: ISpecification[T]) -> None:
        if len(specifications) < 2:
            raise InvalidSpecificationError(
                f"'{self.op}' needs at least two specifications, "
                f"got {len(specifications)}",
                argument="specifications",
            )
        for idx, spec in enumerate(specifications):
            ensure_specification(spec, argument=f"specifications[{idx}]")
        self.specifications: tuple[ISpecification[T], ...] = specifications

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op,
            "conditions": [
                specification_to_dict(spec) for spec in self.specifications
            ],
        }


class AndSpecification(_CompositeSpecification[T]):
    """Logical AND composite specification.

    Operands are evaluated left to right; evaluation stops at the first
    operand that is not satisfied.
    """

    op = "and"

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specifications)


class OrSpecification(_CompositeSpecification[T]):
    """Logical OR composite specification."""

    op = "or"

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(spec.is_satisfied_by(candidate) for spec in self.specifications)


class NotSpecification(BaseSpecification[T]):
    """Logical NOT composite specification."""

    def __init__(self, specification: ISpecification[T]) -> None:
        ensure_specification(specification, argument="specification")
        self.specification = specification

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.specification.is_satisfied_by(candidate)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "not",
            "conditions": [specification_to_dict(self.specification)],
        }
