"""Specification pattern primitives."""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """
    Protocol for the Specification pattern.
    Encapsulates a pure business rule that can be tested against a candidate.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check whether the candidate satisfies the rule.
        Must not mutate the candidate or the specification.
        """
        ...

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dictionary representation of the specification.
        Useful for serializing criteria across process boundaries.
        """
        ...
