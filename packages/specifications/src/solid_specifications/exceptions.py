"""
Specification exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

from solid_core.primitives.exceptions import InvalidArgumentError, SolidError


class SpecificationError(SolidError):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidSpecificationError(SpecificationError, InvalidArgumentError):
    """
    A specification or filter received an argument it cannot work with.

    Raised for an absent predicate, a non-specification operand, or a
    categorical value outside its enumeration.
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        InvalidArgumentError.__init__(self, message, argument=argument)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ARGUMENT",
            "message": self.message,
            "argument": self.argument,
        }


class ValidationError(SpecificationError):
    """Specification structure validation failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class OperatorNotFoundError(ValidationError):
    """
    Unknown operator specified.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(
        self,
        operator: str,
        valid_operators: list[str],
        path: str | None = None,
    ) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unknown operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message, path=path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "path": self.path,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class FieldNotFoundError(ValidationError):
    """
    Unknown attribute with helpful suggestions.

    Example error message::

        Invalid field 'colour' on 'Product'.
        Did you mean one of these?
          • color

        Available fields: color, name, size
    """

    def __init__(
        self,
        invalid_field: str,
        model_name: str,
        available_fields: list[str],
        path: str | None = None,
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.model_name = model_name
        self.available_fields = available_fields

        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=5, cutoff=cutoff
        )

        super().__init__(self._build_message(), path=path)

    def _build_message(self) -> str:
        lines = [f"Invalid field '{self.invalid_field}' on '{self.model_name}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")
        lines.append(f"Available fields: {', '.join(sorted(self.available_fields))}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "model": self.model_name,
            "path": self.path,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }
