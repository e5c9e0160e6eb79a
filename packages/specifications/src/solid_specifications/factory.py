from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .attribute import EQ, AttributeSpecification
from .base import AndSpecification, NotSpecification, OrSpecification
from .exceptions import FieldNotFoundError, OperatorNotFoundError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from solid_core.domain.specification import ISpecification

T = TypeVar("T")

_LOGICAL_OPERATORS: frozenset[str] = frozenset({"and", "or", "not"})
_VALID_OPERATORS: frozenset[str] = _LOGICAL_OPERATORS | {EQ}


class SpecificationFactory(Generic[T]):
    """
    Factory for creating specifications from dictionary / JSON representations.

    Understands the shape produced by ``to_dict()``:

    - leaves ``{"op": "=", "attr": "color", "val": "Blue"}``
    - composites ``{"op": "and" | "or" | "not", "conditions": [...]}``

    Leaves are built by the callable registered for their ``attr``. When no
    builder is registered the factory falls back to a plain
    :class:`AttributeSpecification`, or raises :class:`FieldNotFoundError`
    if ``strict`` is set.
    """

    def __init__(
        self,
        leaf_builders: Mapping[str, Callable[[Any], ISpecification[T]]] | None = None,
        *,
        model_name: str = "candidate",
        strict: bool = False,
    ) -> None:
        self._leaf_builders: dict[str, Callable[[Any], ISpecification[T]]] = dict(
            leaf_builders or {}
        )
        self.model_name = model_name
        self.strict = strict

    def register(
        self, attr: str, builder: Callable[[Any], ISpecification[T]]
    ) -> None:
        """Register (or replace) the leaf builder for *attr*."""
        self._leaf_builders[attr] = builder

    @property
    def fields(self) -> list[str]:
        return sorted(self._leaf_builders)

    # ------------------------------------------------------------------ #
    # Public API                                                          #
    # ------------------------------------------------------------------ #

    def from_dict(self, data: dict[str, Any]) -> ISpecification[T]:
        """Create a specification tree from a (potentially nested) dictionary."""
        return self._build(data, path="<root>")

    def from_json(self, text: str) -> ISpecification[T]:
        """Parse a JSON string and build a specification tree."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid JSON: {exc}", path="<root>") from exc

        if not isinstance(data, dict):
            raise ValidationError(
                "Top-level JSON value must be an object", path="<root>"
            )
        return self.from_dict(data)

    def validate(self, data: Any) -> list[str]:
        """
        Validate a specification dict and return a list of error messages.

        Returns an empty list when the structure is valid.
        """
        errors: list[str] = []
        self._collect_errors(data, errors, path="<root>")
        return errors

    # ------------------------------------------------------------------ #
    # Internal — recursive build (fail-fast)                              #
    # ------------------------------------------------------------------ #

    def _build(self, data: Any, *, path: str) -> ISpecification[T]:
        if not isinstance(data, dict):
            raise ValidationError(
                f"Expected a dict, got {type(data).__name__}", path=path
            )

        op = data.get("op")
        if not op or not isinstance(op, str):
            raise ValidationError("Missing or empty 'op' key", path=path)
        op = op.lower()
        if op not in _VALID_OPERATORS:
            raise OperatorNotFoundError(op, sorted(_VALID_OPERATORS), path=path)

        if op in _LOGICAL_OPERATORS:
            conditions = data.get("conditions")
            if not isinstance(conditions, list) or not conditions:
                raise ValidationError(
                    f"Logical operator '{op}' requires a non-empty 'conditions' list",
                    path=path,
                )
            children = [
                self._build(child, path=f"{path}.conditions[{idx}]")
                for idx, child in enumerate(conditions)
            ]
            return self._combine(op, children, path)

        return self._build_leaf(data, path)

    @staticmethod
    def _combine(
        op: str, children: list[ISpecification[T]], path: str
    ) -> ISpecification[T]:
        if op == "not":
            if len(children) != 1:
                raise ValidationError(
                    "'not' takes exactly one condition", path=path
                )
            return NotSpecification(children[0])
        if len(children) == 1:
            return children[0]
        if op == "and":
            return AndSpecification(*children)
        return OrSpecification(*children)

    def _build_leaf(self, data: dict[str, Any], path: str) -> ISpecification[T]:
        attr = data.get("attr")
        if not attr or not isinstance(attr, str):
            raise ValidationError(
                f"Leaf specification missing 'attr': {data}", path=path
            )

        builder = self._leaf_builders.get(attr)
        if builder is not None:
            return builder(data.get("val"))
        if self.strict:
            raise FieldNotFoundError(attr, self.model_name, self.fields, path=path)
        return AttributeSpecification(data.get("val"), attr=attr)

    # ------------------------------------------------------------------ #
    # Internal — validation (non-throwing)                                #
    # ------------------------------------------------------------------ #

    def _collect_errors(self, data: Any, errors: list[str], *, path: str) -> None:
        if not isinstance(data, dict):
            errors.append(f"{path}: expected dict, got {type(data).__name__}")
            return

        op = data.get("op")
        if not op or not isinstance(op, str):
            errors.append(f"{path}: missing or empty 'op' key")
            return
        op = op.lower()

        if op in _LOGICAL_OPERATORS:
            conditions = data.get("conditions")
            if not isinstance(conditions, list) or not conditions:
                errors.append(f"{path}: logical '{op}' requires 'conditions'")
                return
            if op == "not" and len(conditions) != 1:
                errors.append(f"{path}: 'not' takes exactly one condition")
            for idx, child in enumerate(conditions):
                self._collect_errors(child, errors, path=f"{path}.conditions[{idx}]")
            return

        if op not in _VALID_OPERATORS:
            errors.append(f"{path}: unknown operator '{op}'")

        attr = data.get("attr")
        if not attr or not isinstance(attr, str):
            errors.append(f"{path}: missing 'attr'")
            return
        if self.strict and attr not in self._leaf_builders:
            errors.append(f"{path}: field '{attr}' not allowed")
