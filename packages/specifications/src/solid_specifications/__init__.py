from .attribute import AttributeSpecification, coerce_enum
from .base import (
    AndSpecification,
    BaseSpecification,
    NotSpecification,
    OrSpecification,
    ensure_specification,
)
from .exceptions import (
    FieldNotFoundError,
    InvalidSpecificationError,
    OperatorNotFoundError,
    SpecificationError,
    ValidationError,
)
from .factory import SpecificationFactory
from .filter import IFilter, SpecificationFilter, filter_items

__all__ = [
    # Core types
    "AttributeSpecification",
    "BaseSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    # Filtering
    "IFilter",
    "SpecificationFilter",
    "filter_items",
    # Factory
    "SpecificationFactory",
    # Exceptions
    "SpecificationError",
    "InvalidSpecificationError",
    "ValidationError",
    "OperatorNotFoundError",
    "FieldNotFoundError",
    # Utilities
    "coerce_enum",
    "ensure_specification",
]
