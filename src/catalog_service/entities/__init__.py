"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .record import RecordEntity
from .resource_schema import PRODUCT_SCHEMA, USER_SCHEMA, FieldKind, FieldSpec, ResourceSchema

__all__ = [
    "RecordEntity",
    "FieldKind",
    "FieldSpec",
    "ResourceSchema",
    "PRODUCT_SCHEMA",
    "USER_SCHEMA",
]
