"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    ProductCreateRequest,
    ProductUpdateRequest,
    UserCreateRequest,
    UserUpdateRequest,
)
from .responses import ErrorResponse, HealthCheckResponse, ProductResponse, UserResponse

__all__ = [
    "ProductCreateRequest",
    "ProductUpdateRequest",
    "UserCreateRequest",
    "UserUpdateRequest",
    "ProductResponse",
    "UserResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
