"""Resource collections served by the API.

Each binding ties a schema to the DTOs its routes accept and return.
Adding a collection means adding a schema, its DTOs and one entry here.
"""

from dataclasses import dataclass

from pydantic import BaseModel

from catalog_service.dto import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from catalog_service.entities import PRODUCT_SCHEMA, USER_SCHEMA, ResourceSchema


@dataclass(frozen=True)
class ResourceBinding:
    """Schema plus the wire models of one collection."""

    schema: ResourceSchema
    create_model: type[BaseModel]
    update_model: type[BaseModel]
    response_model: type[BaseModel]

    @property
    def collection(self) -> str:
        return self.schema.collection


RESOURCES: tuple[ResourceBinding, ...] = (
    ResourceBinding(
        schema=PRODUCT_SCHEMA,
        create_model=ProductCreateRequest,
        update_model=ProductUpdateRequest,
        response_model=ProductResponse,
    ),
    ResourceBinding(
        schema=USER_SCHEMA,
        create_model=UserCreateRequest,
        update_model=UserUpdateRequest,
        response_model=UserResponse,
    ),
)
