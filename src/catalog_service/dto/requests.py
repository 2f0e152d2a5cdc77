"""Request DTOs for API endpoints.

Values are passed on to the service layer, which trims strings and
checks that required fields are not blank. An ``id`` in the body is
ignored.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field


def reject_boolean(value: Any) -> Any:
    """Stop pydantic from reading JSON true/false as 1/0."""
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


Number = Annotated[int | float, BeforeValidator(reject_boolean)]
Integer = Annotated[int, BeforeValidator(reject_boolean)]


class ProductCreateRequest(BaseModel):
    """Request DTO for creating a product."""

    name: str = Field(..., description="Product name")
    price: Number = Field(..., description="Unit price")
    category: str | None = Field(None, description="Catalog category")
    description: str | None = Field(None, description="Free-form description")
    stock: Integer | None = Field(None, description="Units in stock")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Ноутбук ASUS ROG",
                "category": "Ноутбуки",
                "description": "Игровой ноутбук с RTX 3060",
                "price": 95000,
                "stock": 5,
            }
        }
    }


class ProductUpdateRequest(BaseModel):
    """Request DTO for a partial product update.

    Only the fields present in the body are changed.
    """

    name: str | None = Field(None, description="New product name")
    price: Number | None = Field(None, description="New unit price")
    category: str | None = Field(None, description="New category")
    description: str | None = Field(None, description="New description")
    stock: Integer | None = Field(None, description="New stock level")

    model_config = {"json_schema_extra": {"example": {"price": 70000}}}


class UserCreateRequest(BaseModel):
    """Request DTO for creating a user."""

    name: str = Field(..., description="User name")
    age: Integer = Field(..., description="User age")

    model_config = {"json_schema_extra": {"example": {"name": "Анна", "age": 22}}}


class UserUpdateRequest(BaseModel):
    """Request DTO for a partial user update."""

    name: str | None = Field(None, description="New name")
    age: Integer | None = Field(None, description="New age")

    model_config = {"json_schema_extra": {"example": {"name": "Петр Петров", "age": 26}}}
