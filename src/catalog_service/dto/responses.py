"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ProductResponse(BaseModel):
    """Response DTO for a product record.

    Optional fields that were never set are left out of the JSON.
    """

    id: str = Field(..., description="Generated 6-character product id")
    name: str = Field(..., description="Product name")
    category: str | None = Field(None, description="Catalog category")
    description: str | None = Field(None, description="Free-form description")
    price: int | float = Field(..., description="Unit price")
    stock: int | None = Field(None, description="Units in stock")


class UserResponse(BaseModel):
    """Response DTO for a user record."""

    id: str = Field(..., description="Generated 6-character user id")
    name: str = Field(..., description="User name")
    age: int = Field(..., description="User age")


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str = Field(..., description="Human-readable error message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy'")
    collections: dict[str, int] = Field(
        default_factory=dict,
        description="Number of records per collection",
    )
