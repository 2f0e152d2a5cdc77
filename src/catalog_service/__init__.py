"""Catalog Service - in-memory CRUD service for products and users.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (RecordStore)
    - repositories: Data access implementations
    - services: Business logic (field rules, partial updates)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models and resource schemas (internal)

Usage:
    ```python
    from catalog_service.entities import PRODUCT_SCHEMA
    from catalog_service.services import ResourceService

    products = ResourceService.create(PRODUCT_SCHEMA)
    ```

For HTTP API:
    ```python
    from catalog_service.api.app import app, create_app
    ```
"""

__version__ = "0.1.0"

from catalog_service.config import Settings, settings
from catalog_service.entities import PRODUCT_SCHEMA, USER_SCHEMA, RecordEntity, ResourceSchema
from catalog_service.errors import CatalogError, RecordNotFoundError, RecordValidationError
from catalog_service.handlers import ResourceHandler
from catalog_service.protocols import RecordStore
from catalog_service.repositories import InMemoryRecordRepository
from catalog_service.services import ResourceService

__all__ = [
    "__version__",
    # Configuration
    "Settings",
    "settings",
    # Protocols (interfaces)
    "RecordStore",
    # Services (business logic)
    "ResourceService",
    # Handlers (HTTP)
    "ResourceHandler",
    # Repositories (data access)
    "InMemoryRecordRepository",
    # Entities (domain models)
    "RecordEntity",
    "ResourceSchema",
    "PRODUCT_SCHEMA",
    "USER_SCHEMA",
    # Errors
    "CatalogError",
    "RecordNotFoundError",
    "RecordValidationError",
]
