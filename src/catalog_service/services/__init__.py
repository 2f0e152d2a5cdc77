"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from catalog_service.entities import USER_SCHEMA
    from catalog_service.services import ResourceService

    # Using factory method (recommended)
    users = ResourceService.create(USER_SCHEMA)

    # Or manual creation
    users = ResourceService(schema=USER_SCHEMA, repository=repo)
    ```
"""

from .resource_service import ResourceService

__all__ = [
    "ResourceService",
]
