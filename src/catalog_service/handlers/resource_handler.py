"""HTTP handlers for resource CRUD operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error translation.
"""

from fastapi import HTTPException, status
from pydantic import BaseModel

from catalog_service.entities import RecordEntity
from catalog_service.errors import RecordNotFoundError, RecordValidationError
from catalog_service.services import ResourceService


class ResourceHandler:
    """HTTP handlers for one resource collection.

    This handler delegates business logic to ResourceService
    and handles HTTP-specific concerns like:
    - Converting entities to response DTOs
    - Mapping domain errors to 400/404

    Unexpected exceptions are left to propagate; the application's
    exception handler turns them into a generic 500.

    Example:
        ```python
        from catalog_service.dto import ProductResponse
        from catalog_service.entities import PRODUCT_SCHEMA
        from catalog_service.handlers import ResourceHandler
        from catalog_service.services import ResourceService

        handler = ResourceHandler(
            service=ResourceService.create(PRODUCT_SCHEMA),
            response_model=ProductResponse,
        )
        ```
    """

    def __init__(self, service: ResourceService, response_model: type[BaseModel]) -> None:
        """Initialize the resource handler.

        Args:
            service: The resource service for business logic (required).
            response_model: DTO class each record is rendered as.
        """
        self._service = service
        self._response_model = response_model

    def _to_response(self, record: RecordEntity) -> BaseModel:
        return self._response_model.model_validate(record.as_dict())

    async def list_records(self) -> list[BaseModel]:
        """Handle GET /{collection} requests."""
        return [self._to_response(record) for record in self._service.list_records()]

    async def get_record(self, record_id: str) -> BaseModel:
        """Handle GET /{collection}/{id} requests.

        Raises:
            HTTPException: 404 if the record does not exist
        """
        try:
            record = self._service.get_record(record_id)
        except RecordNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        return self._to_response(record)

    async def create_record(self, request: BaseModel) -> BaseModel:
        """Handle POST /{collection} requests.

        Args:
            request: The create request DTO

        Returns:
            The created record DTO

        Raises:
            HTTPException: 400 if a required field is missing or malformed
        """
        try:
            record = self._service.create_record(request.model_dump(exclude_unset=True))
        except RecordValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        return self._to_response(record)

    async def update_record(self, record_id: str, request: BaseModel) -> BaseModel:
        """Handle PATCH /{collection}/{id} requests.

        Args:
            record_id: The record identifier from the path
            request: The partial update DTO; only fields set in the body apply

        Returns:
            The updated record DTO

        Raises:
            HTTPException: 404 if the record does not exist, 400 if nothing to update
        """
        try:
            record = self._service.update_record(
                record_id, request.model_dump(exclude_unset=True)
            )
        except RecordNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        except RecordValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        return self._to_response(record)

    async def delete_record(self, record_id: str) -> None:
        """Handle DELETE /{collection}/{id} requests.

        Raises:
            HTTPException: 404 if the record does not exist
        """
        try:
            self._service.delete_record(record_id)
        except RecordNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    @property
    def service(self) -> ResourceService:
        """Get the underlying service (for testing)."""
        return self._service
