"""Resource service for core business logic.

This service applies a ResourceSchema on top of a RecordStore:
required-field checks, string trimming, numeric coercion and
partial-update semantics.
"""

import logging
import math
from typing import Any

from catalog_service.entities import FieldKind, FieldSpec, RecordEntity, ResourceSchema
from catalog_service.errors import RecordNotFoundError, RecordValidationError
from catalog_service.protocols import RecordStore
from catalog_service.repositories import InMemoryRecordRepository

logger = logging.getLogger(__name__)


class ResourceService:
    """CRUD operations for one resource collection.

    This service depends on the RecordStore PROTOCOL, not on the
    in-memory implementation.

    Example:
        ```python
        from catalog_service.entities import PRODUCT_SCHEMA
        from catalog_service.services import ResourceService

        products = ResourceService.create(PRODUCT_SCHEMA)
        laptop = products.create_record({"name": "Ноутбук", "price": 75000})
        products.update_record(laptop.id, {"price": 70000})
        ```
    """

    def __init__(self, schema: ResourceSchema, repository: RecordStore) -> None:
        """Initialize the resource service.

        Args:
            schema: Field set of the collection (required).
            repository: Record storage backend (required).
        """
        self._schema = schema
        self._repository = repository

    @classmethod
    def create(
        cls,
        schema: ResourceSchema,
        repository: RecordStore | None = None,
    ) -> "ResourceService":
        """Factory method to create ResourceService with sensible defaults.

        Args:
            schema: Field set of the collection.
            repository: Storage backend. If None, a fresh in-memory repository.

        Returns:
            Configured ResourceService instance
        """
        return cls(
            schema=schema,
            repository=repository or InMemoryRecordRepository.create(),
        )

    def list_records(self) -> list[RecordEntity]:
        """Return all records in insertion order."""
        return self._repository.list_all()

    def get_record(self, record_id: str) -> RecordEntity:
        """Return the record with ``record_id``.

        Raises:
            RecordNotFoundError: If no record has that id
        """
        record = self._repository.get(record_id)
        if record is None:
            logger.warning("%s %s not found", self._schema.label, record_id)
            raise RecordNotFoundError(self._schema.label, record_id)
        return record

    def create_record(self, data: dict[str, Any]) -> RecordEntity:
        """Validate ``data`` and store it as a new record.

        Business logic:
        1. Keep only fields the schema knows (``id`` is never taken from the caller)
        2. Trim strings, coerce numbers
        3. Reject if any required field is absent or blank
        4. Delegate to repository, which assigns the id

        Args:
            data: Raw field values

        Returns:
            The created record

        Raises:
            RecordValidationError: If a required field is missing or a value is malformed
        """
        fields = self._normalize(data)

        missing = [name for name in self._schema.required_fields if name not in fields]
        if missing:
            raise RecordValidationError(f"Missing required fields: {', '.join(missing)}")

        ordered = {name: fields[name] for name in self._schema.field_names if name in fields}
        record = self._repository.insert(ordered)
        logger.info("Created %s %s", self._schema.label, record.id)
        return record

    def update_record(self, record_id: str, data: dict[str, Any]) -> RecordEntity:
        """Apply the supplied fields of ``data`` to an existing record.

        Fields not present in ``data`` (or present as null) keep their
        current value. A blank string is rejected rather than clearing the
        field.

        Args:
            record_id: The record identifier
            data: Raw partial field values

        Returns:
            The updated record

        Raises:
            RecordNotFoundError: If no record has that id
            RecordValidationError: If nothing recognized was supplied, a value is blank
                or malformed
        """
        # 404 takes precedence over an empty body
        self.get_record(record_id)

        changes = self._normalize(data)

        blank = [
            name for name in self._schema.field_names
            if isinstance(data.get(name), str) and not data[name].strip()
        ]
        if blank:
            raise RecordValidationError(f"Fields cannot be empty: {', '.join(blank)}")

        if not changes:
            raise RecordValidationError("Nothing to update")

        record = self._repository.update(record_id, changes)
        if record is None:
            # Deleted between the lookup and the update
            raise RecordNotFoundError(self._schema.label, record_id)
        logger.info("Updated %s %s: %s", self._schema.label, record_id, sorted(changes))
        return record

    def delete_record(self, record_id: str) -> None:
        """Remove a record permanently.

        Raises:
            RecordNotFoundError: If no record has that id
        """
        if not self._repository.delete(record_id):
            logger.warning("%s %s not found for deletion", self._schema.label, record_id)
            raise RecordNotFoundError(self._schema.label, record_id)
        logger.info("Deleted %s %s", self._schema.label, record_id)

    def count(self) -> int:
        """Number of records in the collection."""
        return self._repository.count()

    def clear(self) -> int:
        """Remove all records.

        Returns:
            Number of records removed
        """
        return self._repository.clear()

    def _normalize(self, data: dict[str, Any]) -> dict[str, Any]:
        """Trim and coerce the recognized, non-null fields of ``data``.

        Blank strings are dropped so they count as absent.
        """
        result: dict[str, Any] = {}
        for field_spec in self._schema.fields:
            value = data.get(field_spec.name)
            if value is None:
                continue
            value = _coerce(field_spec, value)
            if isinstance(value, str) and not value:
                continue
            result[field_spec.name] = value
        return result

    @property
    def schema(self) -> ResourceSchema:
        """Get the collection schema."""
        return self._schema

    @property
    def repository(self) -> RecordStore:
        """Get the underlying repository (for testing)."""
        return self._repository


def _coerce(field_spec: FieldSpec, value: Any) -> Any:
    if field_spec.kind is FieldKind.STRING:
        if not isinstance(value, str):
            raise RecordValidationError(f"{field_spec.name} must be a string")
        return value.strip()

    # bool is an int subclass but never a meaningful price or age
    if isinstance(value, bool):
        raise RecordValidationError(f"{field_spec.name} must be a number")

    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                raise RecordValidationError(f"{field_spec.name} must be a number") from None

    if not isinstance(value, (int, float)) or (
        isinstance(value, float) and not math.isfinite(value)
    ):
        raise RecordValidationError(f"{field_spec.name} must be a number")

    if field_spec.kind is FieldKind.INTEGER:
        if isinstance(value, float):
            if not value.is_integer():
                raise RecordValidationError(f"{field_spec.name} must be an integer")
            value = int(value)
    return value
