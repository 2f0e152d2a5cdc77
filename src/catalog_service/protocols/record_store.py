"""Record storage protocol.

Defines the interface for any backend that can hold one collection of
records and answer point lookups by id.

Implementations can include:
- In-memory ordered dict (default)
- Any keyed database table
"""

from typing import Any, Protocol, runtime_checkable

from catalog_service.entities import RecordEntity


@runtime_checkable
class RecordStore(Protocol):
    """Protocol for record storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from catalog_service.protocols import RecordStore

        repo: RecordStore = InMemoryRecordRepository()
        ```
    """

    def list_all(self) -> list[RecordEntity]:
        """Return every record in insertion order."""
        ...

    def get(self, record_id: str) -> RecordEntity | None:
        """Find a record by id.

        Args:
            record_id: The record identifier

        Returns:
            The record, or None if no record has that id
        """
        ...

    def insert(self, fields: dict[str, Any]) -> RecordEntity:
        """Store a new record under a freshly generated id.

        Args:
            fields: Field values (already validated)

        Returns:
            The stored record including its id
        """
        ...

    def update(self, record_id: str, changes: dict[str, Any]) -> RecordEntity | None:
        """Apply ``changes`` on top of an existing record.

        Args:
            record_id: The record identifier
            changes: Field values to overwrite; other fields are kept

        Returns:
            The updated record, or None if no record has that id
        """
        ...

    def delete(self, record_id: str) -> bool:
        """Remove a record.

        Args:
            record_id: The record identifier

        Returns:
            True if deleted, False if not found
        """
        ...

    def count(self) -> int:
        """Number of records in the collection."""
        ...

    def clear(self) -> int:
        """Remove every record.

        Returns:
            Number of records removed
        """
        ...
