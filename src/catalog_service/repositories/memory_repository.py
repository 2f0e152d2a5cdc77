"""In-memory implementation of RecordStore.

Records live in a dict keyed by id for the lifetime of the process.
Dicts keep insertion order, so listing returns records in the order they
were created.
"""

import threading
from collections.abc import Callable
from typing import Any

from catalog_service.entities import RecordEntity
from catalog_service.utils import generate_id


class InMemoryRecordRepository:
    """Ordered in-memory record collection.

    This class satisfies the RecordStore protocol through structural
    typing - no explicit inheritance needed.

    Every public method runs under a single re-entrant lock, so the
    repository can be shared between worker threads.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] | None = None,
        max_id_attempts: int = 100,
    ) -> None:
        """Initialize an empty repository.

        Args:
            id_factory: Callable producing candidate ids. Defaults to generate_id.
            max_id_attempts: How many collisions to tolerate before giving up.
        """
        self._records: dict[str, RecordEntity] = {}
        self._lock = threading.RLock()
        self._id_factory = id_factory or generate_id
        self._max_id_attempts = max_id_attempts

    @classmethod
    def create(cls, id_factory: Callable[[], str] | None = None) -> "InMemoryRecordRepository":
        """Factory method to create an empty repository with defaults."""
        return cls(id_factory=id_factory)

    def _next_id(self) -> str:
        for _ in range(self._max_id_attempts):
            candidate = self._id_factory()
            if candidate not in self._records:
                return candidate
        raise RuntimeError(
            f"Could not generate a unique id after {self._max_id_attempts} attempts"
        )

    def list_all(self) -> list[RecordEntity]:
        with self._lock:
            return list(self._records.values())

    def get(self, record_id: str) -> RecordEntity | None:
        with self._lock:
            return self._records.get(record_id)

    def insert(self, fields: dict[str, Any]) -> RecordEntity:
        with self._lock:
            record = RecordEntity(id=self._next_id(), fields=dict(fields))
            self._records[record.id] = record
            return record

    def update(self, record_id: str, changes: dict[str, Any]) -> RecordEntity | None:
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            # Reassigning an existing key keeps its position
            updated = current.with_changes(changes)
            self._records[record_id] = updated
            return updated

    def delete(self, record_id: str) -> bool:
        with self._lock:
            if record_id in self._records:
                del self._records[record_id]
                return True
            return False

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> int:
        with self._lock:
            count = len(self._records)
            self._records.clear()
            return count
