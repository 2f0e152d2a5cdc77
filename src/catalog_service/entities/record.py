"""Record domain entity."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RecordEntity:
    """Domain entity for one stored record (a product or a user).

    Updates never mutate an entity; the repository swaps in a new one
    built with ``with_changes``.

    Attributes:
        id: Store-generated identifier, immutable after creation
        fields: Field values, already trimmed and coerced by the service
    """

    id: str
    fields: dict[str, Any] = field(default_factory=dict)

    def with_changes(self, changes: dict[str, Any]) -> "RecordEntity":
        """Return a copy with ``changes`` applied on top of the current fields."""
        return RecordEntity(id=self.id, fields={**self.fields, **changes})

    def as_dict(self) -> dict[str, Any]:
        """Flatten into a single mapping with ``id`` first."""
        return {"id": self.id, **self.fields}
