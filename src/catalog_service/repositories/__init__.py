"""Repository layer for data access.

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the RecordStore methods satisfies the protocol.
"""

from catalog_service.protocols import RecordStore

from .memory_repository import InMemoryRecordRepository

__all__ = [
    "RecordStore",
    "InMemoryRecordRepository",
]
