"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Services depend on these, not on concrete repositories, so a test can
hand in any object with the right methods.
"""

from .record_store import RecordStore

__all__ = [
    "RecordStore",
]
