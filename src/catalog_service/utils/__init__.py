"""Utility modules for the catalog service."""

from .ids import ID_ALPHABET, ID_LENGTH, generate_id

__all__ = [
    "ID_ALPHABET",
    "ID_LENGTH",
    "generate_id",
]
