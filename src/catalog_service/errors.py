"""Domain errors raised by the service layer.

Handlers translate these into HTTP responses; nothing below the handler
layer knows about status codes.
"""


class CatalogError(Exception):
    """Base class for catalog service errors."""


class RecordValidationError(CatalogError):
    """Required field missing, or a field value cannot be used."""


class RecordNotFoundError(CatalogError):
    """No record with the requested id exists in the collection."""

    def __init__(self, resource: str, record_id: str) -> None:
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} not found")
