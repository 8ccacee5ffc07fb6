"""
Domain-specific errors for the catalog bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class RecordNotFoundError(CatalogDomainError):
    """Raised when a record does not exist or has been deleted."""

    def __init__(self, entity: str, record_id: str) -> None:
        super().__init__(f"{entity} not found: {record_id}")
        self.entity = entity
        self.record_id = record_id


class RepositoryError(CatalogDomainError):
    """Raised when the data store fails to complete an operation."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"Failed to {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class MissingIdentifierError(CatalogDomainError):
    """Raised when an update is requested without a record id."""

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} ID is required for update")
        self.entity = entity
