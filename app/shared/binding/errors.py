"""
Errors raised by the request binding engine.

Request errors (BindError, ValidationError) are translated to 400
responses by the centralized error handlers. Definition errors are
raised while record descriptions are built at import time and block
startup. No framework imports allowed.
"""

from enum import Enum


class BindErrorKind(Enum):
    """Why a request could not be bound onto a record."""

    MALFORMED = "malformed"
    TYPE_MISMATCH = "type_mismatch"
    UNSUPPORTED = "unsupported"


class BindingError(Exception):
    """Base error for all binding engine errors.

    Attributes:
        field: Label of the offending field ("" when not field-specific).
        message: Human-readable message, safe to return to clients.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(self.message)


class BindError(BindingError):
    """Raised when request data cannot be applied to a record."""

    def __init__(self, kind: BindErrorKind, field: str, message: str) -> None:
        super().__init__(field, message)
        self.kind = kind


class ValidationError(BindingError):
    """Raised for the first rule a bound record violates."""

    def __init__(self, field: str, rule: str, message: str) -> None:
        super().__init__(field, message)
        self.rule = rule


class RuleDefinitionError(BindingError):
    """Raised when a rule token cannot be parsed."""


class SchemaDefinitionError(BindingError):
    """Raised when a record description does not match its record type."""


def unsupported_kind(field: str, kind: object) -> BindError:
    """Build the error for a field whose kind has no coercion rule."""
    return BindError(
        BindErrorKind.UNSUPPORTED,
        field,
        f"unsupported field type for {field}: {kind}",
    )
