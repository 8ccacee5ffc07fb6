"""
Request binding and validation engine.

Populates flat request records from a RequestView (JSON body, query
string, path parameters) using explicit record descriptions, then checks
them against declared rules. Framework-free: the HTTP layer builds the
RequestView and maps the errors to responses.
"""

from app.shared.binding.binder import bind
from app.shared.binding.errors import (
    BindError,
    BindErrorKind,
    BindingError,
    RuleDefinitionError,
    SchemaDefinitionError,
    ValidationError,
)
from app.shared.binding.fields import FieldKind, FieldSpec, RecordSchema, schema_for
from app.shared.binding.validator import validate
from app.shared.binding.view import RequestView

__all__ = [
    "BindError",
    "BindErrorKind",
    "BindingError",
    "FieldKind",
    "FieldSpec",
    "RecordSchema",
    "RequestView",
    "RuleDefinitionError",
    "SchemaDefinitionError",
    "ValidationError",
    "bind",
    "schema_for",
    "validate",
]
