"""
Binder: populates a record from a RequestView.

Sources are applied in increasing order of specificity, each later
stage overwriting what the earlier one set:

1. JSON body (POST/PUT/PATCH with a non-empty body),
2. query parameters,
3. path parameters.

Fields with no matching input are left untouched, so binding the same
view twice yields the same record.
"""

import json
import logging
from typing import Any

from app.shared.binding.coercion import coerce_json, coerce_text
from app.shared.binding.errors import BindError, BindErrorKind
from app.shared.binding.fields import BoundField, RecordSchema, schema_for
from app.shared.binding.view import RequestView

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def _malformed(detail: str) -> BindError:
    return BindError(BindErrorKind.MALFORMED, "", f"failed to parse JSON body: {detail}")


def _decode_body(body: bytes) -> dict[str, Any]:
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except ValueError as exc:
        raise _malformed(str(exc)) from exc
    if payload is None:
        # a null body carries no fields
        return {}
    if not isinstance(payload, dict):
        raise _malformed(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def _body_field(schema: RecordSchema, key: str) -> BoundField | None:
    """Find the field for a body key: exact match first, then case-insensitive."""
    folded = None
    for field in schema.fields:
        if field.body is None:
            continue
        if field.body == key:
            return field
        if folded is None and field.body.casefold() == key.casefold():
            folded = field
    return folded


def bind_body(view: RequestView, record: Any, schema: RecordSchema) -> None:
    """Apply the JSON body onto the record.

    The whole body is checked before anything is assigned, so a
    malformed body leaves the record unchanged.

    Raises:
        BindError: MALFORMED if the body is not a JSON object or a value
            does not fit its field.
    """
    payload = _decode_body(view.body)

    pending: dict[str, Any] = {}
    for key, raw in payload.items():
        field = _body_field(schema, key)
        if field is None:
            continue
        value = coerce_json(field, raw)
        if value is None:
            # null unsets an optional field and is ignored otherwise
            if field.optional:
                pending[field.name] = None
            continue
        pending[field.name] = value

    for name, value in pending.items():
        setattr(record, name, value)


def bind_query(view: RequestView, record: Any, schema: RecordSchema) -> None:
    """Apply the first value of each declared query key."""
    for field in schema.fields:
        if field.query is None:
            continue
        raw = view.first_query(field.query)
        if not raw:
            continue
        setattr(record, field.name, coerce_text(field, raw))


def bind_path(view: RequestView, record: Any, schema: RecordSchema) -> None:
    """Apply each declared path parameter."""
    for field in schema.fields:
        if field.path is None:
            continue
        raw = view.path_param(field.path)
        if not raw:
            continue
        setattr(record, field.name, coerce_text(field, raw))


def bind(view: RequestView, record: Any, schema: RecordSchema | None = None) -> None:
    """Populate a record from request data.

    Args:
        view: Snapshot of the request.
        record: Destination record, mutated in place.
        schema: Its record description. Looked up from the record type
            when omitted.

    Raises:
        BindError: MALFORMED for an unusable body (later stages are not
            run), TYPE_MISMATCH for a query or path value that does not
            parse.
    """
    schema = schema or schema_for(record)

    if view.carries_body:
        bind_body(view, record, schema)
    bind_query(view, record, schema)
    bind_path(view, record, schema)

    logger.debug("Bound %s from %s request", schema.name, view.method)
