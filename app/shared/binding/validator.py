"""
Validator: checks a bound record against its declared rules.

Fields are walked in declaration order and rules within a field in
declaration order. Validation stops at the first violation; it never
collects more than one.
"""

from typing import Any

from app.shared.binding.errors import ValidationError
from app.shared.binding.fields import RecordSchema, schema_for
from app.shared.binding.rules import Required


def validate(record: Any, schema: RecordSchema | None = None) -> None:
    """Validate a populated record.

    Args:
        record: The record to check.
        schema: Its record description. Looked up from the record type
            when omitted.

    Raises:
        ValidationError: For the first rule the record violates.
    """
    schema = schema or schema_for(record)

    for field in schema.fields:
        if not field.rules:
            continue
        value = getattr(record, field.name)
        for rule in field.rules:
            if value is None and not isinstance(rule, Required):
                continue
            message = rule.check(field.label, value)
            if message is not None:
                raise ValidationError(field.label, rule.token, message)
