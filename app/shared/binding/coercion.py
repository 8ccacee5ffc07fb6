"""
Type coercion for bound fields.

``coerce_text`` converts a raw query or path string into a field's
kind. ``coerce_json`` checks a decoded JSON value against the kind the
way a typed JSON decoder would. Optional fields use the rule of the
kind they wrap.
"""

import math
import re
from typing import Any

from app.shared.binding.errors import BindError, BindErrorKind, unsupported_kind
from app.shared.binding.fields import BoundField, FieldKind

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")
_DECIMAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_INFINITY = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _mismatch(field: BoundField, detail: str) -> BindError:
    return BindError(
        BindErrorKind.TYPE_MISMATCH,
        field.label,
        f"failed to set field {field.label}: {detail}",
    )


def _parse_int(field: BoundField, raw: str, pattern: re.Pattern, low: int, high: int) -> int:
    if not pattern.fullmatch(raw):
        raise _mismatch(field, f"cannot parse {raw!r} as {field.kind.value}")
    value = int(raw, 10)
    if not low <= value <= high:
        raise _mismatch(field, f"{raw!r} is out of range for {field.kind.value}")
    return value


def coerce_text(field: BoundField, raw: str) -> Any:
    """Convert a query or path value into the field's kind.

    Args:
        field: The target field.
        raw: The raw, non-empty string from the request.

    Returns:
        The converted value.

    Raises:
        BindError: TYPE_MISMATCH if the string does not parse.
    """
    kind = field.kind
    if kind is FieldKind.STRING:
        return raw
    if kind is FieldKind.INT:
        return _parse_int(field, raw, _SIGNED, INT64_MIN, INT64_MAX)
    if kind is FieldKind.UINT:
        return _parse_int(field, raw, _UNSIGNED, 0, UINT64_MAX)
    if kind is FieldKind.BOOL:
        if raw in TRUE_LITERALS:
            return True
        if raw in FALSE_LITERALS:
            return False
        raise _mismatch(field, f"cannot parse {raw!r} as bool")
    if kind is FieldKind.FLOAT:
        if not _DECIMAL.fullmatch(raw):
            raise _mismatch(field, f"cannot parse {raw!r} as float")
        value = float(raw)
        if math.isinf(value) and not _INFINITY.fullmatch(raw):
            raise _mismatch(field, f"{raw!r} is out of range for float")
        return value
    raise unsupported_kind(field.label, kind)


def coerce_json(field: BoundField, value: Any) -> Any:
    """Check a decoded JSON value against the field's kind.

    ``None`` (JSON null) is returned unchanged; the binder decides what
    it means for the field.

    Raises:
        BindError: MALFORMED if the JSON type does not fit the kind.
    """
    if value is None:
        return None

    kind = field.kind
    if kind is FieldKind.STRING and isinstance(value, str):
        return value
    if kind is FieldKind.BOOL and isinstance(value, bool):
        return value
    if kind.is_integer and isinstance(value, int) and not isinstance(value, bool):
        low, high = (INT64_MIN, INT64_MAX) if kind is FieldKind.INT else (0, UINT64_MAX)
        if low <= value <= high:
            return value
    if kind is FieldKind.FLOAT and isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf
        if math.isfinite(number):
            return number

    raise BindError(
        BindErrorKind.MALFORMED,
        field.label,
        f"failed to parse JSON body: cannot use {type(value).__name__} "
        f"value as {kind.value} for field {field.label}",
    )
