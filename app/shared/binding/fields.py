"""
Record descriptions for the request binding engine.

A record description is an explicit, ordered table of fields built once
per record type at import time. Each field declares its primitive kind,
where its value may come from (JSON body key, query key, path key) and
the rules it must satisfy. Building the table checks the declaration
against the record dataclass, so a broken description fails at startup
instead of on a request.
"""

import dataclasses
import types
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Generic,
    Iterable,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from app.shared.binding.errors import SchemaDefinitionError, unsupported_kind
from app.shared.binding.rules import Rule, parse_rules

R = TypeVar("R")

_REGISTRY: dict[type, "RecordSchema"] = {}


class FieldKind(Enum):
    """Primitive kinds a field may be declared with."""

    STRING = "string"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    FLOAT = "float"

    @property
    def is_integer(self) -> bool:
        return self in (FieldKind.INT, FieldKind.UINT)


_PYTHON_KINDS = {
    str: FieldKind.STRING,
    int: FieldKind.INT,
    bool: FieldKind.BOOL,
    float: FieldKind.FLOAT,
}

_KIND_TYPES = {
    FieldKind.STRING: str,
    FieldKind.INT: int,
    FieldKind.UINT: int,
    FieldKind.BOOL: bool,
    FieldKind.FLOAT: float,
}


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one record field.

    Attributes:
        name: Attribute name on the record dataclass.
        kind: A FieldKind, its string value ("uint"), or one of the
            Python types str, int, bool, float.
        optional: True for optional-of-kind fields, which stay None
            until a source provides a value.
        body: JSON body key, matched case-insensitively.
        query: Query-string key.
        path: Path-parameter key.
        rules: Comma-separated rule tokens ("required,max=255").
        label: Name used in error messages. Defaults to the CamelCase
            form of ``name``.
    """

    name: str
    kind: Any
    optional: bool = False
    body: str | None = None
    query: str | None = None
    path: str | None = None
    rules: str = ""
    label: str | None = None


@dataclass(frozen=True)
class BoundField:
    """A FieldSpec after its kind and rules have been resolved."""

    name: str
    label: str
    kind: FieldKind
    optional: bool
    body: str | None
    query: str | None
    path: str | None
    rules: tuple[Rule, ...]


def default_label(name: str) -> str:
    """Return the message label for an attribute name (``user_type`` -> ``UserType``)."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def resolve_kind(label: str, kind: Any) -> FieldKind:
    """Map a declared kind onto a FieldKind.

    Raises:
        BindError: With kind UNSUPPORTED if the kind has no coercion rule.
    """
    if isinstance(kind, FieldKind):
        return kind
    if isinstance(kind, type) and kind in _PYTHON_KINDS:
        return _PYTHON_KINDS[kind]
    if isinstance(kind, str):
        try:
            return FieldKind(kind)
        except ValueError:
            pass
    raise unsupported_kind(label, getattr(kind, "__name__", kind))


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Split ``Optional[X]`` (or ``X | None``) into ``(X, True)``."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1 and len(get_args(annotation)) == 2:
            return args[0], True
    return annotation, False


def _check_annotation(owner: str, annotation: Any, bound: BoundField) -> None:
    inner, optional = _unwrap_optional(annotation)
    if optional != bound.optional:
        expected = "Optional" if bound.optional else "non-Optional"
        raise SchemaDefinitionError(
            bound.name, f"{owner}.{bound.name} must be annotated {expected}"
        )
    if inner is not _KIND_TYPES[bound.kind]:
        raise SchemaDefinitionError(
            bound.name,
            f"{owner}.{bound.name} is annotated {getattr(inner, '__name__', inner)}"
            f" but declared {bound.kind.value}",
        )


def _compile(spec: FieldSpec) -> BoundField:
    label = spec.label or default_label(spec.name)
    kind = resolve_kind(label, spec.kind)
    return BoundField(
        name=spec.name,
        label=label,
        kind=kind,
        optional=spec.optional,
        body=spec.body or None,
        query=spec.query or None,
        path=spec.path or None,
        rules=parse_rules(label, kind.value, spec.rules),
    )


class RecordSchema(Generic[R]):
    """Ordered field table for a mutable dataclass record type.

    Args:
        record_type: Dataclass whose fields all have defaults.
        fields: Field declarations, in the order they are bound and
            validated.

    Raises:
        SchemaDefinitionError: If the record type is not a dataclass, a
            record field has no default, a field is unknown or declared
            twice, or a field's annotation disagrees with its declared
            kind (``Optional[...]`` exactly when ``optional=True``).
        RuleDefinitionError: If a rule token cannot be parsed.
        BindError: With kind UNSUPPORTED for an unsupported field kind.
    """

    def __init__(self, record_type: type[R], fields: Iterable[FieldSpec]) -> None:
        if not dataclasses.is_dataclass(record_type):
            raise SchemaDefinitionError(
                "", f"{record_type.__name__} must be a dataclass"
            )

        attributes = {f.name: f for f in dataclasses.fields(record_type)}
        for attribute in attributes.values():
            if (
                attribute.default is dataclasses.MISSING
                and attribute.default_factory is dataclasses.MISSING
            ):
                raise SchemaDefinitionError(
                    attribute.name,
                    f"{record_type.__name__}.{attribute.name} "
                    "must have a default value",
                )
        hints = get_type_hints(record_type)
        compiled: list[BoundField] = []
        seen: set[str] = set()

        for spec in fields:
            if spec.name not in attributes:
                raise SchemaDefinitionError(
                    spec.name,
                    f"{record_type.__name__} has no field named {spec.name}",
                )
            if spec.name in seen:
                raise SchemaDefinitionError(
                    spec.name, f"{spec.name} is declared more than once"
                )
            seen.add(spec.name)
            bound = _compile(spec)
            _check_annotation(record_type.__name__, hints[spec.name], bound)
            compiled.append(bound)

        self.record_type = record_type
        self.fields: tuple[BoundField, ...] = tuple(compiled)
        _REGISTRY[record_type] = self

    @property
    def name(self) -> str:
        return self.record_type.__name__

    def new(self, **values: Any) -> R:
        """Create a record with default values, overriding any given ones."""
        return self.record_type(**values)

    def __repr__(self) -> str:
        return f"RecordSchema({self.name}, fields={[f.name for f in self.fields]})"


def schema_for(record: Any) -> RecordSchema:
    """Return the record description registered for a record instance.

    Raises:
        SchemaDefinitionError: If no description was built for its type.
    """
    schema = _REGISTRY.get(type(record))
    if schema is None:
        raise SchemaDefinitionError(
            "", f"no record description registered for {type(record).__name__}"
        )
    return schema


def registered_schemas() -> tuple[RecordSchema, ...]:
    """Return every record description built so far."""
    return tuple(_REGISTRY.values())
