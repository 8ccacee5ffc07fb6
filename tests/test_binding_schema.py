"""
Tests for record descriptions and rule parsing.

Definition problems must surface when a description is built, never
on a request.
"""

from dataclasses import dataclass
from typing import Optional

import pytest

from app.shared.binding import (
    BindError,
    BindErrorKind,
    FieldKind,
    FieldSpec,
    RecordSchema,
    RuleDefinitionError,
    SchemaDefinitionError,
    schema_for,
)
from app.shared.binding.fields import default_label
from app.shared.binding.rules import MaxLen, MaxVal, MinLen, MinVal, Required, parse_rules


@dataclass
class Profile:
    user_type: str = ""
    age: int = 0
    nickname: Optional[str] = None


class TestLabels:
    """Default labels are the CamelCase attribute name."""

    @pytest.mark.parametrize(
        "name, label",
        [("title", "Title"), ("user_type", "UserType"), ("category_id", "CategoryId")],
    )
    def test_default_label(self, name: str, label: str) -> None:
        assert default_label(name) == label

    def test_explicit_label_wins(self) -> None:
        schema = RecordSchema(Profile, [FieldSpec("age", int, label="Years")])
        assert schema.fields[0].label == "Years"


class TestRecordSchema:
    """Building a description checks it against the record type."""

    def test_fields_compiled_in_order(self) -> None:
        schema = RecordSchema(
            Profile,
            [
                FieldSpec("age", int, query="age", rules="min=1"),
                FieldSpec("user_type", str, body="user_type", rules="required"),
            ],
        )
        assert [f.name for f in schema.fields] == ["age", "user_type"]
        assert schema.fields[0].kind is FieldKind.INT
        assert schema.fields[1].rules == (Required(),)

    def test_registered_for_lookup(self) -> None:
        schema = RecordSchema(Profile, [FieldSpec("age", int)])
        assert schema_for(Profile()) is schema

    def test_new_builds_default_record(self) -> None:
        schema = RecordSchema(Profile, [FieldSpec("age", int)])
        assert schema.new() == Profile()
        assert schema.new(age=3).age == 3

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(SchemaDefinitionError):
            RecordSchema(Profile, [FieldSpec("missing", str)])

    def test_duplicate_field_rejected(self) -> None:
        with pytest.raises(SchemaDefinitionError):
            RecordSchema(Profile, [FieldSpec("age", int), FieldSpec("age", int)])

    def test_non_dataclass_rejected(self) -> None:
        class Plain:
            pass

        with pytest.raises(SchemaDefinitionError):
            RecordSchema(Plain, [])

    def test_unregistered_record_lookup_fails(self) -> None:
        @dataclass
        class Orphan:
            value: str = ""

        with pytest.raises(SchemaDefinitionError):
            schema_for(Orphan())

    @pytest.mark.parametrize("kind", [list, dict, bytes, "decimal"])
    def test_unsupported_kind_rejected(self, kind) -> None:
        with pytest.raises(BindError) as exc_info:
            RecordSchema(Profile, [FieldSpec("nickname", kind)])
        assert exc_info.value.kind is BindErrorKind.UNSUPPORTED
        assert exc_info.value.message.startswith("unsupported field type for Nickname")

    def test_uint_kind_by_name(self) -> None:
        schema = RecordSchema(Profile, [FieldSpec("age", "uint")])
        assert schema.fields[0].kind is FieldKind.UINT

    def test_kind_must_match_annotation(self) -> None:
        with pytest.raises(SchemaDefinitionError) as exc_info:
            RecordSchema(Profile, [FieldSpec("age", str)])
        assert exc_info.value.field == "age"

    def test_optional_flag_must_match_annotation(self) -> None:
        with pytest.raises(SchemaDefinitionError):
            RecordSchema(Profile, [FieldSpec("nickname", str)])
        with pytest.raises(SchemaDefinitionError):
            RecordSchema(Profile, [FieldSpec("age", int, optional=True)])

    def test_pipe_optional_accepted(self) -> None:
        @dataclass
        class Tagged:
            tag: str | None = None

        schema = RecordSchema(Tagged, [FieldSpec("tag", str, optional=True)])
        assert schema.fields[0].optional is True

    def test_field_without_default_rejected(self) -> None:
        @dataclass
        class Bare:
            value: str

        with pytest.raises(SchemaDefinitionError) as exc_info:
            RecordSchema(Bare, [FieldSpec("value", str)])
        assert "default" in exc_info.value.message


class TestParseRules:
    """Rule tokens become rule objects according to the field kind."""

    def test_string_rules_are_lengths(self) -> None:
        assert parse_rules("Title", "string", "required,min=2,max=5") == (
            Required(),
            MinLen(2),
            MaxLen(5),
        )

    def test_integer_rules_are_values(self) -> None:
        assert parse_rules("Limit", "int", "min=1, max=100") == (MinVal(1), MaxVal(100))

    @pytest.mark.parametrize("kind", ["bool", "float"])
    def test_rules_on_bool_and_float_are_dropped(self, kind: str) -> None:
        assert parse_rules("Flag", kind, "required,max=1") == ()

    def test_empty_declaration(self) -> None:
        assert parse_rules("Name", "string", "") == ()

    @pytest.mark.parametrize("tokens", ["omitempty", "max", "len=3", "Required"])
    def test_unknown_token_rejected(self, tokens: str) -> None:
        with pytest.raises(RuleDefinitionError):
            parse_rules("Name", "string", tokens)

    def test_unknown_token_rejected_even_on_bool(self) -> None:
        with pytest.raises(RuleDefinitionError):
            parse_rules("Flag", "bool", "requird")

    @pytest.mark.parametrize("tokens", ["max=abc", "min=", "max=1.5"])
    def test_bad_argument_rejected(self, tokens: str) -> None:
        with pytest.raises(RuleDefinitionError) as exc_info:
            parse_rules("Name", "string", tokens)
        assert "value for Name" in exc_info.value.message

    def test_bad_rule_fails_schema_build(self) -> None:
        with pytest.raises(RuleDefinitionError):
            RecordSchema(Profile, [FieldSpec("age", int, rules="max=ten")])


class TestCatalogRequestRecords:
    """The API's request records all build and register at import."""

    def test_request_schemas_registered(self) -> None:
        from app.interfaces.catalog import requests
        from app.shared.binding.fields import registered_schemas

        schemas = registered_schemas()
        for schema in (requests.SAVE_USER, requests.LIST_SUMMARIES, requests.SUMMARY_ID):
            assert schema in schemas

    def test_save_summary_labels(self) -> None:
        from app.interfaces.catalog.requests import SAVE_SUMMARY

        labels = [f.label for f in SAVE_SUMMARY.fields]
        assert labels[:2] == ["ID", "Title"]
        assert "CategoryID" in labels
