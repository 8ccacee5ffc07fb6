"""
Tests for query/path text coercion and JSON value checks.
"""

import math

import pytest

from app.shared.binding import BindError, BindErrorKind, FieldKind
from app.shared.binding.coercion import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    coerce_json,
    coerce_text,
)
from app.shared.binding.fields import BoundField


def _field(kind: FieldKind, label: str = "Value") -> BoundField:
    return BoundField(
        name="value",
        label=label,
        kind=kind,
        optional=False,
        body="value",
        query="value",
        path=None,
        rules=(),
    )


class TestCoerceTextIntegers:
    """Signed and unsigned decimal integers."""

    @pytest.mark.parametrize(
        "raw, expected",
        [("0", 0), ("+7", 7), ("-12", -12), ("007", 7), (str(INT64_MAX), INT64_MAX), (str(INT64_MIN), INT64_MIN)],
    )
    def test_signed(self, raw: str, expected: int) -> None:
        assert coerce_text(_field(FieldKind.INT), raw) == expected

    @pytest.mark.parametrize("raw", ["1.0", "1e3", " 1", "0x10", "abc", str(INT64_MAX + 1)])
    def test_signed_rejects(self, raw: str) -> None:
        with pytest.raises(BindError) as exc_info:
            coerce_text(_field(FieldKind.INT, "Limit"), raw)
        assert exc_info.value.kind is BindErrorKind.TYPE_MISMATCH
        assert exc_info.value.field == "Limit"

    def test_unsigned_accepts_full_range(self) -> None:
        assert coerce_text(_field(FieldKind.UINT), str(UINT64_MAX)) == UINT64_MAX

    @pytest.mark.parametrize("raw", ["-1", "+1", str(UINT64_MAX + 1)])
    def test_unsigned_rejects(self, raw: str) -> None:
        with pytest.raises(BindError):
            coerce_text(_field(FieldKind.UINT), raw)


class TestCoerceTextOther:
    """Strings, booleans and floats."""

    def test_string_passes_through(self) -> None:
        assert coerce_text(_field(FieldKind.STRING), " spaced ") == " spaced "

    @pytest.mark.parametrize("raw", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true_literals(self, raw: str) -> None:
        assert coerce_text(_field(FieldKind.BOOL), raw) is True

    @pytest.mark.parametrize("raw", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_literals(self, raw: str) -> None:
        assert coerce_text(_field(FieldKind.BOOL), raw) is False

    @pytest.mark.parametrize("raw", ["yes", "tRuE", "2", "on"])
    def test_bool_rejects(self, raw: str) -> None:
        with pytest.raises(BindError):
            coerce_text(_field(FieldKind.BOOL), raw)

    @pytest.mark.parametrize(
        "raw, expected", [("1.5", 1.5), ("-.5", -0.5), ("3.", 3.0), ("2E-2", 0.02), ("+Inf", math.inf)]
    )
    def test_float(self, raw: str, expected: float) -> None:
        assert coerce_text(_field(FieldKind.FLOAT), raw) == expected

    def test_float_nan(self) -> None:
        assert math.isnan(coerce_text(_field(FieldKind.FLOAT), "NaN"))

    @pytest.mark.parametrize("raw", ["1,5", "abc", "1.2.3", "1_000", "1e400", "-1e400"])
    def test_float_rejects(self, raw: str) -> None:
        with pytest.raises(BindError):
            coerce_text(_field(FieldKind.FLOAT), raw)


class TestCoerceJson:
    """Decoded JSON values must already have the field's type."""

    def test_null_passes_through(self) -> None:
        assert coerce_json(_field(FieldKind.INT), None) is None

    def test_matching_values(self) -> None:
        assert coerce_json(_field(FieldKind.STRING), "x") == "x"
        assert coerce_json(_field(FieldKind.INT), -3) == -3
        assert coerce_json(_field(FieldKind.UINT), 3) == 3
        assert coerce_json(_field(FieldKind.BOOL), False) is False
        assert coerce_json(_field(FieldKind.FLOAT), 1) == 1.0

    @pytest.mark.parametrize(
        "kind, value",
        [
            (FieldKind.STRING, 1),
            (FieldKind.INT, "1"),
            (FieldKind.INT, True),
            (FieldKind.INT, 2**63),
            (FieldKind.UINT, -1),
            (FieldKind.BOOL, 0),
            (FieldKind.FLOAT, "1.0"),
            (FieldKind.FLOAT, 10**400),
            (FieldKind.STRING, {"nested": 1}),
        ],
    )
    def test_mismatch_is_malformed(self, kind: FieldKind, value) -> None:
        with pytest.raises(BindError) as exc_info:
            coerce_json(_field(kind, "Count"), value)
        assert exc_info.value.kind is BindErrorKind.MALFORMED
        assert exc_info.value.message.startswith("failed to parse JSON body")
