"""
Validation rules.

Rule tokens ("required", "min=N", "max=N") are parsed once, when a
record description is built, into small rule objects. Each rule checks
a single value and returns a message when the value violates it.

The zero value of a field counts as "not provided": ``required`` rejects
it, and ``min`` lets it through. This mirrors the behavior existing
clients rely on.
"""

from dataclasses import dataclass
from typing import Any, Union

from app.shared.binding.errors import RuleDefinitionError

_STRING = "string"
_INTEGERS = ("int", "uint")


@dataclass(frozen=True)
class Required:
    """Rejects a blank string, a zero integer or an unset optional."""

    @property
    def token(self) -> str:
        return "required"

    def check(self, label: str, value: Any) -> str | None:
        if value is None:
            return f"{label} is required"
        if isinstance(value, str) and not value.strip():
            return f"{label} is required"
        if isinstance(value, int) and not isinstance(value, bool) and value == 0:
            return f"{label} is required"
        return None


@dataclass(frozen=True)
class MinLen:
    """Minimum character count; an empty string is exempt."""

    limit: int

    @property
    def token(self) -> str:
        return f"min={self.limit}"

    def check(self, label: str, value: Any) -> str | None:
        if value and len(value) < self.limit:
            return f"{label} must be at least {self.limit} characters"
        return None


@dataclass(frozen=True)
class MaxLen:
    """Maximum character count."""

    limit: int

    @property
    def token(self) -> str:
        return f"max={self.limit}"

    def check(self, label: str, value: Any) -> str | None:
        if value is not None and len(value) > self.limit:
            return f"{label} must be less than or equal to {self.limit} characters"
        return None


@dataclass(frozen=True)
class MinVal:
    """Minimum integer value; zero is exempt."""

    limit: int

    @property
    def token(self) -> str:
        return f"min={self.limit}"

    def check(self, label: str, value: Any) -> str | None:
        if value is not None and value != 0 and value < self.limit:
            return f"{label} must be at least {self.limit}"
        return None


@dataclass(frozen=True)
class MaxVal:
    """Maximum integer value."""

    limit: int

    @property
    def token(self) -> str:
        return f"max={self.limit}"

    def check(self, label: str, value: Any) -> str | None:
        if value is not None and value > self.limit:
            return f"{label} must be less than or equal to {self.limit}"
        return None


Rule = Union[Required, MinLen, MaxLen, MinVal, MaxVal]


def _parse_limit(label: str, name: str, raw: str) -> int:
    try:
        return int(raw.strip(), 10)
    except ValueError:
        raise RuleDefinitionError(label, f"invalid {name} value for {label}") from None


def parse_rules(label: str, kind: str, tokens: str) -> tuple[Rule, ...]:
    """Parse a comma-separated rule declaration for a field.

    ``min``/``max`` become length rules on strings and value rules on
    integers. Rules on booleans and floats are parsed (so typos still
    fail) but have nothing to check and are dropped.

    Args:
        label: Field label, used in error messages.
        kind: The field's kind value ("string", "int", ...).
        tokens: Declaration such as "required,min=1,max=100".

    Returns:
        Rules in declaration order.

    Raises:
        RuleDefinitionError: On an unknown token or a non-integer argument.
    """
    rules: list[Rule] = []
    for raw in tokens.split(","):
        token = raw.strip()
        if not token:
            continue

        name, sep, argument = token.partition("=")
        rule: Rule
        if token == "required":
            rule = Required()
        elif sep and name in ("min", "max"):
            limit = _parse_limit(label, name, argument)
            if kind == _STRING:
                rule = MinLen(limit) if name == "min" else MaxLen(limit)
            else:
                rule = MinVal(limit) if name == "min" else MaxVal(limit)
        else:
            raise RuleDefinitionError(label, f"unknown rule {token!r} for {label}")

        if kind == _STRING or kind in _INTEGERS:
            rules.append(rule)
    return tuple(rules)
