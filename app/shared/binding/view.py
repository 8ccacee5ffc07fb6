"""
Normalized, read-only snapshot of an inbound request.

The binder only ever sees a RequestView, never a framework request, so
it can be exercised without an HTTP stack.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


@dataclass(frozen=True)
class RequestView:
    """Request data consumed by the binder.

    Attributes:
        method: HTTP method, upper case.
        body: Raw body bytes, possibly empty.
        query: Query multimap; only the first value per key is used.
        path_params: Path parameters from route matching.
        headers: Request headers, lower-cased names.
    """

    method: str
    body: bytes = b""
    query: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    path_params: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(
            self,
            "query",
            MappingProxyType({k: tuple(v) for k, v in self.query.items()}),
        )
        object.__setattr__(self, "path_params", MappingProxyType(dict(self.path_params)))
        object.__setattr__(
            self,
            "headers",
            MappingProxyType({k.lower(): v for k, v in self.headers.items()}),
        )

    @classmethod
    def from_pairs(
        cls,
        method: str,
        body: bytes = b"",
        query_pairs: Iterable[tuple[str, str]] = (),
        path_params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> "RequestView":
        """Build a view from raw query pairs, keeping their order per key."""
        query: dict[str, list[str]] = {}
        for key, value in query_pairs:
            query.setdefault(key, []).append(value)
        return cls(
            method=method,
            body=body,
            query={k: tuple(v) for k, v in query.items()},
            path_params=path_params or {},
            headers=headers or {},
        )

    @property
    def carries_body(self) -> bool:
        """True if the method carries a body and the body is non-empty."""
        return self.method in BODY_METHODS and len(self.body) > 0

    def first_query(self, key: str) -> str | None:
        """Return the first query value for a key, or None."""
        values = self.query.get(key)
        return values[0] if values else None

    def path_param(self, key: str) -> str | None:
        return self.path_params.get(key)
