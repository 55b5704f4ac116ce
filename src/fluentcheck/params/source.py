"""Parameter sources and the raw values a request carries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class ParameterSource(str, Enum):
    PATH = "path"
    QUERY = "query"
    HEADER = "header"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RawParameter:
    """One named raw value as delivered by the transport layer."""

    name: str
    source: ParameterSource
    raw: str | None = None

    @property
    def is_present(self) -> bool:
        """Missing and empty values both count as absent."""
        return self.raw is not None and self.raw != ""


def _empty() -> dict[str, str]:
    return {}


@dataclass(frozen=True)
class RequestValues:
    """Immutable per-request snapshot of path, query and header values.

    Header names are matched case-insensitively.

    Usage::

        values = RequestValues.from_mappings(
            path={"id": "42"},
            query={"page": "2"},
            headers={"X-Tenant": "acme"},
        )
        values.lookup(ParameterSource.HEADER, "x-tenant")  # "acme"
    """

    path: Mapping[str, str] = field(default_factory=_empty)
    query: Mapping[str, str] = field(default_factory=_empty)
    headers: Mapping[str, str] = field(default_factory=_empty)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "headers", {k.lower(): v for k, v in self.headers.items()}
        )

    @classmethod
    def from_mappings(
        cls,
        *,
        path: Mapping[str, str] | None = None,
        query: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> RequestValues:
        return cls(
            path=dict(path or {}),
            query=dict(query or {}),
            headers=dict(headers or {}),
        )

    def lookup(self, source: ParameterSource, name: str) -> str | None:
        if source is ParameterSource.PATH:
            return self.path.get(name)
        if source is ParameterSource.QUERY:
            return self.query.get(name)
        return self.headers.get(name.lower())

    def raw_parameter(self, source: ParameterSource, name: str) -> RawParameter:
        return RawParameter(name=name, source=source, raw=self.lookup(source, name))
