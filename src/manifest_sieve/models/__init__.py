"""Data models for Manifest Sieve."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Metadata:
    name: str = ""
    namespace: str = ""
    labels: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Document:
    """Read-only view of the fields used for filtering.

    Built from a decoded document; never used to re-encode it.
    """

    api_version: str = ""
    kind: str = ""
    metadata: Metadata = field(default_factory=Metadata)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def labels(self) -> dict[str, Any]:
        return self.metadata.labels

    def describe(self) -> str:
        ref = f"{self.kind or '<no kind>'}/{self.name or '<no name>'}"
        return f"{self.namespace}/{ref}" if self.namespace else ref


@dataclass
class FilterCriteria:
    kind: str = ""
    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    search: str = ""

    @property
    def pattern(self) -> Document | None:
        """Return the filter document, or None when no field constrains."""
        if not (self.kind or self.name or self.namespace or self.labels):
            return None
        return Document(
            kind=self.kind,
            metadata=Metadata(name=self.name, namespace=self.namespace, labels=dict(self.labels)),
        )

    @property
    def is_empty(self) -> bool:
        return self.pattern is None and not self.search


@dataclass
class SievedDocument:
    index: int
    document: Document
    raw: dict[str, Any]
    text: str
