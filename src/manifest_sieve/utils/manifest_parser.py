"""Extract the typed filter view from a decoded manifest document."""

from __future__ import annotations

from typing import Any

from manifest_sieve.models import Document, Metadata
from manifest_sieve.models.errors import SchemaError


def _string_field(mapping: dict[str, Any], key: str, where: str) -> str:
    value = mapping.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise SchemaError(f"{where}{key} must be a string, got {type(value).__name__}")
    return value


def extract_metadata(raw: Any) -> Metadata:
    """Build Metadata from the raw ``metadata`` value of a document."""
    if raw is None:
        return Metadata()
    if not isinstance(raw, dict):
        raise SchemaError(f"metadata must be a mapping, got {type(raw).__name__}")

    labels = raw.get("labels") or {}
    if not isinstance(labels, dict):
        raise SchemaError(f"metadata.labels must be a mapping, got {type(labels).__name__}")

    return Metadata(
        name=_string_field(raw, "name", "metadata."),
        namespace=_string_field(raw, "namespace", "metadata."),
        labels=dict(labels),
    )


def extract_document(raw: dict[str, Any]) -> Document:
    """Extract a Document from a decoded mapping.

    Missing fields become empty strings. Unknown keys are ignored here and
    stay in ``raw`` for re-encoding. Fields of the wrong shape raise
    SchemaError.
    """
    if not isinstance(raw, dict):
        raise SchemaError(f"document must be a mapping, got {type(raw).__name__}")
    return Document(
        api_version=_string_field(raw, "apiVersion", ""),
        kind=_string_field(raw, "kind", ""),
        metadata=extract_metadata(raw.get("metadata")),
    )

