"""Serialize decoded documents back to YAML text."""

from __future__ import annotations

from typing import Any

import yaml

from manifest_sieve.config.settings import settings
from manifest_sieve.models.errors import EncodeError


def encode_document(raw: dict[str, Any]) -> str:
    """Dump a decoded document, keeping its key order."""
    try:
        return yaml.safe_dump(
            raw,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            indent=settings.yaml_indent,
            width=settings.yaml_width,
        )
    except yaml.YAMLError as exc:
        raise EncodeError(str(exc)) from exc
