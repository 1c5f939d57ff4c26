"""Keep/skip decision for a single decoded document."""

from __future__ import annotations

import logging
from typing import Any

import yaml

from manifest_sieve.models import Document

logger = logging.getLogger(__name__)


def _label_matches(actual: Any, wanted: str) -> bool:
    """Compare a decoded label value with its command-line text.

    Non-string values are compared after reading ``wanted`` as a YAML scalar,
    so ``true`` matches a boolean label and ``80`` an integer one.
    """
    if isinstance(actual, str):
        return actual == wanted
    try:
        parsed = yaml.safe_load(wanted)
    except yaml.YAMLError:
        return False
    return type(parsed) is type(actual) and parsed == actual


def _label_mismatch(wanted: dict[str, Any], actual: dict[str, Any]) -> str | None:
    for key, value in wanted.items():
        if key not in actual:
            return f"label {key} missing"
        if value not in (None, "") and not _label_matches(actual[key], str(value)):
            return f"label {key}={actual[key]!r} != {value!r}"
    return None


def should_skip(
    pattern: Document | None,
    document: Document,
    search: str = "",
    text: str = "",
) -> bool:
    """Decide whether ``document`` is dropped from the output.

    A non-empty ``search`` found in ``text`` keeps the document no matter
    what ``pattern`` says. Empty pattern fields do not constrain.
    """
    if search and search in text:
        logger.debug("Keeping %s: matched search %r", document.describe(), search)
        return False
    if pattern is None:
        return False

    checks = (
        ("kind", pattern.kind, document.kind),
        ("name", pattern.name, document.name),
        ("namespace", pattern.namespace, document.namespace),
    )
    for field_name, wanted, actual in checks:
        if wanted and actual != wanted:
            logger.debug("Skipping %s: %s %r != %r", document.describe(), field_name, actual, wanted)
            return True

    reason = _label_mismatch(pattern.labels, document.labels)
    if reason:
        logger.debug("Skipping %s: %s", document.describe(), reason)
        return True
    return False
