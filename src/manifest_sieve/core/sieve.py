"""Decode, filter and re-encode the documents of a manifest file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from manifest_sieve.core.decoder import iter_documents
from manifest_sieve.core.encoder import encode_document
from manifest_sieve.core.filtering import should_skip
from manifest_sieve.models import FilterCriteria, SievedDocument
from manifest_sieve.models.errors import SieveError
from manifest_sieve.utils.manifest_parser import extract_document

logger = logging.getLogger(__name__)


def sieve(path: str | Path, criteria: FilterCriteria | None = None) -> Iterator[SievedDocument]:
    """Yield the documents of ``path`` that survive ``criteria``, in order.

    Errors are raised at the point they occur; anything yielded before
    stays valid.
    """
    criteria = criteria or FilterCriteria()
    pattern = criteria.pattern
    if criteria.is_empty:
        logger.debug("No filter given, keeping every document of %s", path)
    else:
        logger.debug("Filtering %s with %s", path, criteria)

    kept = skipped = 0
    for index, raw in enumerate(iter_documents(path)):
        try:
            document = extract_document(raw)
            text = encode_document(raw)
        except SieveError as exc:
            exc.path = exc.path or str(path)
            exc.index = index if exc.index is None else exc.index
            raise

        if should_skip(pattern, document, criteria.search, text):
            skipped += 1
            continue
        kept += 1
        yield SievedDocument(index=index, document=document, raw=raw, text=text)

    logger.debug("Done with %s: %d kept, %d skipped", path, kept, skipped)
