"""Stream the documents of a multi-document YAML file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

import yaml

from manifest_sieve.models.errors import DecodeError, ManifestIOError, SchemaError

logger = logging.getLogger(__name__)

MERGE_TAG = "tag:yaml.org,2002:merge"


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a key repeated within one mapping."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                if key_node.tag == MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                except TypeError:
                    continue
                if duplicate:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def read_manifest(path: str | Path) -> bytes:
    """Read the whole file, raising ManifestIOError on failure."""
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as exc:
        raise ManifestIOError(exc.strerror or str(exc), path=str(path)) from exc


def decode_documents(data: bytes | str, source: str = "<stream>") -> Iterator[dict[str, Any]]:
    """Yield each non-empty document of a YAML stream as an ordered dict.

    Decoding is lazy: documents before a syntax error are yielded before
    DecodeError is raised. Empty documents between ``---`` markers are
    skipped. A key repeated within one mapping is a DecodeError.
    """
    index = 0
    loader = yaml.load_all(data, Loader=UniqueKeyLoader)
    while True:
        try:
            doc = next(loader)
        except StopIteration:
            break
        except yaml.YAMLError as exc:
            raise DecodeError(str(exc), path=source, index=index) from exc

        if doc is None:
            logger.debug("Skipping empty document in %s", source)
            continue
        if not isinstance(doc, dict):
            raise SchemaError(
                f"top-level value must be a mapping, got {type(doc).__name__}",
                path=source,
                index=index,
            )
        yield doc
        index += 1


def iter_documents(path: str | Path) -> Iterator[dict[str, Any]]:
    """Read ``path`` and yield its documents one at a time."""
    data = read_manifest(path)
    logger.debug("Read %d bytes from %s", len(data), path)
    yield from decode_documents(data, source=str(path))
