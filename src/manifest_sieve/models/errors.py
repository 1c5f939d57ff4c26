"""Error taxonomy for reading, decoding and re-encoding manifests."""

from __future__ import annotations


class SieveError(Exception):
    """Base class for every fatal manifest error."""

    def __init__(self, message: str, path: str = "", index: int | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.index = index

    def __str__(self) -> str:
        where = self.path
        if self.index is not None:
            where = f"{where} (document {self.index})" if where else f"document {self.index}"
        return f"{where}: {self.message}" if where else self.message


class ManifestIOError(SieveError):
    """The input file does not exist or cannot be read."""


class DecodeError(SieveError):
    """Malformed YAML encountered mid-stream."""


class SchemaError(SieveError):
    """A decoded field has an unexpected shape."""


class EncodeError(SieveError):
    """An already-decoded document could not be serialized again."""
