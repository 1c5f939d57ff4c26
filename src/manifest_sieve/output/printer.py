"""Plain-text YAML dump output."""

from __future__ import annotations

import typer

from manifest_sieve.config.settings import settings


def format_document(text: str, banner: str | None = None) -> str:
    """Return the banner, the document text and a blank separator line."""
    banner = settings.banner if banner is None else banner
    return f"{banner}\n{text}\n"


def print_document(text: str, banner: str | None = None) -> None:
    typer.echo(format_document(text, banner))
