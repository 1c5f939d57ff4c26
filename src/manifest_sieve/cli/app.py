"""Root Typer application."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.text import Text

from manifest_sieve import __version__
from manifest_sieve.cli.options import (
    FileOption,
    KindOption,
    LabelOption,
    NameOption,
    NamespaceOption,
    QuietOption,
    SearchOption,
    VerboseOption,
    parse_labels,
)
from manifest_sieve.config.settings import err_console, setup_logging
from manifest_sieve.core.sieve import sieve
from manifest_sieve.models import FilterCriteria
from manifest_sieve.models.errors import SieveError
from manifest_sieve.output.printer import print_document

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="msieve",
    help="Manifest Sieve - filter multi-document YAML by kind, name, namespace or text.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"msieve {__version__}")
        raise typer.Exit()


@app.command()
def run(
    file: Optional[str] = FileOption,
    name: str = NameOption,
    namespace: str = NamespaceOption,
    kind: str = KindOption,
    search: str = SearchOption,
    label: Optional[list[str]] = LabelOption,
    verbose: bool = VerboseOption,
    quiet: bool = QuietOption,
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit",
    ),
) -> None:
    """Print the documents of a YAML file that match the given filters."""
    setup_logging(verbose=verbose, quiet=quiet)
    if not file:
        logger.debug("No --file given, nothing to do")
        return

    criteria = FilterCriteria(
        kind=kind,
        name=name,
        namespace=namespace,
        labels=parse_labels(label),
        search=search,
    )
    try:
        for item in sieve(file, criteria):
            print_document(item.text)
    except SieveError as exc:
        logger.debug("Aborting on %s", type(exc).__name__, exc_info=True)
        err_console.print(Text.assemble((f"{type(exc).__name__}: ", "red bold"), str(exc)))
        raise typer.Exit(code=1)


def main() -> None:
    app()
