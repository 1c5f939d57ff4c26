"""Shared CLI options."""

from __future__ import annotations

from typing import Optional

import typer

FileOption = typer.Option(None, "--file", "-f", help="YAML file to read")
NameOption = typer.Option("", "--name", help="Keep documents whose metadata.name matches")
NamespaceOption = typer.Option("", "--ns", "--namespace", "-n", help="Keep documents in this namespace")
KindOption = typer.Option("", "--kind", "-k", help="Keep documents of this kind")
SearchOption = typer.Option(
    "", "--search", "-s", help="Keep documents whose YAML text contains this string (overrides other filters)",
)
LabelOption = typer.Option(
    None, "--label", "-l", help="Label constraint KEY or KEY=VALUE (repeatable)",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log every keep/skip decision")
QuietOption = typer.Option(False, "--quiet", "-q", help="Only log critical errors")


def parse_labels(values: Optional[list[str]]) -> dict[str, str]:
    """Turn ``KEY`` / ``KEY=VALUE`` arguments into a label mapping."""
    labels: dict[str, str] = {}
    for item in values or []:
        key, _, value = item.partition("=")
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"invalid label '{item}', expected KEY or KEY=VALUE", param_hint="--label")
        labels[key] = value.strip()
    return labels
