"""Application configuration, defaults and logging setup."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

err_console = Console(stderr=True)


@dataclass
class Settings:
    banner: str = "--- yaml dump:"
    yaml_indent: int = 2
    yaml_width: int = 4096
    logger_name: str = "manifest_sieve"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records through rich on stderr.

    Standard output carries only the YAML dump, so logs never go there.
    """
    logging.basicConfig(
        level="NOTSET",
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    logging.getLogger("").setLevel(logging.CRITICAL)
    level = logging.DEBUG if verbose else logging.CRITICAL if quiet else logging.WARNING
    logging.getLogger(settings.logger_name).setLevel(level)


# Global singleton
settings = Settings()
