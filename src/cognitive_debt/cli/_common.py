"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import ScoringConfig, load_config

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

CONFIG_HELP = "Scoring configuration file (TOML, or JSON with a .json suffix)"


def resolve_config(config: Optional[Path] = None) -> ScoringConfig:
    """Load the scoring configuration named on the command line, or the defaults."""
    return load_config(config)


def fail(message: str, code: int = 1) -> typer.Exit:
    """Print an error line on stderr and return the Exit to raise."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(code)
