"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="cognitive-debt",
    help="Cognitive Debt - readability scoring and change-risk analysis for JavaScript/TypeScript",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]Cognitive Debt[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Analyze JavaScript/TypeScript code and calculate Cognitive Debt scores."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .diff import diff as _diff  # noqa: F401, E402
from .impact import impact as _impact  # noqa: F401, E402


def main() -> None:
    app()


__all__ = ["app", "main"]
