"""Analyze command: score files and directories."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis import analyze_path, summarize
from ..exceptions import CognitiveDebtError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import CONFIG_HELP, console, fail, resolve_config

OUTPUT_FORMATS = ("text", "json")


@app.command()
def analyze(
    path: Path = typer.Argument(..., help="File or directory to analyze"),
    output_format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text or json",
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Score a file or every source file under a directory.

    Exits with status 1 when any file grades Poor or cannot be analyzed.

    [bold cyan]Examples:[/bold cyan]

      cognitive-debt analyze src/app.js

      cognitive-debt analyze src --format json
    """
    logger = setup_logging(verbose=verbose)

    if output_format not in OUTPUT_FORMATS:
        raise fail(f"Invalid format '{output_format}'. Use 'text' or 'json'.")

    try:
        scoring_config = resolve_config(config)
        results = analyze_path(path, scoring_config)
    except CognitiveDebtError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        raise fail(str(e))
    except KeyboardInterrupt:
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    if not results:
        console.print(f"[yellow]No JavaScript/TypeScript files found under {path}[/yellow]")
        return

    get_formatter(output_format, scoring_config).render_analysis(results)

    summary = summarize(results)
    if summary.poor_files or summary.failed_files:
        raise typer.Exit(1)
