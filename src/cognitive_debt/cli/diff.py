"""Diff command: compare cognitive debt between two code states."""

import json
from pathlib import Path
from typing import List, Optional

import typer

from ..diff import run_diff
from ..exceptions import CognitiveDebtError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import CONFIG_HELP, console, fail, resolve_config


@app.command()
def diff(
    targets: List[str] = typer.Argument(
        ...,
        metavar="BASE..TARGET | DIR1 DIR2",
        help="Two git refs joined by '..', or two directories",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the diff as JSON to this file instead of printing it",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in machine-readable JSON format"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Compare two states of the code.

    Git mode exports both refs of the repository in the current directory
    into temporary directories, which are always removed afterwards.

    [bold cyan]Examples:[/bold cyan]

      cognitive-debt diff main..feature

      cognitive-debt diff ./v1 ./v2 --output diff.json
    """
    logger = setup_logging(verbose=verbose)

    try:
        scoring_config = resolve_config(config)
        result = run_diff(targets, scoring_config)
    except CognitiveDebtError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        raise fail(str(e))

    if output is not None:
        try:
            output.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            raise fail(f"Cannot write {output}: {e}")
        console.print(f"[green]Diff report written to {output}[/green]")
        return

    get_formatter("json" if json_output else "text", scoring_config).render_diff(result)
