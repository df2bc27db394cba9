"""Impact command: forecast the risk of editing one file."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import CognitiveDebtError
from ..formatters import get_formatter
from ..impact import analyze_change_impact
from ..logging_config import setup_logging
from . import app
from ._common import CONFIG_HELP, fail, resolve_config


@app.command()
def impact(
    file: Path = typer.Argument(..., help="File you are about to change"),
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        "-r",
        help="Project root scanned for dependents (default: current directory)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    json_output: bool = typer.Option(False, "--json", help="Output in machine-readable JSON format"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Show how risky it is to change FILE.

    Combines the file's cognitive debt score with how many project files
    import it.

    [bold cyan]Examples:[/bold cyan]

      cognitive-debt impact src/utils/date.js

      cognitive-debt impact lib/core.ts --root lib --json
    """
    logger = setup_logging(verbose=verbose)

    try:
        scoring_config = resolve_config(config)
        report = analyze_change_impact(file, scoring_config, project_root=root)
    except CognitiveDebtError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        raise fail(str(e))

    get_formatter("json" if json_output else "text", scoring_config).render_impact(report)
