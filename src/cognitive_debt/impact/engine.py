"""Change impact forecast for a single file.

Unlike directory analysis, a target file that cannot be parsed is fatal
here: there is nothing meaningful to forecast.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..analysis import analyze_file
from ..config import ScoringConfig
from ..exceptions import AnalysisError, InvalidPathError
from ..logging_config import get_logger
from ..models import ImpactReport
from ..parsing import SourceParser
from .risk import calculate_risk
from .scanner import find_dependents

logger = get_logger(__name__)


def analyze_change_impact(
    file_path: Path,
    config: ScoringConfig,
    project_root: Optional[Path] = None,
) -> ImpactReport:
    """Score ``file_path``, count its dependents and assess editing risk.

    Args:
        file_path: Target file
        config: Scoring configuration
        project_root: Tree scanned for dependents (defaults to the cwd)

    Raises:
        InvalidPathError: If the target or project root does not exist
        AnalysisError: If the target cannot be read or parsed
    """
    target = Path(os.path.abspath(file_path))
    root = Path(os.path.abspath(project_root or Path.cwd()))

    if not target.is_file():
        raise InvalidPathError(target, "file not found")
    if not root.is_dir():
        raise InvalidPathError(root, "project root is not a directory")

    parser = SourceParser()
    analysis = analyze_file(target, config, parser)
    if not analysis.success:
        raise AnalysisError(analysis.error or f"Failed to analyze {target}")

    scan = find_dependents(target, root, parser)
    risk = calculate_risk(analysis.score, scan.fan_in, analysis.metrics)
    logger.info("%s: fan-in %d, risk %s", target, scan.fan_in, risk.level)

    return ImpactReport(
        target=str(target),
        relative_path=os.path.relpath(target, root),
        analysis=analysis,
        fan_in=scan.fan_in,
        dependents=scan.dependents,
        risk=risk,
    )
