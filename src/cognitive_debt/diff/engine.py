"""Diff orchestration: resolve inputs, analyze both states, compare.

Two invocation modes:
    base..target   git refs of the repository at ``repo_path`` (default cwd)
    dir1 dir2      two directories on disk
"""

from __future__ import annotations

import os
from contextlib import ExitStack
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Sequence

from ..analysis import analyze_directory
from ..config import ScoringConfig
from ..exceptions import ConfigurationError, InvalidPathError, InvalidRefError
from ..logging_config import get_logger
from ..models import AnalysisResult
from ..parsing import SourceParser
from .comparator import compare_results
from .git import GitExporter
from .models import DiffResult

logger = get_logger(__name__)

GIT_MODE = "git"
DIRECTORY_MODE = "directory"

USAGE = "Invalid usage. Use 'base..target' or 'dir1 dir2'."


@dataclass(frozen=True)
class DiffInputs:
    mode: str
    base: str
    target: str


def resolve_diff_inputs(args: Sequence[str]) -> DiffInputs:
    """Work out the diff mode from positional arguments.

    Raises:
        ConfigurationError: On any other argument shape
    """
    if len(args) == 1 and ".." in args[0]:
        base, _, target = args[0].partition("..")
        if not base or not target:
            raise ConfigurationError(USAGE, details={"argument": args[0]})
        return DiffInputs(GIT_MODE, base, target)
    if len(args) == 2:
        return DiffInputs(DIRECTORY_MODE, args[0], args[1])
    raise ConfigurationError(USAGE)


def run_diff(
    args: Sequence[str],
    config: ScoringConfig,
    repo_path: Optional[Path] = None,
    exporter: Optional[GitExporter] = None,
) -> DiffResult:
    """Compare two code states.

    Raises:
        ConfigurationError: Bad arguments, missing directories, invalid refs
        ExternalProcessError: If git fails while exporting
    """
    inputs = resolve_diff_inputs(args)

    if inputs.mode == DIRECTORY_MODE:
        base_dir = Path(inputs.base).resolve()
        target_dir = Path(inputs.target).resolve()
        for d in (base_dir, target_dir):
            if not d.is_dir():
                raise InvalidPathError(d, "directory not found")
        return compare_directories(base_dir, target_dir, config)

    exporter = exporter or GitExporter(repo_path or Path.cwd())
    exporter.ensure_repository()
    for ref in (inputs.base, inputs.target):
        if not exporter.is_valid_ref(ref):
            raise InvalidRefError(ref, exporter.repo_path)

    logger.info("Exporting %s and %s for analysis", inputs.base, inputs.target)
    with ExitStack() as stack:
        base_dir = stack.enter_context(exporter.exported_ref(inputs.base))
        target_dir = stack.enter_context(exporter.exported_ref(inputs.target))
        return compare_directories(base_dir, target_dir, config)


def compare_directories(base_dir: Path, target_dir: Path, config: ScoringConfig) -> DiffResult:
    parser = SourceParser()
    logger.info("Analyzing base state %s", base_dir)
    base_results = relativize(analyze_directory(base_dir, config, parser), base_dir)
    logger.info("Analyzing target state %s", target_dir)
    target_results = relativize(analyze_directory(target_dir, config, parser), target_dir)
    return compare_results(base_results, target_results)


def relativize(results: Sequence[AnalysisResult], root: Path) -> list[AnalysisResult]:
    """Copies of ``results`` with paths relative to ``root``."""
    return [replace(r, file_path=os.path.relpath(r.file_path, root)) for r in results]
