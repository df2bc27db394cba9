"""Analysis engine: parse -> analyzers -> score, for a file or a tree.

Directory analysis is sequential and follows discovery order, so repeated
runs over the same tree produce identical, identically ordered results.
A file that cannot be read or parsed becomes a failure record; it never
aborts the batch.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from .. import analyzers
from ..config import ScoringConfig
from ..exceptions import FileAccessError, InvalidPathError, ParsingError
from ..logging_config import get_logger
from ..math import mean, round_half_up
from ..models import AnalysisResult, AnalysisSummary, MetricSet
from ..parsing import ParsedSource, SourceParser, iter_source_files
from ..scoring import POOR, calculate_score

logger = get_logger(__name__)


def collect_metrics(source: ParsedSource, config: ScoringConfig) -> MetricSet:
    """Run all five analyzers over one parsed file."""
    t = config.thresholds
    tree = source.tree
    return MetricSet(
        function_length=analyzers.function_length.analyze(tree, source.path, t.function_length),
        nesting_depth=analyzers.nesting_depth.analyze(tree, source.path, t.nesting_depth),
        parameter_count=analyzers.parameter_count.analyze(tree, source.path, t.parameter_count),
        naming_clarity=analyzers.naming_clarity.analyze(tree, source.path),
        dependencies=analyzers.dependencies.analyze(tree, source.path, t.max_local_imports),
    )


def analyze_file(
    file_path: Path,
    config: ScoringConfig,
    parser: Optional[SourceParser] = None,
) -> AnalysisResult:
    """Analyze a single file.

    Returns:
        AnalysisResult with metrics and score, or a failure record whose
        ``error`` tells a missing file, a syntax error and other I/O
        failures apart.
    """
    parser = parser or SourceParser()
    path_str = str(file_path)

    try:
        source = parser.parse_file(Path(file_path))
    except FileAccessError as e:
        if e.not_found:
            return AnalysisResult.failed(path_str, f"File not found: {path_str}")
        return AnalysisResult.failed(path_str, f"Failed to read {path_str}: {e.reason}")
    except ParsingError as e:
        return AnalysisResult.failed(path_str, f"Syntax error in {path_str}: {e.reason}")

    metrics = collect_metrics(source, config)
    score_data = calculate_score(metrics, config)
    return AnalysisResult.ok(path_str, metrics, score_data, source.line_count)


def analyze_directory(
    dir_path: Path,
    config: ScoringConfig,
    parser: Optional[SourceParser] = None,
) -> list[AnalysisResult]:
    """Analyze every source file under ``dir_path`` in discovery order."""
    dir_path = Path(dir_path)
    if not dir_path.is_dir():
        raise InvalidPathError(dir_path, "not a directory")

    parser = parser or SourceParser()
    results = []
    for file_path in iter_source_files(dir_path):
        result = analyze_file(file_path, config, parser)
        if not result.success:
            logger.debug("Skipping %s: %s", file_path, result.error)
        results.append(result)

    logger.info(
        "Analyzed %d files under %s (%d failed)",
        len(results),
        dir_path,
        sum(1 for r in results if not r.success),
    )
    return results


def analyze_path(path: Path, config: ScoringConfig) -> list[AnalysisResult]:
    """Analyze a file or a directory tree.

    Raises:
        InvalidPathError: If ``path`` does not exist
    """
    path = Path(path)
    if not path.exists():
        raise InvalidPathError(path, "path not found")
    if path.is_dir():
        return analyze_directory(path, config)
    return [analyze_file(path, config)]


def summarize(results: Iterable[AnalysisResult]) -> AnalysisSummary:
    """Aggregate a batch: count, failures, average score, Poor-graded files."""
    results = list(results)
    succeeded = [r for r in results if r.success]
    return AnalysisSummary(
        files_analyzed=len(succeeded),
        failed_files=len(results) - len(succeeded),
        average_score=round_half_up(mean([r.score for r in succeeded])) if succeeded else 0,
        poor_files=tuple(
            r.file_path for r in succeeded if r.score_data and r.score_data.grade == POOR
        ),
    )
