"""Snapshot comparator: per-file and aggregate deltas between two states.

Results are matched by relative path. Only successful analyses take part;
a file that failed in either snapshot is treated as absent there.

Score convention for unmatched files:
  - a new file costs its whole score (delta = -score)
  - a deleted file gains its whole score back (delta = +score)

The aggregate ``score`` row books score points under the same convention
(before -> after):
  - modified: base score -> target score
  - new: score -> 0
  - deleted: 0 -> score
Its delta is the sum of per-file deltas; its sign is the trend ``status``.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..math import round_half_up
from ..models import AnalysisResult, MetricSet
from .models import (
    DEGRADED,
    DELETED,
    IMPROVED,
    MODIFIED,
    NEW,
    UNCHANGED,
    DiffResult,
    FileDiff,
    MetricTotals,
)

_EMPTY = MetricSet()

AGGREGATE_METRICS = (
    "score",
    "function_length",
    "nesting_depth",
    "parameter_count",
    "dependencies",
    "loc",
)


def compare_results(
    base_results: Sequence[AnalysisResult],
    target_results: Sequence[AnalysisResult],
) -> DiffResult:
    """Compare two snapshots whose ``file_path`` values are relative paths."""
    pairs: dict[str, list[Optional[AnalysisResult]]] = {}
    for r in base_results:
        if r.success:
            pairs[r.file_path] = [r, None]
    for r in target_results:
        if r.success:
            pairs.setdefault(r.file_path, [None, None])[1] = r

    diff = DiffResult(metrics={name: MetricTotals() for name in AGGREGATE_METRICS})
    for path, (base, target) in pairs.items():
        if base is not None and target is not None:
            entry = file_diff(path, base, target)
            if entry is None:
                continue
            diff.modified_files += 1
            diff.metrics["score"].add(base.score, target.score)
            _accumulate(diff.metrics, base.metrics, target.metrics, base.line_count, target.line_count)
        elif target is not None:
            entry = FileDiff(
                file=path,
                status=NEW,
                delta_score=-target.score,
                change_percent=100,
                reasons=("New file added",),
            )
            diff.new_files += 1
            diff.metrics["score"].add(target.score, 0)
            _accumulate(diff.metrics, _EMPTY, target.metrics, 0, target.line_count)
        else:
            entry = FileDiff(
                file=path,
                status=DELETED,
                delta_score=base.score,
                change_percent=0,
                reasons=("File deleted",),
            )
            diff.deleted_files += 1
            diff.metrics["score"].add(0, base.score)
            _accumulate(diff.metrics, base.metrics, _EMPTY, base.line_count, 0)

        diff.files.append(entry)

    score = diff.metrics["score"]
    if score.before > 0:
        diff.overall_change_percent = round_half_up(score.delta / score.before * 100)

    if score.delta < 0:
        diff.status = DEGRADED
    elif score.delta > 0:
        diff.status = IMPROVED
    else:
        diff.status = UNCHANGED

    diff.files.sort(key=lambda f: f.delta_score)
    return diff


def file_diff(path: str, base: AnalysisResult, target: AnalysisResult) -> Optional[FileDiff]:
    """Diff entry for a file present in both snapshots.

    Returns None when neither the score nor any tracked metric moved.
    """
    base_score = base.score
    delta_score = target.score - base_score
    reasons = change_reasons(base.metrics, target.metrics)

    if delta_score == 0 and not reasons:
        return None

    return FileDiff(
        file=path,
        status=MODIFIED,
        delta_score=delta_score,
        change_percent=round_half_up(delta_score / base_score * 100) if base_score > 0 else 0,
        reasons=tuple(reasons),
    )


def change_reasons(base: MetricSet, target: MetricSet) -> list[str]:
    """Human-readable explanations for metric regressions, each independent."""
    reasons = []

    length_delta = target.function_length.average_length - base.function_length.average_length
    if length_delta > 5:
        reasons.append(f"Avg function length increased (+{length_delta})")

    if target.nesting_depth.max_depth > base.nesting_depth.max_depth:
        reasons.append(f"Max nesting depth increased to {target.nesting_depth.max_depth}")

    if target.parameter_count.max_params > base.parameter_count.max_params:
        reasons.append("Parameter count increased")

    imports_delta = target.dependencies.total_imports - base.dependencies.total_imports
    if imports_delta > 2:
        reasons.append(f"Coupling increased (+{imports_delta} imports)")

    if target.naming_clarity.unclear_percent > base.naming_clarity.unclear_percent:
        reasons.append("Naming clarity degraded")

    return reasons


def _accumulate(
    totals: dict[str, MetricTotals],
    base: MetricSet,
    target: MetricSet,
    base_loc: int,
    target_loc: int,
) -> None:
    totals["loc"].add(base_loc, target_loc)
    totals["function_length"].add(
        base.function_length.average_length, target.function_length.average_length
    )
    # Summed per-file maxima: a trend indicator, not a depth
    totals["nesting_depth"].add(base.nesting_depth.max_depth, target.nesting_depth.max_depth)
    totals["parameter_count"].add(base.parameter_count.max_params, target.parameter_count.max_params)
    totals["dependencies"].add(base.dependencies.total_imports, target.dependencies.total_imports)
