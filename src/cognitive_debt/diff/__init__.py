"""Snapshot diffing between two code states."""

from .comparator import change_reasons, compare_results, file_diff
from .engine import (
    DIRECTORY_MODE,
    GIT_MODE,
    DiffInputs,
    compare_directories,
    relativize,
    resolve_diff_inputs,
    run_diff,
)
from .git import GitExporter
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

__all__ = [
    "DEGRADED",
    "DELETED",
    "IMPROVED",
    "MODIFIED",
    "NEW",
    "UNCHANGED",
    "DiffResult",
    "FileDiff",
    "MetricTotals",
    "DiffInputs",
    "GitExporter",
    "GIT_MODE",
    "DIRECTORY_MODE",
    "change_reasons",
    "compare_directories",
    "compare_results",
    "file_diff",
    "relativize",
    "resolve_diff_inputs",
    "run_diff",
]
