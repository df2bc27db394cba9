"""File and directory analysis."""

from .engine import analyze_directory, analyze_file, analyze_path, collect_metrics, summarize
from .issues import collect_top_issues

__all__ = [
    "analyze_directory",
    "analyze_file",
    "analyze_path",
    "collect_metrics",
    "collect_top_issues",
    "summarize",
]
