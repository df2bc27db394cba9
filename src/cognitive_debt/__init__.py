"""
Cognitive Debt - readability scoring for JavaScript/TypeScript

Scores how hard source files are for a human to understand, from five
structural metrics: function length, nesting depth, parameter count, naming
clarity and local coupling. Builds on that score to forecast the risk of
changing a file and to compare debt between two states of a codebase.
"""

__version__ = "0.3.0"

from .analysis import analyze_directory, analyze_file, analyze_path, summarize
from .config import DEFAULT_CONFIG, ScoringConfig, load_config
from .diff import DiffResult, run_diff
from .impact import analyze_change_impact
from .models import AnalysisResult, ImpactReport, MetricSet, ScoreData

__all__ = [
    "analyze_file",  # Main entry point
    "analyze_directory",
    "analyze_path",
    "analyze_change_impact",
    "run_diff",
    "summarize",
    "load_config",
    "DEFAULT_CONFIG",
    "ScoringConfig",
    "AnalysisResult",
    "DiffResult",
    "ImpactReport",
    "MetricSet",
    "ScoreData",
]
