"""Metric analyzers.

Each analyzer is a pure function of a syntax tree; none depends on
another's output.
"""

from . import dependencies, function_length, naming_clarity, nesting_depth, parameter_count
from .naming_clarity import is_unclear

__all__ = [
    "dependencies",
    "function_length",
    "naming_clarity",
    "nesting_depth",
    "parameter_count",
    "is_unclear",
]
