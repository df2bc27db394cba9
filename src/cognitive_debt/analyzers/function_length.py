"""Function length analyzer.

Long functions are harder to read, test and change. Length is the number of
source lines a function spans, inclusive of its first and last line.
"""

from pathlib import Path
from typing import Any, Optional

from ..math import mean, round_half_up
from ..models import FunctionLengthMetrics, FunctionSpan
from ..parsing.traversal import end_line, iter_nodes, start_line
from .functions import function_name, is_function

DEFAULT_MAX_LENGTH = 50


def analyze(
    tree: Any, file_path: Optional[Path] = None, threshold: float = DEFAULT_MAX_LENGTH
) -> FunctionLengthMetrics:
    """Measure every function-like node in ``tree``.

    Args:
        tree: tree-sitter tree (or root node)
        file_path: File being analyzed (unused, kept for a uniform signature)
        threshold: Functions longer than this are listed as offenders
    """
    spans = [
        FunctionSpan(
            name=function_name(node),
            line=start_line(node),
            length=end_line(node) - start_line(node) + 1,
        )
        for node in iter_nodes(_root(tree))
        if is_function(node)
    ]

    lengths = [s.length for s in spans]
    return FunctionLengthMetrics(
        total_functions=len(spans),
        average_length=round_half_up(mean(lengths)) if lengths else 0,
        max_length=max(lengths, default=0),
        long_functions=tuple(s for s in spans if s.length > threshold),
    )


def _root(tree: Any) -> Any:
    return getattr(tree, "root_node", tree)
