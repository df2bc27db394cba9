"""Parameter count analyzer.

Functions that take many parameters are hard to call correctly and often do
too much.
"""

from pathlib import Path
from typing import Any, Optional

from ..math import mean, round_half_up
from ..models import FunctionSignature, ParameterCountMetrics
from ..parsing.traversal import iter_nodes, start_line
from .functions import function_name, is_function, parameter_nodes

DEFAULT_MAX_PARAMS = 4


def analyze(
    tree: Any, file_path: Optional[Path] = None, threshold: float = DEFAULT_MAX_PARAMS
) -> ParameterCountMetrics:
    root = getattr(tree, "root_node", tree)
    signatures = [
        FunctionSignature(
            name=function_name(node),
            line=start_line(node),
            param_count=len(parameter_nodes(node)),
        )
        for node in iter_nodes(root)
        if is_function(node)
    ]

    counts = [s.param_count for s in signatures]
    return ParameterCountMetrics(
        total_functions=len(signatures),
        average_params=round_half_up(mean(counts), 1) if counts else 0.0,
        max_params=max(counts, default=0),
        functions_with_too_many_params=tuple(s for s in signatures if s.param_count > threshold),
    )
