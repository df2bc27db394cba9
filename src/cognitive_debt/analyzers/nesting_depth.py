"""Nesting depth analyzer.

Depth counts control-flow statements stacked inside each other. It is
measured per function: entering a function starts a fresh count, and the
enclosing function's count resumes when the inner function ends.
"""

from pathlib import Path
from typing import Any, Optional

from ..math import mean, round_half_up
from ..models import NestedFunction, NestingDepthMetrics
from ..parsing.traversal import ENTER, iter_events, start_line
from .functions import function_name, is_function

DEFAULT_MAX_DEPTH = 3

NESTING_TYPES = frozenset({
    "if_statement",
    "for_statement",
    "for_in_statement",  # also covers for-of
    "while_statement",
    "do_statement",
    "switch_statement",
    "try_statement",
})


class _FunctionContext:
    __slots__ = ("name", "line", "depth", "max_depth")

    def __init__(self, name: str, line: int) -> None:
        self.name = name
        self.line = line
        self.depth = 0
        self.max_depth = 0


def analyze(
    tree: Any, file_path: Optional[Path] = None, threshold: float = DEFAULT_MAX_DEPTH
) -> NestingDepthMetrics:
    """Compute maximum nesting depth for every function in ``tree``."""
    root = getattr(tree, "root_node", tree)

    # The bottom context stands for module level and is never reported
    stack = [_FunctionContext("<module>", 0)]
    recorded: list[NestedFunction] = []

    for event, node in iter_events(root):
        if is_function(node):
            if event == ENTER:
                stack.append(_FunctionContext(function_name(node), start_line(node)))
            else:
                ctx = stack.pop()
                recorded.append(NestedFunction(name=ctx.name, line=ctx.line, depth=ctx.max_depth))
        elif node.type in NESTING_TYPES:
            ctx = stack[-1]
            if event == ENTER:
                ctx.depth += 1
                ctx.max_depth = max(ctx.max_depth, ctx.depth)
            else:
                ctx.depth -= 1

    depths = [f.depth for f in recorded]
    return NestingDepthMetrics(
        total_functions=len(recorded),
        average_depth=round_half_up(mean(depths), 1) if depths else 0.0,
        max_depth=max(depths, default=0),
        deeply_nested_functions=tuple(f for f in recorded if f.depth > threshold),
    )
