"""Naming clarity analyzer.

Flags declared names that do not explain themselves:
- single letters, except ``i``/``j``/``k`` inside a loop and ``x``/``y``/``e``
  anywhere (coordinates and event handlers)
- long all-lowercase names with no word separators (``userdata``)
- common terse abbreviations (``tmp``, ``cfg``, ``mgr`` ...)

Variables, function declaration names and parameters of non-method
functions are checked.
"""

import re
from pathlib import Path
from typing import Any, Iterator, Optional

from ..math import round_half_up
from ..models import NamingClarityMetrics, UnclearName
from ..parsing.traversal import iter_ancestors, iter_nodes, node_text, start_line
from .functions import DECLARATION_TYPES, PLAIN_FUNCTION_TYPES, parameter_nodes

MAX_REPORTED = 10

LOOP_COUNTERS = frozenset({"i", "j", "k"})
ALWAYS_ALLOWED = frozenset({"x", "y", "e"})
LOOP_TYPES = frozenset({"for_statement", "for_in_statement"})

UNCLEAR_ABBREVIATIONS = frozenset({
    "tmp", "temp", "usr", "btn", "str", "num", "obj", "arr",
    "val", "res", "req", "ctx", "cfg", "mgr", "svc", "util",
})

# Lowercase letters only, no camelCase/underscore separators
_RUN_ON_NAME = re.compile(r"^[a-z]{8,}$")

SINGLE_LETTER = "Single letter name"
RUN_ON_NAME = "Long lowercase name without separators"
ABBREVIATION = "Unclear abbreviation"


def is_allowed_short_name(name: str, in_loop: bool = False) -> bool:
    if name in LOOP_COUNTERS and in_loop:
        return True
    return name in ALWAYS_ALLOWED


def unclear_reason(name: str, in_loop: bool = False) -> Optional[str]:
    """Why ``name`` is unclear, or None if it reads fine."""
    if is_allowed_short_name(name, in_loop):
        return None
    if len(name) == 1:
        return SINGLE_LETTER
    if _RUN_ON_NAME.match(name):
        return RUN_ON_NAME
    if name.lower() in UNCLEAR_ABBREVIATIONS:
        return ABBREVIATION
    return None


def is_unclear(name: str, in_loop: bool = False) -> bool:
    """Return True if ``name`` is unclear.

    Args:
        name: Identifier text
        in_loop: Whether the declaration sits inside a for/for-in/for-of loop
    """
    return unclear_reason(name, in_loop) is not None


def analyze(tree: Any, file_path: Optional[Path] = None) -> NamingClarityMetrics:
    root = getattr(tree, "root_node", tree)

    total = 0
    unclear: list[UnclearName] = []
    for ident, kind in _iter_declared_names(root):
        total += 1
        name = node_text(ident)
        reason = unclear_reason(name, _inside_loop(ident))
        if reason is not None:
            unclear.append(UnclearName(name=name, line=start_line(ident), kind=kind, reason=reason))

    return NamingClarityMetrics(
        total_identifiers=total,
        unclear_count=len(unclear),
        unclear_percent=round_half_up(len(unclear) / total * 100) if total else 0,
        unclear_names=tuple(unclear[:MAX_REPORTED]),
    )


def _iter_declared_names(root: Any) -> Iterator[tuple[Any, str]]:
    """Yield ``(identifier_node, kind)`` in source order."""
    for node in iter_nodes(root):
        if node.type == "variable_declarator":
            target = node.child_by_field_name("name")
            if target is not None and target.type == "identifier":
                yield target, "variable"

        elif node.type == "for_in_statement" and node.child_by_field_name("kind") is not None:
            # for (const item of items) declares item
            target = node.child_by_field_name("left")
            if target is not None and target.type == "identifier":
                yield target, "variable"

        elif node.type in PLAIN_FUNCTION_TYPES:
            if node.type in DECLARATION_TYPES:
                name = node.child_by_field_name("name")
                if name is not None:
                    yield name, "function"
            for param in parameter_nodes(node):
                ident = _plain_parameter_identifier(param)
                if ident is not None:
                    yield ident, "parameter"


def _plain_parameter_identifier(param: Any) -> Optional[Any]:
    """The identifier of a simple named parameter.

    Destructured, defaulted and rest parameters are not simple names.
    """
    if param.type == "identifier":
        return param
    if param.type in ("required_parameter", "optional_parameter"):
        if param.child_by_field_name("value") is not None:
            return None
        pattern = param.child_by_field_name("pattern")
        if pattern is not None and pattern.type == "identifier":
            return pattern
    return None


def _inside_loop(node: Any) -> bool:
    return any(a.type in LOOP_TYPES for a in iter_ancestors(node))
