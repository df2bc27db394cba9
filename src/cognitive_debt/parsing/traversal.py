"""Iterative syntax-tree traversal.

Trees for long expression chains can be thousands of levels deep, so walks
use an explicit stack instead of recursion.
"""

from __future__ import annotations

from typing import Any, Iterator

ENTER = "enter"
EXIT = "exit"


def iter_nodes(root: Any) -> Iterator[Any]:
    """Yield named nodes in depth-first pre-order (source order)."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_named:
            yield node
        stack.extend(reversed(node.children))


def iter_events(root: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(ENTER, node)`` and ``(EXIT, node)`` for every named node.

    Children are entered and exited between their parent's ENTER and EXIT.
    """
    stack: list[tuple[str, Any]] = [(ENTER, root)]
    while stack:
        event, node = stack.pop()
        if event == EXIT:
            yield EXIT, node
            continue
        if not node.is_named:
            continue
        yield ENTER, node
        stack.append((EXIT, node))
        for child in reversed(node.children):
            stack.append((ENTER, child))


def iter_ancestors(node: Any) -> Iterator[Any]:
    parent = node.parent
    while parent is not None:
        yield parent
        parent = parent.parent


def node_text(node: Any) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def start_line(node: Any) -> int:
    """1-based start line."""
    return node.start_point[0] + 1


def end_line(node: Any) -> int:
    """1-based end line."""
    return node.end_point[0] + 1


def string_value(node: Any) -> str:
    """Value of a string literal node, without its quotes."""
    text = node_text(node)
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"`":
        return text[1:-1]
    return text
