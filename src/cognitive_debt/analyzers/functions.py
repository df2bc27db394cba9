"""Function-like node helpers shared by the function-oriented analyzers.

Covers declarations, expressions, arrows, generators, and class/object
methods in the javascript, typescript and tsx grammars. Signature-only
declarations (overloads, interface members) have no body and are not
treated as functions.
"""

from __future__ import annotations

from typing import Any

from ..parsing.traversal import node_text, string_value

FUNCTION_TYPES = frozenset({
    "function_declaration",
    "generator_function_declaration",
    "function_expression",
    "function",  # function expressions in older grammar releases
    "generator_function",
    "arrow_function",
    "method_definition",
})

# Non-method functions: the ones whose parameters are checked for naming
PLAIN_FUNCTION_TYPES = FUNCTION_TYPES - {"method_definition"}

DECLARATION_TYPES = frozenset({"function_declaration", "generator_function_declaration"})

# Parents whose key names an anonymous function assigned to them
_KEYED_PARENTS = {
    "pair": "key",
    "public_field_definition": "name",
    "field_definition": "property",
}

ANONYMOUS = "anonymous"


def is_function(node: Any) -> bool:
    return node.is_named and node.type in FUNCTION_TYPES


def function_name(node: Any) -> str:
    """Resolve a display name for a function node.

    Order: the function's own name, the variable it is bound to, the
    property or key it is assigned to, else ``"anonymous"``.
    """
    own = node.child_by_field_name("name")
    if own is not None:
        return _key_text(own)

    parent = node.parent
    if parent is None:
        return ANONYMOUS

    if parent.type == "variable_declarator":
        target = parent.child_by_field_name("name")
        if target is not None and target.type == "identifier":
            return node_text(target)

    key_field = _KEYED_PARENTS.get(parent.type)
    if key_field is not None:
        key = parent.child_by_field_name(key_field)
        if key is not None:
            return _key_text(key)

    return ANONYMOUS


def parameter_nodes(node: Any) -> list[Any]:
    """Declared parameter nodes of a function, in source order."""
    params = node.child_by_field_name("parameters")
    if params is None:
        # Arrow function with a single bare parameter: x => x * 2
        single = node.child_by_field_name("parameter")
        return [single] if single is not None else []
    return [child for child in params.named_children if child.type != "comment"]


def _key_text(node: Any) -> str:
    if node.type == "string":
        return string_value(node)
    if node.type == "computed_property_name":
        inner = node.named_children
        return node_text(inner[0]) if inner else node_text(node)
    return node_text(node)
