"""Dependencies analyzer.

Counts ES module imports and ``require('...')`` calls with a literal string
argument. A source starting with ``./`` or ``../`` is local to the project;
anything else is external. Many local imports mean tight coupling.
"""

from pathlib import Path
from typing import Any, Iterator, Optional

from ..models import DependencyMetrics, ImportRef
from ..parsing.traversal import iter_nodes, node_text, start_line, string_value

DEFAULT_MAX_LOCAL_IMPORTS = 10


def is_local_import(source: str) -> bool:
    return source.startswith("./") or source.startswith("../")


def iter_module_references(root: Any) -> Iterator[ImportRef]:
    """Yield every import / literal require source in source order."""
    for node in iter_nodes(root):
        if node.type == "import_statement":
            source = node.child_by_field_name("source")
            if source is not None:
                yield ImportRef(source=string_value(source), line=start_line(node))

        elif node.type == "call_expression":
            callee = node.child_by_field_name("function")
            if callee is None or callee.type != "identifier" or node_text(callee) != "require":
                continue
            args = node.child_by_field_name("arguments")
            first = args.named_children[0] if args is not None and args.named_children else None
            if first is not None and first.type == "string":
                yield ImportRef(source=string_value(first), line=start_line(node))


def analyze(
    tree: Any,
    file_path: Optional[Path] = None,
    max_local_imports: float = DEFAULT_MAX_LOCAL_IMPORTS,
) -> DependencyMetrics:
    root = getattr(tree, "root_node", tree)

    local: list[ImportRef] = []
    external = 0
    for ref in iter_module_references(root):
        if is_local_import(ref.source):
            local.append(ref)
        else:
            external += 1

    return DependencyMetrics(
        total_imports=len(local) + external,
        local_imports=len(local),
        external_imports=external,
        high_coupling=len(local) > max_local_imports,
        local_imports_list=tuple(local),
    )
