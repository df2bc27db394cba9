"""Tree-sitter parser adapter.

Turns source text into a syntax tree for the javascript, typescript and tsx
grammars. tree-sitter recovers from syntax errors by inserting ERROR and
missing nodes instead of failing; this adapter reports any such node as a
ParsingError so callers can decide whether a broken file is fatal.

Usage:
    parser = SourceParser()
    source = parser.parse_file(Path("src/app.ts"))
    source.tree.root_node, source.line_count
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import tree_sitter
import tree_sitter_javascript
import tree_sitter_typescript

from ..exceptions import FileAccessError, ParsingError
from ..logging_config import get_logger
from .languages import detect_language

logger = get_logger(__name__)

_GRAMMARS = {
    "javascript": tree_sitter_javascript.language,
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}


@lru_cache(maxsize=None)
def _language(name: str) -> tree_sitter.Language:
    return tree_sitter.Language(_GRAMMARS[name]())


def get_supported_languages() -> list[str]:
    return list(_GRAMMARS)


@dataclass
class ParsedSource:
    """One analyzable file and its syntax tree.

    The tree belongs to a single file's analysis and is not shared.
    """

    path: Path
    text: str
    line_count: int
    language: str
    tree: Any

    @property
    def root(self) -> Any:
        return self.tree.root_node


class SourceParser:
    """Parses javascript/typescript source into tree-sitter trees."""

    def __init__(self) -> None:
        self._parsers: dict[str, tree_sitter.Parser] = {}

    def _parser_for(self, language: str) -> tree_sitter.Parser:
        parser = self._parsers.get(language)
        if parser is None:
            parser = tree_sitter.Parser(_language(language))
            self._parsers[language] = parser
        return parser

    def parse_text(self, text: str, path: Path, language: Optional[str] = None) -> ParsedSource:
        """Parse source text.

        Args:
            text: Source code
            path: Path used for language detection and error messages
            language: Grammar name; detected from ``path`` when omitted

        Raises:
            ParsingError: If the tree contains syntax errors
        """
        language = language or detect_language(path)
        tree = self._parser_for(language).parse(text.encode("utf-8"))

        if tree.root_node.has_error:
            reason, line, column = _describe_error(tree.root_node)
            logger.debug("Syntax error in %s: %s", path, reason)
            raise ParsingError(path, language, reason, line=line, column=column)

        return ParsedSource(
            path=Path(path),
            text=text,
            line_count=len(text.split("\n")),
            language=language,
            tree=tree,
        )

    def parse_file(self, path: Path) -> ParsedSource:
        """Read and parse a source file.

        Raises:
            FileAccessError: If the file is missing or unreadable
            ParsingError: If the file has syntax errors
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise FileAccessError(path, str(e), not_found=True)
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(path, str(e))

        return self.parse_text(text, path)


def _describe_error(root: Any) -> tuple[str, int, int]:
    """Locate the first ERROR or missing node in source order."""
    for node in _iter_all(root):
        if node.type == "ERROR" or node.is_missing:
            line = node.start_point[0] + 1
            column = node.start_point[1] + 1
            if node.is_missing:
                return f"Missing '{node.type}' at line {line}, column {column}", line, column
            return f"Unexpected token at line {line}, column {column}", line, column
    return "Unparseable source", 1, 1


def _iter_all(root: Any):
    # Missing nodes can be anonymous tokens, so this walk includes them
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


__all__ = [
    "ParsedSource",
    "SourceParser",
    "get_supported_languages",
]
