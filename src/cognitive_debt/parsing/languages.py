"""Source language detection and source-file discovery.

Discovery walks a directory tree in sorted name order so that results are
reproducible across runs and platforms.
"""

import os
from pathlib import Path
from typing import Iterator

# Extensions collected when walking a directory tree
SOURCE_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")

# Extension -> tree-sitter grammar name
GRAMMAR_BY_EXTENSION = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
}

# Dependency cache directories never descended into (hidden dirs are skipped too)
SKIP_DIRS = frozenset({"node_modules", "bower_components", "jspm_packages"})


def detect_language(path: Path) -> str:
    """Return the grammar name for ``path``, defaulting to javascript."""
    return GRAMMAR_BY_EXTENSION.get(Path(path).suffix.lower(), "javascript")


def is_source_file(path: Path) -> bool:
    return Path(path).suffix.lower() in SOURCE_EXTENSIONS


def should_skip_dir(name: str) -> bool:
    return name in SKIP_DIRS or name.startswith(".")


def iter_source_files(root: Path) -> Iterator[Path]:
    """Yield source files under ``root`` depth-first in sorted name order.

    Directories named in SKIP_DIRS or starting with ``.`` are not entered.
    Symlinked directories are not followed.
    """
    try:
        entries = sorted(os.scandir(root), key=lambda e: e.name)
    except OSError:
        return

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            if not should_skip_dir(entry.name):
                yield from iter_source_files(Path(entry.path))
        elif entry.is_file() and is_source_file(Path(entry.name)):
            yield Path(entry.path)
