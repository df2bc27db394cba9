"""Fan-in scanner: which project files import a target file.

Relative import sources are resolved against the importing file's directory
and compared with the target's absolute path, trying the literal path and
then each source extension. Bare module names never refer to a project file.

Parsing here is tolerant: a file elsewhere in the tree that is unreadable or
has syntax errors is skipped, not reported.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..analyzers.dependencies import iter_module_references
from ..exceptions import AnalysisError
from ..logging_config import get_logger
from ..models import DependentScan
from ..parsing import SOURCE_EXTENSIONS, SourceParser, iter_source_files

logger = get_logger(__name__)

RESOLUTION_SUFFIXES: tuple[str, ...] = ("",) + SOURCE_EXTENSIONS


def find_dependents(
    target: Path,
    project_root: Path,
    parser: Optional[SourceParser] = None,
) -> DependentScan:
    """Scan ``project_root`` for files importing ``target``.

    Returns:
        DependentScan listing dependent absolute paths in discovery order
    """
    parser = parser or SourceParser()
    target_abs = _absolute(target)
    root = Path(_absolute(project_root))

    needles = {Path(target_abs).stem, Path(target_abs).name}

    dependents = []
    scanned = 0
    for candidate in iter_source_files(root):
        candidate_abs = _absolute(candidate)
        if candidate_abs == target_abs:
            continue
        scanned += 1
        if _imports_target(candidate_abs, target_abs, needles, parser):
            dependents.append(candidate_abs)

    logger.debug("Fan-in scan of %s: %d candidates, %d dependents", root, scanned, len(dependents))
    return DependentScan(target=target_abs, dependents=tuple(dependents))


def resolves_to(import_source: str, importer: str, target_abs: str) -> bool:
    """Return True if ``import_source`` written in ``importer`` names ``target_abs``."""
    if not import_source.startswith("."):
        return False
    base = os.path.normpath(os.path.join(os.path.dirname(importer), import_source))
    return any(base + suffix == target_abs for suffix in RESOLUTION_SUFFIXES)


def _imports_target(importer: str, target_abs: str, needles: set[str], parser: SourceParser) -> bool:
    try:
        text = Path(importer).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", importer, e)
        return False

    # Cheap textual pre-filter bounds the number of parses on large trees
    if not any(needle in text for needle in needles):
        return False

    try:
        source = parser.parse_text(text, Path(importer))
    except AnalysisError as e:
        logger.debug("Ignoring unparseable %s: %s", importer, e)
        return False

    # Presence is all that matters; stop at the first matching reference
    return any(
        resolves_to(ref.source, importer, target_abs)
        for ref in iter_module_references(source.root)
    )


def _absolute(path: Path) -> str:
    return os.path.normpath(os.path.abspath(path))
