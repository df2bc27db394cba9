"""Parser adapter: source text to syntax tree, plus file discovery."""

from .languages import (
    SKIP_DIRS,
    SOURCE_EXTENSIONS,
    detect_language,
    is_source_file,
    iter_source_files,
)
from .parser import ParsedSource, SourceParser, get_supported_languages

__all__ = [
    "ParsedSource",
    "SourceParser",
    "get_supported_languages",
    "SKIP_DIRS",
    "SOURCE_EXTENSIONS",
    "detect_language",
    "is_source_file",
    "iter_source_files",
]
