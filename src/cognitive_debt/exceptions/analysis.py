"""Analysis-related exceptions: file access and parsing."""

from pathlib import Path
from typing import Optional

from .base import CognitiveDebtError


class AnalysisError(CognitiveDebtError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be found or read."""

    def __init__(self, filepath: Path, reason: str, not_found: bool = False):
        message = f"File not found: {filepath}" if not_found else f"Cannot access file: {filepath}"
        super().__init__(message, details={"reason": reason})
        self.filepath = filepath
        self.reason = reason
        self.not_found = not_found


class ParsingError(AnalysisError):
    """Raised when file content is not syntactically valid."""

    def __init__(
        self,
        filepath: Path,
        language: str,
        reason: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(
            f"Syntax error in {filepath}: {reason}",
            details={"language": language},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason
        self.line = line
        self.column = column
