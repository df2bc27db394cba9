"""Exception hierarchy for Cognitive Debt."""

from .analysis import AnalysisError, FileAccessError, ParsingError
from .base import CognitiveDebtError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    InvalidRefError,
)
from .process import ExternalProcessError

__all__ = [
    "CognitiveDebtError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "InvalidRefError",
    "ExternalProcessError",
]
