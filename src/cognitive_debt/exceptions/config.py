"""Input exceptions: configuration, paths and git references."""

from pathlib import Path
from typing import Any

from .base import CognitiveDebtError


class ConfigurationError(CognitiveDebtError):
    """Base class for invalid user input (paths, refs, settings)."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when a provided path is invalid."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"reason": reason})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidRefError(ConfigurationError):
    """Raised when a git reference does not resolve in the repository."""

    def __init__(self, ref: str, repo_path: Path):
        super().__init__(
            f"Invalid git reference: {ref}",
            details={"repository": str(repo_path)},
        )
        self.ref = ref
        self.repo_path = repo_path
