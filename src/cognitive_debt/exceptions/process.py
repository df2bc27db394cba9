"""External process exceptions."""

from typing import Sequence

from .base import CognitiveDebtError


class ExternalProcessError(CognitiveDebtError):
    """Raised when a git subprocess fails, is missing, or times out."""

    def __init__(self, command: Sequence[str], reason: str):
        super().__init__(
            f"Command failed: {' '.join(command)}",
            details={"reason": reason},
        )
        self.command = list(command)
        self.reason = reason
