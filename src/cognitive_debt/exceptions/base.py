"""Root of the Cognitive Debt exception hierarchy.

Every error carries a one-line ``message`` plus a ``details`` mapping of
context the CLI appends in parentheses:

    InvalidPathError / InvalidConfigError   reason
    InvalidRefError                         repository
    FileAccessError                         reason (the OS error text)
    ParsingError                            language
    ExternalProcessError                    reason (git's stderr, or timeout / missing binary)
"""

from typing import Dict, Optional


class CognitiveDebtError(Exception):
    """Base exception for all Cognitive Debt errors.

    Library code raises subclasses; the CLI catches this class alone and
    prints ``str(error)`` as a single red line.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        rendered = [f"{key}={_one_line(value)}" for key, value in self.details.items() if value]
        if not rendered:
            return self.message
        return f"{self.message} ({', '.join(rendered)})"


def _one_line(value: str) -> str:
    # git reports hints and the fatal line on separate lines
    return "; ".join(line.strip() for line in str(value).splitlines() if line.strip())
