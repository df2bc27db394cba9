"""Output formatters for Cognitive Debt."""

from ..config import DEFAULT_CONFIG, ScoringConfig
from .base import BaseFormatter
from .json_formatter import JsonFormatter, result_payload
from .text_formatter import TextFormatter


def get_formatter(name: str, config: ScoringConfig = DEFAULT_CONFIG) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "text", "json"
        config: Scoring configuration, used by the text formatter for its checks

    Raises:
        ValueError: If name is not recognized
    """
    if name == "text":
        return TextFormatter(config=config)
    if name == "json":
        return JsonFormatter()
    raise ValueError(f"Unknown formatter: {name!r}. Choose from: json, text")


__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "TextFormatter",
    "get_formatter",
    "result_payload",
]
