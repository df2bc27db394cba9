"""Base formatter interface for Cognitive Debt output rendering."""

from abc import ABC, abstractmethod
from typing import List

from ..diff import DiffResult
from ..models import AnalysisResult, ImpactReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    Each formatter renders the three report kinds: per-file analysis
    results, a change impact report and a snapshot diff.
    """

    @abstractmethod
    def render_analysis(self, results: List[AnalysisResult]) -> None:
        """Write analysis results to stdout."""

    @abstractmethod
    def render_impact(self, report: ImpactReport) -> None:
        """Write an impact report to stdout."""

    @abstractmethod
    def render_diff(self, diff: DiffResult) -> None:
        """Write a diff result to stdout."""
