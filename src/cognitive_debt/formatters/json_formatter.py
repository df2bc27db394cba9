"""JSON formatter for Cognitive Debt."""

import json
from dataclasses import asdict
from typing import Any, List

from ..analysis import collect_top_issues, summarize
from ..diff import DiffResult
from ..models import AnalysisResult, ImpactReport
from .base import BaseFormatter


def result_payload(result: AnalysisResult) -> dict[str, Any]:
    """JSON-ready view of one analysis result."""
    if not result.success or result.metrics is None or result.score_data is None:
        return {"file": result.file_path, "error": result.error}

    score_data = result.score_data
    return {
        "file": result.file_path,
        "score": score_data.score,
        "grade": score_data.grade,
        "line_count": result.line_count,
        "penalties": score_data.penalties,
        "breakdown": {name: asdict(entry) for name, entry in score_data.breakdown.items()},
        "metrics": asdict(result.metrics),
        "issues": [asdict(issue) for issue in collect_top_issues(result.metrics)],
    }


class JsonFormatter(BaseFormatter):
    """Render reports as JSON."""

    def render_analysis(self, results: List[AnalysisResult]) -> None:
        print(self.format_analysis(results))

    def render_impact(self, report: ImpactReport) -> None:
        print(self.format_impact(report))

    def render_diff(self, diff: DiffResult) -> None:
        print(self.format_diff(diff))

    def format_analysis(self, results: List[AnalysisResult]) -> str:
        data = {
            "files": [result_payload(r) for r in results],
            "summary": asdict(summarize(results)),
        }
        return json.dumps(data, indent=2)

    def format_impact(self, report: ImpactReport) -> str:
        data = {
            "target": report.relative_path,
            "score": report.analysis.score,
            "grade": report.analysis.score_data.grade if report.analysis.score_data else None,
            "fan_in": report.fan_in,
            "dependents": list(report.dependents),
            "risk": asdict(report.risk),
        }
        return json.dumps(data, indent=2)

    def format_diff(self, diff: DiffResult) -> str:
        return json.dumps(diff.to_dict(), indent=2)
