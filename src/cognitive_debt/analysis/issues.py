"""Top-issue extraction from a file's offender lists."""

from __future__ import annotations

from ..models import Issue, MetricSet

HIGH = "high"
MEDIUM = "medium"
LOW = "low"

_SEVERITY_ORDER = {HIGH: 0, MEDIUM: 1, LOW: 2}


def collect_top_issues(metrics: MetricSet) -> list[Issue]:
    """All offenders as issues, most severe first (stable within a severity)."""
    issues: list[Issue] = []

    for func in metrics.function_length.long_functions:
        issues.append(
            Issue(
                severity=HIGH if func.length > 100 else MEDIUM,
                description=f"Function '{func.name}' is too long ({func.length} lines)",
                line=func.line,
                metric="function_length",
            )
        )

    for func in metrics.nesting_depth.deeply_nested_functions:
        issues.append(
            Issue(
                severity=HIGH if func.depth > 5 else MEDIUM,
                description=f"Function '{func.name}' has deep nesting ({func.depth} levels)",
                line=func.line,
                metric="nesting_depth",
            )
        )

    for func in metrics.parameter_count.functions_with_too_many_params:
        issues.append(
            Issue(
                severity=HIGH if func.param_count > 6 else MEDIUM,
                description=f"Function '{func.name}' has too many parameters ({func.param_count})",
                line=func.line,
                metric="parameter_count",
            )
        )

    for name in metrics.naming_clarity.unclear_names:
        issues.append(
            Issue(
                severity=LOW,
                description=f"{name.kind} '{name.name}' has unclear name: {name.reason}",
                line=name.line,
                metric="naming_clarity",
            )
        )

    issues.sort(key=lambda issue: _SEVERITY_ORDER[issue.severity])
    return issues
