"""Change-impact risk heuristic.

Risk combines how hard a file is to understand (score) with how many files
depend on it (fan-in):

    High debt + high fan-in  -> Critical
    Low debt  + high fan-in  -> High (fragile hub)
    High debt + low fan-in   -> Medium (contained mess)
    Low debt  + low fan-in   -> Low
"""

from ..models import MetricSet, RiskAssessment

CRITICAL = "Critical"
HIGH = "High"
MEDIUM = "Medium"
LOW = "Low"

MAX_LIKELY_IMPACTS = 4


def risk_level(score: int, fan_in: int) -> str:
    """Fan-in band first, then score band within it."""
    if fan_in > 5:
        return CRITICAL if score < 50 else HIGH
    if fan_in > 2:
        return HIGH if score < 40 else MEDIUM
    return MEDIUM if score < 30 else LOW


def calculate_risk(score: int, fan_in: int, metrics: MetricSet) -> RiskAssessment:
    level = risk_level(score, fan_in)
    max_depth = metrics.nesting_depth.max_depth
    max_params = metrics.parameter_count.max_params
    high_coupling = metrics.dependencies.high_coupling

    reasons = _band_reasons(level, score, fan_in)
    if max_depth > 4:
        reasons.append(f"Deeply nested logic (Level {max_depth})")
    if max_params > 4:
        reasons.append("Complex function signatures (>4 params)")
    if high_coupling:
        reasons.append("High external coupling")

    impacts = []
    if fan_in > 0:
        impacts += ["Dependent module stability", "Integration test pipelines"]
    if max_depth > 3:
        impacts += ["Edge case handling", "Logic flow correctness"]
    if max_params > 3:
        impacts.append("API contract compatibility")
    if score < 50:
        impacts += ["Future refactoring difficulty", "Bug fix time overlap"]
    if not impacts:
        impacts.append("Local functionality only")

    return RiskAssessment(
        level=level,
        reasons=tuple(reasons),
        likely_impacts=tuple(dict.fromkeys(impacts))[:MAX_LIKELY_IMPACTS],
        suggestion=_suggestion(level, max_depth, max_params, high_coupling),
    )


def _band_reasons(level: str, score: int, fan_in: int) -> list[str]:
    if fan_in > 5:
        if level == CRITICAL:
            return [f"Used by {fan_in} other modules", f"High cognitive debt ({score}/100)"]
        return [f"Used by {fan_in} other modules"]
    if fan_in > 2:
        if level == HIGH:
            return [f"Complex code (Score: {score})", f"Used by {fan_in} consumers"]
        return [f"Moderate usage ({fan_in} files)"]
    if level == MEDIUM:
        return [f"High cognitive debt (Score: {score})", "Hard to verify safely"]
    if score < 50:
        return ["Localized complexity"]
    return ["Isolated and readable"]


def _suggestion(level: str, max_depth: int, max_params: int, high_coupling: bool) -> str:
    # First match wins; specific problems outrank the generic risk advice
    if max_depth > 4:
        return "Refactor deeply nested logic into smaller helper functions to reduce complexity."
    if high_coupling:
        return "Mock external dependencies carefully; this file is tightly coupled."
    if max_params > 4:
        return "Consider using an object parameter to simplify function signatures."
    if level == CRITICAL:
        return "Start by writing integration tests for dependent files before touching this code."
    if level == HIGH:
        return "Check all call sites for compatibility before merging. Regression risk is high."
    if level == MEDIUM:
        return "Add unit tests for edge cases, as this file has moderate complexity."
    return "Standard unit testing should be sufficient."
