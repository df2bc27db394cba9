"""Cognitive debt score calculation.

Each metric contributes a non-negative penalty; the score is what is left of
a perfect 100:

    score = round(clamp(100 - sum(penalties), 0, 100))

Default grade bands:
    80-100  Excellent  (low cognitive debt)
    60-79   Good       (manageable debt)
    40-59   Fair       (needs attention)
    0-39    Poor       (high cognitive debt)
"""

from ..config import GradeCutoffs, ScoringConfig, Thresholds, Weights
from ..math import round_half_up
from ..models import (
    DependencyMetrics,
    FunctionLengthMetrics,
    MetricScore,
    MetricSet,
    NamingClarityMetrics,
    NestingDepthMetrics,
    ParameterCountMetrics,
    ScoreData,
)

EXCELLENT = "Excellent"
GOOD = "Good"
FAIR = "Fair"
POOR = "Poor"

METRIC_NAMES = (
    "function_length",
    "nesting_depth",
    "parameter_count",
    "naming_clarity",
    "dependencies",
)


def calculate_score(metrics: MetricSet, config: ScoringConfig) -> ScoreData:
    """Fold a file's metrics into a score, grade and per-metric breakdown."""
    t, w = config.thresholds, config.weights
    penalties = {
        "function_length": function_length_penalty(metrics.function_length, t, w),
        "nesting_depth": nesting_depth_penalty(metrics.nesting_depth, t, w),
        "parameter_count": parameter_count_penalty(metrics.parameter_count, t, w),
        "naming_clarity": naming_clarity_penalty(metrics.naming_clarity, t, w),
        "dependencies": dependencies_penalty(metrics.dependencies, t, w),
    }

    total_penalty = sum(penalties.values())
    score = round_half_up(max(0.0, min(100.0, 100 - total_penalty)))

    return ScoreData(
        score=score,
        grade=grade_for(score, config.grades),
        penalties=penalties,
        breakdown={
            name: MetricScore(
                subscore=max(0.0, 100 - penalty),
                penalty=round_half_up(penalty),
            )
            for name, penalty in penalties.items()
        },
    )


def grade_for(score: float, grades: GradeCutoffs) -> str:
    """Map a score to its grade band, checking the highest band first."""
    if score >= grades.excellent:
        return EXCELLENT
    if score >= grades.good:
        return GOOD
    if score >= grades.fair:
        return FAIR
    return POOR


def function_length_penalty(m: FunctionLengthMetrics, t: Thresholds, w: Weights) -> float:
    if m.total_functions == 0:
        return 0.0
    return max(0.0, m.average_length - t.function_length) * w.function_length


def nesting_depth_penalty(m: NestingDepthMetrics, t: Thresholds, w: Weights) -> float:
    # Driven by the deepest function, not the average
    if m.total_functions == 0:
        return 0.0
    return max(0.0, m.max_depth - t.nesting_depth) * w.nesting_depth


def parameter_count_penalty(m: ParameterCountMetrics, t: Thresholds, w: Weights) -> float:
    if m.total_functions == 0:
        return 0.0
    return max(0.0, m.average_params - t.parameter_count) * w.parameter_count


def naming_clarity_penalty(m: NamingClarityMetrics, t: Thresholds, w: Weights) -> float:
    """Scaled share of unclear names, always within [0, weight]."""
    if m.total_identifiers == 0:
        return 0.0
    return (m.unclear_percent / 100) * w.naming_clarity


def dependencies_penalty(m: DependencyMetrics, t: Thresholds, w: Weights) -> float:
    return max(0.0, m.local_imports - t.max_local_imports) * w.dependencies
