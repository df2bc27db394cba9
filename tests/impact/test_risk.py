"""Tests for the change-impact risk heuristic."""

import pytest

from cognitive_debt.impact import CRITICAL, HIGH, LOW, MEDIUM, calculate_risk, risk_level
from cognitive_debt.models import (
    DependencyMetrics,
    MetricSet,
    NestingDepthMetrics,
    ParameterCountMetrics,
)


def metrics(max_depth=1, max_params=1, high_coupling=False):
    return MetricSet(
        nesting_depth=NestingDepthMetrics(total_functions=1, max_depth=max_depth),
        parameter_count=ParameterCountMetrics(total_functions=1, max_params=max_params),
        dependencies=DependencyMetrics(high_coupling=high_coupling),
    )


class TestRiskLevel:
    @pytest.mark.parametrize(
        "score,fan_in,level",
        [
            (30, 8, CRITICAL),
            (49, 6, CRITICAL),
            (50, 6, HIGH),
            (70, 8, HIGH),
            (39, 3, HIGH),
            (40, 3, MEDIUM),
            (90, 5, MEDIUM),
            (29, 2, MEDIUM),
            (30, 2, LOW),
            (70, 1, LOW),
            (100, 0, LOW),
        ],
    )
    def test_bands(self, score, fan_in, level):
        assert risk_level(score, fan_in) == level


class TestCalculateRisk:
    """Test reasons, impacts and suggestions."""

    def test_critical_reasons(self):
        risk = calculate_risk(30, 8, metrics())
        assert risk.level == CRITICAL
        assert risk.reasons == ("Used by 8 other modules", "High cognitive debt (30/100)")

    def test_isolated_readable_file(self):
        risk = calculate_risk(95, 0, metrics())
        assert risk.level == LOW
        assert risk.reasons == ("Isolated and readable",)
        assert risk.likely_impacts == ("Local functionality only",)
        assert risk.suggestion == "Standard unit testing should be sufficient."

    def test_metric_reasons_are_appended(self):
        risk = calculate_risk(70, 1, metrics(max_depth=6, max_params=5, high_coupling=True))
        assert risk.reasons[1:] == (
            "Deeply nested logic (Level 6)",
            "Complex function signatures (>4 params)",
            "High external coupling",
        )

    def test_likely_impacts_are_capped_at_four(self):
        risk = calculate_risk(20, 3, metrics(max_depth=5, max_params=5))
        assert len(risk.likely_impacts) == 4
        assert risk.likely_impacts[0] == "Dependent module stability"
        assert len(set(risk.likely_impacts)) == 4

    def test_suggestion_priority(self):
        assert "nested logic" in calculate_risk(90, 0, metrics(max_depth=5, high_coupling=True)).suggestion
        assert "tightly coupled" in calculate_risk(90, 0, metrics(max_params=6, high_coupling=True)).suggestion
        assert "object parameter" in calculate_risk(90, 0, metrics(max_params=6)).suggestion
        assert "integration tests" in calculate_risk(10, 9, metrics()).suggestion
        assert "call sites" in calculate_risk(80, 9, metrics()).suggestion
        assert "edge cases" in calculate_risk(60, 4, metrics()).suggestion
