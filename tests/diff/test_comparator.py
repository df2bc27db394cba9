"""Tests for the snapshot comparator."""

from dataclasses import replace

from cognitive_debt.diff import (
    DEGRADED,
    DELETED,
    IMPROVED,
    MODIFIED,
    NEW,
    UNCHANGED,
    change_reasons,
    compare_results,
)
from cognitive_debt.models import (
    AnalysisResult,
    DependencyMetrics,
    FunctionLengthMetrics,
    MetricSet,
    NamingClarityMetrics,
    NestingDepthMetrics,
    ParameterCountMetrics,
    ScoreData,
)


def result(path, score, line_count=10, **metric_overrides):
    metrics = replace(MetricSet(), **metric_overrides)
    score_data = ScoreData(score=score, grade="Good", penalties={}, breakdown={})
    return AnalysisResult.ok(path, metrics, score_data, line_count)


class TestCompareResults:
    """Test per-file entries and aggregate status."""

    def test_degraded_file(self):
        diff = compare_results([result("a.js", 70)], [result("a.js", 55)])
        assert len(diff.files) == 1
        entry = diff.files[0]
        assert entry.status == MODIFIED
        assert entry.delta_score == -15
        assert entry.change_percent == -21
        assert diff.modified_files == 1
        assert diff.status == DEGRADED

    def test_new_file_costs_its_score(self):
        diff = compare_results([], [result("new.js", 80)])
        entry = diff.files[0]
        assert entry.status == NEW
        assert entry.delta_score == -80
        assert entry.change_percent == 100
        assert entry.reasons == ("New file added",)
        assert diff.new_files == 1
        assert diff.status == DEGRADED

    def test_deleted_file_returns_its_score(self):
        diff = compare_results([result("old.js", 40)], [])
        entry = diff.files[0]
        assert entry.status == DELETED
        assert entry.delta_score == 40
        assert entry.change_percent == 0
        assert diff.deleted_files == 1
        assert diff.status == IMPROVED

    def test_identical_snapshots_are_unchanged(self):
        results = [result("a.js", 90), result("b.js", 60)]
        diff = compare_results(results, list(results))
        assert diff.files == []
        assert diff.modified_files == 0
        assert diff.status == UNCHANGED
        assert diff.overall_change_percent == 0

    def test_failed_results_are_treated_as_absent(self):
        base = [AnalysisResult.failed("a.js", "Syntax error in a.js: x")]
        diff = compare_results(base, [result("a.js", 75)])
        assert diff.files[0].status == NEW

    def test_files_sorted_most_degraded_first(self):
        base = [result("a.js", 90), result("b.js", 50), result("c.js", 70)]
        target = [result("a.js", 60), result("b.js", 80), result("c.js", 65)]
        diff = compare_results(base, target)
        assert [(f.file, f.delta_score) for f in diff.files] == [
            ("a.js", -30),
            ("c.js", -5),
            ("b.js", 30),
        ]

    def test_status_follows_sum_of_deltas(self):
        base = [result("a.js", 90), result("b.js", 50)]
        target = [result("a.js", 80), result("b.js", 65)]
        diff = compare_results(base, target)
        assert diff.status == IMPROVED

    def test_zero_base_score_has_zero_change_percent(self):
        diff = compare_results([result("a.js", 0)], [result("a.js", 30)])
        assert diff.files[0].change_percent == 0


class TestAggregates:
    """Test snapshot-wide metric totals."""

    def test_score_row_books_changed_files(self):
        base = [result("a.js", 70), result("b.js", 90)]
        target = [result("a.js", 55), result("b.js", 90)]
        diff = compare_results(base, target)
        score = diff.metrics["score"]
        assert score.before == 70
        assert score.after == 55
        assert score.delta == -15
        assert diff.overall_change_percent == -21

    def test_good_new_file_still_degrades(self):
        diff = compare_results([result("a.js", 40)], [result("a.js", 40), result("b.js", 100)])
        score = diff.metrics["score"]
        assert score.to_dict() == {"before": 100, "after": 0, "delta": -100}
        assert diff.status == DEGRADED
        assert diff.overall_change_percent == -100

    def test_score_delta_sign_matches_status(self):
        cases = [
            ([result("a.js", 40)], [result("a.js", 40), result("b.js", 100)]),
            ([result("a.js", 90), result("b.js", 50)], [result("a.js", 80), result("b.js", 65)]),
            ([result("old.js", 30)], [result("a.js", 10)]),
            ([result("a.js", 60)], [result("a.js", 60)]),
        ]
        expected = {-1: DEGRADED, 0: UNCHANGED, 1: IMPROVED}
        for base, target in cases:
            diff = compare_results(base, target)
            delta = diff.metrics["score"].delta
            assert diff.status == expected[(delta > 0) - (delta < 0)]
            assert delta == sum(f.delta_score for f in diff.files)

    def test_lines_and_dependencies_accumulate(self):
        base = [result("a.js", 70, line_count=100, dependencies=DependencyMetrics(total_imports=2))]
        target = [
            result("a.js", 60, line_count=150, dependencies=DependencyMetrics(total_imports=5)),
            result("b.js", 80, line_count=20, dependencies=DependencyMetrics(total_imports=1)),
        ]
        diff = compare_results(base, target)
        assert diff.metrics["loc"].to_dict() == {"before": 100, "after": 170, "delta": 70}
        assert diff.metrics["dependencies"].before == 2
        assert diff.metrics["dependencies"].after == 6

    def test_unchanged_files_do_not_contribute(self):
        same = result("same.js", 90, line_count=500)
        diff = compare_results([same], [same])
        assert diff.metrics["loc"].before == 0

    def test_to_dict_is_json_ready(self):
        diff = compare_results([result("a.js", 70)], [result("a.js", 55)]).to_dict()
        assert diff["status"] == DEGRADED
        assert diff["files"][0]["delta_score"] == -15
        assert set(diff["metrics"]) == {
            "score",
            "function_length",
            "nesting_depth",
            "parameter_count",
            "dependencies",
            "loc",
        }


class TestChangeReasons:
    def test_each_regression_is_explained(self):
        base = MetricSet()
        target = MetricSet(
            function_length=FunctionLengthMetrics(average_length=12),
            nesting_depth=NestingDepthMetrics(max_depth=4),
            parameter_count=ParameterCountMetrics(max_params=3),
            dependencies=DependencyMetrics(total_imports=3),
            naming_clarity=NamingClarityMetrics(unclear_percent=5),
        )
        assert change_reasons(base, target) == [
            "Avg function length increased (+12)",
            "Max nesting depth increased to 4",
            "Parameter count increased",
            "Coupling increased (+3 imports)",
            "Naming clarity degraded",
        ]

    def test_small_changes_are_not_reasons(self):
        base = MetricSet()
        target = MetricSet(
            function_length=FunctionLengthMetrics(average_length=5),
            dependencies=DependencyMetrics(total_imports=2),
        )
        assert change_reasons(base, target) == []

    def test_metric_change_without_score_change_is_reported(self):
        base = [result("a.js", 80)]
        target = [result("a.js", 80, nesting_depth=NestingDepthMetrics(max_depth=2))]
        diff = compare_results(base, target)
        assert diff.files[0].delta_score == 0
        assert diff.files[0].reasons == ("Max nesting depth increased to 2",)
