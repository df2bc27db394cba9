"""Tests for output formatters."""

import json

import pytest
from rich.console import Console

from cognitive_debt.analysis import analyze_file
from cognitive_debt.diff import compare_results
from cognitive_debt.formatters import JsonFormatter, TextFormatter, get_formatter, result_payload
from cognitive_debt.models import AnalysisResult

CODE = """
    import api from './api';

    export function load(q) {
      return api.get(q);
    }
"""


@pytest.fixture
def analyzed(make_project, config):
    root = make_project({"load.js": CODE})
    return analyze_file(root / "load.js", config)


def render_text(method, payload):
    console = Console(record=True, width=120)
    getattr(TextFormatter(console=console), method)(payload)
    return console.export_text()


class TestGetFormatter:
    def test_known_names(self):
        assert isinstance(get_formatter("text"), TextFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("html")


class TestJsonFormatter:
    def test_result_payload(self, analyzed):
        payload = result_payload(analyzed)
        assert payload["grade"] == analyzed.score_data.grade
        assert payload["metrics"]["dependencies"]["local_imports"] == 1
        assert payload["issues"][0]["metric"] == "naming_clarity"
        json.dumps(payload)

    def test_failed_payload(self):
        payload = result_payload(AnalysisResult.failed("x.js", "File not found: x.js"))
        assert payload == {"file": "x.js", "error": "File not found: x.js"}

    def test_format_analysis(self, analyzed):
        data = json.loads(JsonFormatter().format_analysis([analyzed]))
        assert data["summary"]["files_analyzed"] == 1
        assert data["files"][0]["file"] == analyzed.file_path


class TestTextFormatter:
    def test_analysis_report(self, analyzed):
        text = render_text("render_analysis", [analyzed])
        assert "Cognitive Debt Analysis Report" in text
        assert f"{analyzed.score}/100" in text
        assert "Unclear names: 50%" in text
        assert "parameter 'q' has unclear name: Single letter name" in text
        assert "⚠ Naming Clarity:" in text

    def test_clear_names_pass_naming_check(self, make_project, config):
        root = make_project({"total.js": "export function total(items) {\n  return items.length;\n}\n"})
        text = render_text("render_analysis", [analyze_file(root / "total.js", config)])
        assert "Unclear names: 0%" in text
        assert "✓ Naming Clarity:" in text

    def test_failed_result(self):
        text = render_text("render_analysis", [AnalysisResult.failed("[x].js", "File not found: [x].js")])
        assert "Error analyzing [x].js" in text

    def test_diff_report(self, analyzed):
        diff = compare_results([], [analyzed])
        text = render_text("render_diff", diff)
        assert "Cognitive Debt Diff" in text
        assert "1 new" in text
        assert "Score points" in text
        assert "DEBT INCREASED (score points -100%)" in text
