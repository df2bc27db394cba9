"""Tests for change impact orchestration."""

import pytest

from cognitive_debt.exceptions import AnalysisError, InvalidPathError
from cognitive_debt.impact import LOW, MEDIUM, analyze_change_impact


class TestAnalyzeChangeImpact:
    def test_report_for_shared_module(self, make_project, config):
        files = {"lib/format.js": "export function formatName(name) {\n  return name.trim();\n}\n"}
        for n in range(3):
            files[f"views/view{n}.js"] = "import { formatName } from '../lib/format';\n"
        root = make_project(files)

        report = analyze_change_impact(root / "lib" / "format.js", config, project_root=root)
        assert report.fan_in == 3
        assert report.analysis.score == 100
        assert report.risk.level == MEDIUM
        assert report.relative_path.replace("\\", "/") == "lib/format.js"
        assert len(report.dependents) == 3

    def test_defaults_to_working_directory(self, make_project, config, monkeypatch):
        root = make_project({"a.js": "export const a = 1;\n"})
        monkeypatch.chdir(root)
        report = analyze_change_impact("a.js", config)
        assert report.fan_in == 0
        assert report.risk.level == LOW

    def test_missing_target(self, make_project, config):
        root = make_project({})
        with pytest.raises(InvalidPathError):
            analyze_change_impact(root / "nope.js", config, project_root=root)

    def test_unparseable_target_is_fatal(self, make_project, config):
        root = make_project({"bad.js": "const = ;\n"})
        with pytest.raises(AnalysisError, match="Syntax error"):
            analyze_change_impact(root / "bad.js", config, project_root=root)

    def test_to_dict(self, make_project, config):
        root = make_project({"a.js": "export const a = 1;\n"})
        data = analyze_change_impact(root / "a.js", config, project_root=root).to_dict()
        assert data["risk"]["level"] == LOW
        assert data["fan_in"] == 0
