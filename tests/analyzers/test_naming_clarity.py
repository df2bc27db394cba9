"""Tests for the naming clarity analyzer."""

import pytest

from cognitive_debt.analyzers import naming_clarity
from cognitive_debt.analyzers.naming_clarity import is_unclear, unclear_reason


class TestIsUnclear:
    """Test the per-name rules."""

    @pytest.mark.parametrize("name", ["q", "a", "userdata", "getuserprofile", "tmp", "Tmp", "cfg", "util"])
    def test_unclear_names(self, name):
        assert is_unclear(name) is True

    @pytest.mark.parametrize("name", ["x", "y", "e", "userData", "user_data", "total", "profile", "CONFIG"])
    def test_clear_names(self, name):
        assert is_unclear(name) is False

    def test_loop_counters_allowed_only_in_loops(self):
        for name in ("i", "j", "k"):
            assert is_unclear(name, in_loop=True) is False
            assert is_unclear(name, in_loop=False) is True

    def test_seven_lowercase_letters_is_fine(self):
        assert is_unclear("account") is False
        assert is_unclear("accounts") is True

    def test_reasons(self):
        assert unclear_reason("q") == "Single letter name"
        assert unclear_reason("userdata") == "Long lowercase name without separators"
        assert unclear_reason("tmp") == "Unclear abbreviation"
        assert unclear_reason("userName") is None


class TestNamingAnalysis:
    """Test identifier collection over a tree."""

    def test_loop_counter_declared_in_for(self, parse):
        code = """
            for (let i = 0; i < 3; i++) {
              for (const k of keys) {}
            }
            let j = 0;
        """
        metrics = naming_clarity.analyze(parse(code).tree)
        assert metrics.total_identifiers == 3
        assert [(n.name, n.kind) for n in metrics.unclear_names] == [("j", "variable")]
        assert metrics.unclear_names[0].line == 4

    def test_counts_functions_and_parameters(self, parse):
        code = """
            function fetchUser(id, cb) {}
            const load = (q) => q;
            function tmp(options = {}, ...rest) {}
        """
        metrics = naming_clarity.analyze(parse(code).tree)
        # fetchUser, id, cb, load, q, tmp
        assert metrics.total_identifiers == 6
        names = {(n.name, n.kind) for n in metrics.unclear_names}
        assert names == {("q", "parameter"), ("tmp", "function")}
        assert metrics.unclear_percent == 33

    def test_method_parameters_are_not_checked(self, parse):
        code = """
            class Store {
              save(q, z) {}
            }
        """
        metrics = naming_clarity.analyze(parse(code).tree)
        assert metrics.total_identifiers == 0
        assert metrics.unclear_percent == 0

    def test_destructured_declarations_are_skipped(self, parse):
        metrics = naming_clarity.analyze(parse("const { a, b } = props;\n").tree)
        assert metrics.total_identifiers == 0

    def test_typescript_parameters(self, parse):
        code = "function scale(v: number, factor?: number): number { return v; }\n"
        metrics = naming_clarity.analyze(parse(code, "sample.ts").tree)
        assert metrics.total_identifiers == 3
        assert [n.name for n in metrics.unclear_names] == ["v"]

    def test_reports_at_most_ten_but_counts_all(self, parse):
        letters = "abcdfghlmnop"
        code = "".join(f"const {letter} = 1;\n" for letter in letters)
        metrics = naming_clarity.analyze(parse(code).tree)
        assert metrics.total_identifiers == 12
        assert metrics.unclear_count == 12
        assert metrics.unclear_percent == 100
        assert len(metrics.unclear_names) == 10

    def test_empty_file(self, parse):
        metrics = naming_clarity.analyze(parse("").tree)
        assert metrics.total_identifiers == 0
        assert metrics.unclear_percent == 0
