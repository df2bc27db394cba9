"""Tests for the tree-sitter parser adapter."""

from pathlib import Path

import pytest

from cognitive_debt.exceptions import FileAccessError, ParsingError
from cognitive_debt.parsing import SourceParser, detect_language, get_supported_languages


class TestLanguageDetection:
    """Test grammar selection by file extension."""

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("app.js", "javascript"),
            ("App.jsx", "javascript"),
            ("server.mjs", "javascript"),
            ("api.ts", "typescript"),
            ("View.tsx", "tsx"),
            ("README", "javascript"),
        ],
    )
    def test_detect_language(self, filename, expected):
        assert detect_language(Path(filename)) == expected

    def test_supported_languages(self):
        assert set(get_supported_languages()) == {"javascript", "typescript", "tsx"}


class TestParseText:
    """Test parsing source text."""

    def test_returns_tree_and_line_count(self, parser):
        source = parser.parse_text("const a = 1;\nconst b = 2;\n", Path("a.js"))
        assert source.root.type == "program"
        assert source.language == "javascript"
        # Trailing newline yields an empty final line
        assert source.line_count == 3

    def test_parses_jsx(self, parser):
        source = parser.parse_text("const el = <div className='x'>hi</div>;\n", Path("a.jsx"))
        assert source.root.type == "program"

    def test_parses_typescript_annotations(self, parser):
        code = "function greet(name: string, times?: number): string { return name; }\n"
        source = parser.parse_text(code, Path("a.ts"))
        assert source.language == "typescript"

    def test_parses_tsx(self, parser):
        code = "const View = (props: { title: string }) => <h1>{props.title}</h1>;\n"
        source = parser.parse_text(code, Path("View.tsx"))
        assert source.language == "tsx"

    def test_syntax_error_raises_parsing_error(self, parser):
        with pytest.raises(ParsingError) as exc_info:
            parser.parse_text("const ok = 1;\nconst broken = ;\n", Path("bad.js"))
        err = exc_info.value
        assert err.line == 2
        assert "bad.js" in str(err)

    def test_unclosed_block_raises_parsing_error(self, parser):
        with pytest.raises(ParsingError):
            parser.parse_text("function open() {\n  return 1;\n", Path("bad.js"))

    def test_typescript_in_js_file_is_a_syntax_error(self, parser):
        with pytest.raises(ParsingError):
            parser.parse_text("let count: number = 1;\n", Path("a.js"))


class TestParseFile:
    """Test reading and parsing files from disk."""

    def test_parse_file(self, tmp_path):
        path = tmp_path / "ok.js"
        path.write_text("export const answer = 42;\n", encoding="utf-8")
        source = SourceParser().parse_file(path)
        assert source.path == path
        assert source.text.startswith("export")

    def test_missing_file_is_not_found(self, tmp_path):
        with pytest.raises(FileAccessError) as exc_info:
            SourceParser().parse_file(tmp_path / "missing.js")
        assert exc_info.value.not_found is True
        assert "File not found" in str(exc_info.value)

    def test_unreadable_path_is_access_error(self, tmp_path):
        directory = tmp_path / "dir.js"
        directory.mkdir()
        with pytest.raises(FileAccessError) as exc_info:
            SourceParser().parse_file(directory)
        assert exc_info.value.not_found is False

    def test_invalid_utf8_is_access_error(self, tmp_path):
        path = tmp_path / "latin1.js"
        path.write_bytes(b"const s = '\xff\xfe';\n")
        with pytest.raises(FileAccessError):
            SourceParser().parse_file(path)
