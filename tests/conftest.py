"""Shared test fixtures for Cognitive Debt tests."""

import logging
import textwrap
from pathlib import Path

import pytest

from cognitive_debt.config import DEFAULT_CONFIG
from cognitive_debt.parsing import SourceParser


def dedent(code: str) -> str:
    """Dedent a triple-quoted snippet so its first code line is line 1."""
    return textwrap.dedent(code).lstrip("\n")


@pytest.fixture
def parser():
    return SourceParser()


@pytest.fixture
def parse(parser):
    """Parse a code snippet; the filename picks the grammar."""

    def _parse(code: str, filename: str = "sample.js"):
        return parser.parse_text(dedent(code), Path(filename))

    return _parse


@pytest.fixture
def config():
    return DEFAULT_CONFIG


@pytest.fixture
def make_project(tmp_path):
    """Write a ``{relative_path: source}`` mapping under a directory."""

    def _make(files: dict, name: str = "project") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dedent(content), encoding="utf-8")
        return root

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler changes made by CLI invocations."""
    yield
    logger = logging.getLogger("cognitive_debt")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
