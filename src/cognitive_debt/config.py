"""Configuration loading and validation for Cognitive Debt.

A configuration bundles three groups of numbers:
    1. thresholds - per-metric limits beyond which a penalty applies
    2. weights    - per-metric penalty multipliers
    3. grades     - score cut points for Excellent / Good / Fair

The configuration is immutable and passed explicitly to every analysis call.
When no config file is given, ``DEFAULT_CONFIG`` is used. A config file that
is given but missing or unreadable is an error, never silently replaced by
defaults.

Example:
    >>> config = load_config()
    >>> config.thresholds.function_length
    50
    >>> config = load_config(Path("cognitive-debt.toml"))
"""

from __future__ import annotations

import json
import re
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import ConfigurationError, InvalidConfigError

Number = Union[int, float]


def _validate_non_negative(section: str, obj: Any) -> None:
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value < 0:
            raise InvalidConfigError(f"{section}.{f.name}", value, "must be non-negative")


@dataclass(frozen=True)
class Thresholds:
    """Per-metric limits.

    Attributes:
        function_length: Average function length (lines) before penalty
        nesting_depth: Maximum nesting depth before penalty
        parameter_count: Average parameter count before penalty
        max_local_imports: Local imports allowed before penalty / high coupling
    """

    function_length: Number = 50
    nesting_depth: Number = 3
    parameter_count: Number = 4
    max_local_imports: Number = 10

    def __post_init__(self) -> None:
        _validate_non_negative("thresholds", self)


@dataclass(frozen=True)
class Weights:
    """Penalty multipliers, one per metric."""

    function_length: Number = 0.5
    nesting_depth: Number = 10
    parameter_count: Number = 5
    naming_clarity: Number = 30
    dependencies: Number = 2

    def __post_init__(self) -> None:
        _validate_non_negative("weights", self)


@dataclass(frozen=True)
class GradeCutoffs:
    """Lower score bounds of each grade band, evaluated highest first."""

    excellent: Number = 80
    good: Number = 60
    fair: Number = 40

    def __post_init__(self) -> None:
        _validate_non_negative("grades", self)
        if not 100 >= self.excellent >= self.good >= self.fair >= 0:
            raise InvalidConfigError(
                "grades",
                f"{self.excellent}/{self.good}/{self.fair}",
                "cut points must satisfy 100 >= excellent >= good >= fair >= 0",
            )


@dataclass(frozen=True)
class ScoringConfig:
    """Complete scoring configuration."""

    thresholds: Thresholds = field(default_factory=Thresholds)
    weights: Weights = field(default_factory=Weights)
    grades: GradeCutoffs = field(default_factory=GradeCutoffs)


# Built-in configuration used when no config file is supplied
DEFAULT_CONFIG = ScoringConfig()

_SECTIONS = {
    "thresholds": Thresholds,
    "weights": Weights,
    "grades": GradeCutoffs,
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def load_config(config_file: Optional[Path] = None) -> ScoringConfig:
    """Load a scoring configuration.

    Args:
        config_file: Path to a TOML or JSON (``.json`` suffix) config file.
            ``None`` returns the built-in defaults.

    Returns:
        Validated ScoringConfig instance

    Raises:
        ConfigurationError: If the file is missing or cannot be parsed
        InvalidConfigError: If a section, key or value is invalid
    """
    if config_file is None:
        return DEFAULT_CONFIG

    config_file = Path(config_file)
    if not config_file.is_file():
        raise ConfigurationError(f"Config file not found: {config_file}")

    try:
        raw = _load_file(config_file)
    except (OSError, ValueError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    return config_from_dict(raw)


def config_from_dict(raw: Any) -> ScoringConfig:
    """Build a ScoringConfig from parsed config data.

    Sections that are absent keep their defaults; keys absent from a section
    keep that key's default. Keys may be camelCase or snake_case.
    """
    if not isinstance(raw, dict):
        raise InvalidConfigError("config", type(raw).__name__, "top level must be a table/object")

    unknown = set(raw) - set(_SECTIONS)
    if unknown:
        raise InvalidConfigError("config", ", ".join(sorted(unknown)), "unknown section")

    sections = {}
    for name, section_cls in _SECTIONS.items():
        section_raw = raw.get(name, {})
        if not isinstance(section_raw, dict):
            raise InvalidConfigError(name, section_raw, "section must be a table/object")
        sections[name] = _build_section(name, section_cls, section_raw)

    return ScoringConfig(**sections)


def _build_section(name: str, section_cls: type, section_raw: dict) -> Any:
    known = {f.name for f in fields(section_cls)}
    values: dict[str, Number] = {}
    for key, value in section_raw.items():
        field_name = _to_snake_case(key)
        if field_name not in known:
            raise InvalidConfigError(f"{name}.{key}", value, "unknown key")
        # bool is an int subclass but never a meaningful threshold
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidConfigError(f"{name}.{key}", value, "expected a number")
        values[field_name] = value
    return replace(section_cls(), **values)


def _to_snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _load_file(path: Path) -> Any:
    """Parse a config file as JSON or TOML depending on its suffix."""
    if path.suffix.lower() == ".json":
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    with open(path, "rb") as f:
        return tomllib.load(f)
