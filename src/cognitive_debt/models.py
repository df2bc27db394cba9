"""Data models shared by analysis, scoring, impact and diff.

All records are frozen: once a file has been analyzed its metrics and score
are a snapshot that later stages read and combine but never modify.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

# ── Offender items ────────────────────────────────────────────────────


@dataclass(frozen=True)
class FunctionSpan:
    name: str
    line: int
    length: int


@dataclass(frozen=True)
class NestedFunction:
    name: str
    line: int
    depth: int


@dataclass(frozen=True)
class FunctionSignature:
    name: str
    line: int
    param_count: int


@dataclass(frozen=True)
class UnclearName:
    name: str
    line: int
    kind: str  # "variable" | "function" | "parameter"
    reason: str


@dataclass(frozen=True)
class ImportRef:
    source: str
    line: int


# ── Metric records ────────────────────────────────────────────────────


@dataclass(frozen=True)
class FunctionLengthMetrics:
    total_functions: int = 0
    average_length: int = 0
    max_length: int = 0
    long_functions: tuple[FunctionSpan, ...] = ()


@dataclass(frozen=True)
class NestingDepthMetrics:
    total_functions: int = 0
    average_depth: float = 0.0
    max_depth: int = 0
    deeply_nested_functions: tuple[NestedFunction, ...] = ()


@dataclass(frozen=True)
class ParameterCountMetrics:
    total_functions: int = 0
    average_params: float = 0.0
    max_params: int = 0
    functions_with_too_many_params: tuple[FunctionSignature, ...] = ()


@dataclass(frozen=True)
class NamingClarityMetrics:
    total_identifiers: int = 0
    unclear_count: int = 0
    unclear_percent: int = 0
    unclear_names: tuple[UnclearName, ...] = ()


@dataclass(frozen=True)
class DependencyMetrics:
    total_imports: int = 0
    local_imports: int = 0
    external_imports: int = 0
    high_coupling: bool = False
    local_imports_list: tuple[ImportRef, ...] = ()


@dataclass(frozen=True)
class MetricSet:
    """The five independent metric records for one file."""

    function_length: FunctionLengthMetrics = field(default_factory=FunctionLengthMetrics)
    nesting_depth: NestingDepthMetrics = field(default_factory=NestingDepthMetrics)
    parameter_count: ParameterCountMetrics = field(default_factory=ParameterCountMetrics)
    naming_clarity: NamingClarityMetrics = field(default_factory=NamingClarityMetrics)
    dependencies: DependencyMetrics = field(default_factory=DependencyMetrics)


# ── Scoring ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MetricScore:
    """Per-metric breakdown entry: subscore = max(0, 100 - penalty)."""

    subscore: float
    penalty: int


@dataclass(frozen=True)
class ScoreData:
    score: int
    grade: str  # "Excellent" | "Good" | "Fair" | "Poor"
    penalties: dict[str, float]
    breakdown: dict[str, MetricScore]


# ── Issues ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Issue:
    """One reportable problem drawn from the metric offender lists."""

    severity: str  # "high" | "medium" | "low"
    description: str
    line: int
    metric: str


# ── Analysis results ──────────────────────────────────────────────────


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analyzing one file: success with metrics, or an error."""

    file_path: str
    success: bool
    metrics: Optional[MetricSet] = None
    score_data: Optional[ScoreData] = None
    line_count: int = 0
    error: Optional[str] = None

    @classmethod
    def ok(
        cls, file_path: str, metrics: MetricSet, score_data: ScoreData, line_count: int
    ) -> AnalysisResult:
        return cls(
            file_path=file_path,
            success=True,
            metrics=metrics,
            score_data=score_data,
            line_count=line_count,
        )

    @classmethod
    def failed(cls, file_path: str, error: str) -> AnalysisResult:
        return cls(file_path=file_path, success=False, error=error)

    @property
    def score(self) -> int:
        return self.score_data.score if self.score_data else 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AnalysisSummary:
    files_analyzed: int
    failed_files: int
    average_score: int
    poor_files: tuple[str, ...] = ()


# ── Change impact ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class DependentScan:
    """Files that import a target (fan-in)."""

    target: str
    dependents: tuple[str, ...] = ()

    @property
    def fan_in(self) -> int:
        return len(self.dependents)


@dataclass(frozen=True)
class RiskAssessment:
    level: str  # "Low" | "Medium" | "High" | "Critical"
    reasons: tuple[str, ...]
    likely_impacts: tuple[str, ...]
    suggestion: str


@dataclass(frozen=True)
class ImpactReport:
    target: str
    relative_path: str
    analysis: AnalysisResult
    fan_in: int
    dependents: tuple[str, ...]
    risk: RiskAssessment

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
