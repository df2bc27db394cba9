"""Data models for snapshot diffing."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

NEW = "new"
DELETED = "deleted"
MODIFIED = "modified"

IMPROVED = "improved"
DEGRADED = "degraded"
UNCHANGED = "unchanged"


@dataclass
class MetricTotals:
    """Before/after running totals for one aggregate metric."""

    before: float = 0
    after: float = 0

    @property
    def delta(self) -> float:
        return self.after - self.before

    def add(self, before: float, after: float) -> None:
        self.before += before
        self.after += after

    def to_dict(self) -> dict[str, float]:
        return {"before": self.before, "after": self.after, "delta": self.delta}


@dataclass(frozen=True)
class FileDiff:
    """Score change of one file between two snapshots."""

    file: str
    status: str  # "new" | "deleted" | "modified"
    delta_score: int
    change_percent: int
    reasons: tuple[str, ...] = ()


@dataclass
class DiffResult:
    """Complete comparison of a base and a target snapshot.

    ``files`` is sorted by ``delta_score`` ascending, most degraded first.
    """

    files: list[FileDiff] = field(default_factory=list)
    metrics: dict[str, MetricTotals] = field(default_factory=dict)
    new_files: int = 0
    deleted_files: int = 0
    modified_files: int = 0
    overall_change_percent: int = 0
    status: str = UNCHANGED

    def to_dict(self) -> dict[str, Any]:
        return {
            "files": [asdict(f) for f in self.files],
            "metrics": {name: totals.to_dict() for name, totals in self.metrics.items()},
            "new_files": self.new_files,
            "deleted_files": self.deleted_files,
            "modified_files": self.modified_files,
            "overall_change_percent": self.overall_change_percent,
            "status": self.status,
        }
