"""Change impact: fan-in scanning and risk assessment."""

from .engine import analyze_change_impact
from .risk import CRITICAL, HIGH, LOW, MEDIUM, calculate_risk, risk_level
from .scanner import find_dependents, resolves_to

__all__ = [
    "analyze_change_impact",
    "calculate_risk",
    "risk_level",
    "find_dependents",
    "resolves_to",
    "CRITICAL",
    "HIGH",
    "MEDIUM",
    "LOW",
]
