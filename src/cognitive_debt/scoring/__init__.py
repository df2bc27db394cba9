"""Scoring engine: metrics + config -> score, grade, breakdown."""

from .calculator import EXCELLENT, FAIR, GOOD, POOR, calculate_score, grade_for

__all__ = ["calculate_score", "grade_for", "EXCELLENT", "GOOD", "FAIR", "POOR"]
