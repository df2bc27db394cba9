"""Numeric helpers shared by analyzers, scoring and diffing."""

from .rounding import mean, round_half_up

__all__ = ["mean", "round_half_up"]
