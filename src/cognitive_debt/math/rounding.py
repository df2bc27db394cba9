"""Rounding and averaging.

Reported figures round half away from zero for positive values and half up
(toward +inf) in general: ``round_half_up(2.5) == 3`` and
``round_half_up(-2.5) == -2``. Python's built-in ``round`` uses banker's
rounding and would make scores drift by one on exact halves.
"""

import math
import statistics as stdlib_stats
from typing import Sequence, Union

Number = Union[int, float]


def round_half_up(value: float, digits: int = 0) -> Number:
    """Round ``value`` half up to ``digits`` decimal places.

    Returns an ``int`` when ``digits`` is 0.
    """
    if digits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def mean(values: Sequence[Number]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return float(stdlib_stats.fmean(values))
