"""
Money helpers.

Amounts are plain floats in the trip's currency. Every comparison goes
through a tolerance instead of exact equality:

- EPSILON (0.01): below this a balance or a suggested payment is noise.
- SHARE_EPSILON (0.009): below this a per-pair share is treated as settled.
"""

import math
from typing import Iterable

EPSILON = 0.01
SHARE_EPSILON = 0.009


def money_sum(amounts: Iterable[float]) -> float:
    """Exactly rounded sum, independent of the order of the amounts."""
    return math.fsum(amounts)


def is_negligible(amount: float, tolerance: float = EPSILON) -> bool:
    return abs(amount) < tolerance


def approx_equal(a: float, b: float, tolerance: float = EPSILON) -> bool:
    return abs(a - b) < tolerance


def round_money(amount: float) -> float:
    """Two-decimal rounding for presentation only."""
    return round(amount, 2)
