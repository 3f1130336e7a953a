"""Rating arithmetic shared by providers, products and analytics."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with .5 going away from zero (``round()`` would round to even)."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def mean_rating(ratings: Iterable[int]) -> float:
    """Arithmetic mean of the ratings, 0.0 when there are none."""
    values = list(ratings)
    if not values:
        return 0.0
    return sum(values) / len(values)
