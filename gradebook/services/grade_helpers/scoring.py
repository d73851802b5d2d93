# /gradebook/services/grade_helpers/scoring.py

"""
Percentage and letter-tier helpers.

Every function here returns `None` as its "no value" result instead of letting
NaN or Infinity reach a caller. A zero, negative or non-numeric denominator is
the usual way to get there.
"""

import math
from typing import Optional, Union

from ...models.grade_model import LetterTier, BadgeVariant

Number = Union[int, float]

# Half-open lower bounds, highest first. Anything below the last bound is an F.
TIER_CUTOFFS = (
    (90.0, LetterTier.A),
    (80.0, LetterTier.B),
    (70.0, LetterTier.C),
    (60.0, LetterTier.D),
)

BADGE_CUTOFFS = (
    (90.0, BadgeVariant.SUCCESS),
    (80.0, BadgeVariant.PRIMARY),
    (70.0, BadgeVariant.WARNING),
)


def _as_finite(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def percentage(points: Optional[Number], max_points: Optional[Number]) -> Optional[float]:
    """
    Converts earned points into a percentage of `max_points`.

    Returns None when the ratio is undefined (max_points <= 0 or either value
    missing or non-finite).
    """
    earned = _as_finite(points)
    possible = _as_finite(max_points)
    if earned is None or possible is None or possible <= 0:
        return None
    # Multiplying first keeps whole-number results exact (45 / 50 -> 90.0).
    return earned * 100.0 / possible


def grade_percentage(grade) -> Optional[float]:
    """`percentage` over any object exposing `points` and `maxPoints`."""
    return percentage(getattr(grade, "points", None), getattr(grade, "maxPoints", None))


def tier(pct: Optional[float]) -> Optional[LetterTier]:
    """Five-way letter tier: A [90,inf), B [80,90), C [70,80), D [60,70), F below 60."""
    if pct is None:
        return None
    for cutoff, letter in TIER_CUTOFFS:
        if pct >= cutoff:
            return letter
    return LetterTier.F


def badge_variant(pct: Optional[float]) -> Optional[BadgeVariant]:
    """
    Four-way colour bucket used by cards and badges. D and F share the
    `error` bucket, so this is deliberately not derived from `tier`.
    """
    if pct is None:
        return None
    for cutoff, variant in BADGE_CUTOFFS:
        if pct >= cutoff:
            return variant
    return BadgeVariant.ERROR


def format_percentage(pct: Optional[float]) -> str:
    """One-decimal display string; empty when there is no value."""
    return "" if pct is None else f"{pct:.1f}"
