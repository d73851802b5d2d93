# /tests/test_scoring.py

import math
import pytest

from gradebook.models.grade_model import BadgeVariant, LetterTier
from gradebook.services.grade_helpers import scoring


def test_percentage_of_45_out_of_50_is_an_a_with_success_badge():
    """45/50 -> 90.0 -> tier A -> badge success."""
    pct = scoring.percentage(45, 50)
    assert pct == 90.0
    assert scoring.tier(pct) == LetterTier.A
    assert scoring.badge_variant(pct) == BadgeVariant.SUCCESS


@pytest.mark.parametrize("points, max_points", [(5, 0), (0, 0), (5, -10), (None, 10), (10, None), ("abc", 10)])
def test_percentage_returns_no_value_for_degenerate_input(points, max_points):
    assert scoring.percentage(points, max_points) is None


@pytest.mark.parametrize("points, max_points", [(float("nan"), 10), (1, float("inf")), (float("inf"), 10)])
def test_percentage_never_leaks_nan_or_infinity(points, max_points):
    assert scoring.percentage(points, max_points) is None


def test_percentage_stays_within_0_and_100_for_valid_grades():
    for max_points in (1, 7, 50, 100, 250.5):
        steps = 40
        for i in range(steps + 1):
            points = max_points * i / steps
            pct = scoring.percentage(points, max_points)
            assert pct is not None and math.isfinite(pct)
            assert 0.0 <= pct <= 100.0


def test_grade_percentage_reads_points_and_max_points():
    class FakeGrade:
        points = 18
        maxPoints = 20
    assert scoring.grade_percentage(FakeGrade()) == 90.0


@pytest.mark.parametrize("pct, expected", [
    (100, LetterTier.A), (90.0, LetterTier.A), (89.99, LetterTier.B), (80.0, LetterTier.B),
    (79.99, LetterTier.C), (70.0, LetterTier.C), (69.99, LetterTier.D), (60.0, LetterTier.D),
    (59.99, LetterTier.F), (0, LetterTier.F), (-5, LetterTier.F),
])
def test_tier_uses_half_open_cutoffs(pct, expected):
    assert scoring.tier(pct) == expected


@pytest.mark.parametrize("pct, expected", [
    (90.0, BadgeVariant.SUCCESS), (89.99, BadgeVariant.PRIMARY), (80.0, BadgeVariant.PRIMARY),
    (79.99, BadgeVariant.WARNING), (70.0, BadgeVariant.WARNING), (69.99, BadgeVariant.ERROR),
    (0, BadgeVariant.ERROR),
])
def test_badge_variant_cutoffs(pct, expected):
    assert scoring.badge_variant(pct) == expected


def test_badge_collapses_d_and_f_into_error():
    """A 65% is a D on the letter scale but shares the error colour with an F."""
    assert scoring.tier(65) == LetterTier.D
    assert scoring.tier(40) == LetterTier.F
    assert scoring.badge_variant(65) == scoring.badge_variant(40) == BadgeVariant.ERROR


def test_no_value_passes_through_classifiers():
    assert scoring.tier(None) is None
    assert scoring.badge_variant(None) is None
    assert scoring.format_percentage(None) == ""


def test_format_percentage_uses_one_decimal():
    assert scoring.format_percentage(90) == "90.0"
    assert scoring.format_percentage(86.6666) == "86.7"
