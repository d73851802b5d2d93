# /gradebook/services/grade_helpers/aggregation.py

"""
Aggregate statistics over collections of grades.

Empty input never raises and never produces 0 by accident: the mean or range
of nothing is `None`.
"""

from typing import Callable, Dict, Hashable, Iterable, List, NamedTuple, Optional, TypeVar

from .scoring import grade_percentage

K = TypeVar("K", bound=Hashable)


class GroupAverage(NamedTuple):
    average: Optional[float]
    count: int


class Extremes(NamedTuple):
    min: float
    max: float


def scored_percentages(grades: Iterable) -> List[float]:
    """Percentages of every grade that has one, in input order."""
    values = []
    for grade in grades:
        pct = grade_percentage(grade)
        if pct is not None:
            values.append(pct)
    return values


def mean(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def average(grades: Iterable) -> Optional[float]:
    """Arithmetic mean of the grades' percentages, or None when there are none."""
    return mean(scored_percentages(grades))


def group_average(grades: Iterable, key_fn: Callable[[object], K]) -> Dict[K, GroupAverage]:
    """
    Groups grades by `key_fn` and averages each group.

    Keys are compared exactly (category labels are case-sensitive). The
    returned dict keeps first-seen key order. `count` includes grades whose
    percentage is undefined; `average` does not.
    """
    buckets: Dict[K, list] = {}
    for grade in grades:
        buckets.setdefault(key_fn(grade), []).append(grade)
    return {key: GroupAverage(average=average(members), count=len(members)) for key, members in buckets.items()}


def extremes(grades: Iterable) -> Optional[Extremes]:
    values = scored_percentages(grades)
    if not values:
        return None
    return Extremes(min=min(values), max=max(values))
