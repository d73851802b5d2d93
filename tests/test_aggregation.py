# /tests/test_aggregation.py

import datetime
import pytest

from gradebook.models.grade_model import Grade
from gradebook.services.grade_helpers import aggregation, scoring


def make_grade(grade_id, points, max_points=100, category="Homework", student_id=1, class_id=1):
    return Grade(
        id=grade_id, studentId=student_id, classId=class_id, assignmentName=f"Assignment {grade_id}",
        category=category, points=points, maxPoints=max_points, date=datetime.date(2024, 1, grade_id % 28 + 1),
    )


def test_average_of_nothing_is_no_value_not_zero():
    assert aggregation.average([]) is None


def test_average_of_one_grade_equals_its_percentage():
    grade = make_grade(1, 45, 50)
    assert aggregation.average([grade]) == scoring.grade_percentage(grade)


def test_average_is_the_mean_of_percentages_not_of_points():
    grades = [make_grade(1, 10, 10), make_grade(2, 50, 100)]
    # 100% and 50%; summing points first would give 60/110.
    assert aggregation.average(grades) == pytest.approx(75.0)


def test_average_skips_grades_with_zero_max_points():
    assert aggregation.average([make_grade(1, 5, 0)]) is None
    assert aggregation.average([make_grade(1, 5, 0), make_grade(2, 50, 100)]) == 50.0


def test_group_average_is_case_sensitive_and_keeps_first_seen_order():
    grades = [
        make_grade(1, 90, category="Quiz"),
        make_grade(2, 70, category="Test"),
        make_grade(3, 50, category="quiz"),
        make_grade(4, 80, category="Quiz"),
    ]
    groups = aggregation.group_average(grades, lambda g: g.category)

    assert list(groups) == ["Quiz", "Test", "quiz"]
    assert groups["Quiz"] == aggregation.GroupAverage(average=85.0, count=2)
    assert groups["quiz"].average == 50.0


def test_group_average_counts_degenerate_grades_without_averaging_them():
    groups = aggregation.group_average([make_grade(1, 5, 0), make_grade(2, 60)], lambda g: g.classId)
    assert groups[1] == aggregation.GroupAverage(average=60.0, count=2)


def test_extremes():
    grades = [make_grade(1, 72), make_grade(2, 98), make_grade(3, 55)]
    assert aggregation.extremes(grades) == aggregation.Extremes(min=55.0, max=98.0)


def test_extremes_of_nothing_is_no_value():
    assert aggregation.extremes([]) is None
    assert aggregation.extremes([make_grade(1, 3, 0)]) is None
