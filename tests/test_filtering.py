# /tests/test_filtering.py

import datetime
import pytest

from gradebook.models.class_model import Class
from gradebook.models.filter_model import (
    DateRange,
    GradeFilterCriteria,
    StudentFilterCriteria,
    ThresholdFilter,
    ThresholdMode,
)
from gradebook.models.grade_model import Grade
from gradebook.models.student_model import Student
from gradebook.services.grade_helpers import filtering

# --- Test Data Fixtures ---

def make_grade(grade_id, points, max_points=100, student_id=1, class_id=10, category="Homework",
               date="2024-01-15", assignment="Worksheet"):
    return Grade(
        id=grade_id, studentId=student_id, classId=class_id, assignmentName=assignment,
        category=category, points=points, maxPoints=max_points, date=date,
    )


@pytest.fixture
def students():
    return [
        Student(id=1, externalId="S-001", name="Alice Moreno", email="alice@school.edu", classId=10),
        Student(id=2, externalId="S-002", name="Ben Okafor", email="ben@school.edu", classId=10),
        Student(id=3, externalId="S-003", name="Chloe Park", email="chloe@school.edu", classId=20),
    ]


@pytest.fixture
def classes():
    return [
        Class(id=10, name="Algebra I", subject="Mathematics", term="Fall 2024"),
        Class(id=20, name="World History", subject="History", term=None),
    ]


@pytest.fixture
def grades():
    return [
        make_grade(1, 92, student_id=1, class_id=10, category="Quiz", date="2024-01-10", assignment="Fractions Quiz"),
        make_grade(2, 75, student_id=2, class_id=10, category="Homework", date="2024-02-01", assignment="Chapter 3"),
        make_grade(3, 58, student_id=3, class_id=20, category="Test", date="2024-03-05", assignment="Rome Unit Test"),
        make_grade(4, 81, student_id=1, class_id=20, category="Project", date="2024-03-20", assignment="Timeline Poster"),
    ]


def ids(items):
    return [item.id for item in items]


# --- Grade filtering ---

def test_no_criteria_is_the_identity(grades, students, classes):
    result = filtering.filter_grades(grades, GradeFilterCriteria(), students, classes)
    assert result == grades
    assert result is not grades
    assert filtering.filter_grades(grades) == grades


def test_filter_does_not_mutate_input(grades):
    before = list(grades)
    filtering.filter_grades(grades, GradeFilterCriteria(category="Quiz"))
    assert grades == before


def test_between_threshold_includes_both_boundaries():
    grades = [make_grade(1, 70.0), make_grade(2, 90.0), make_grade(3, 69.99), make_grade(4, 90.01), make_grade(5, 80)]
    criteria = GradeFilterCriteria(threshold=ThresholdFilter(mode=ThresholdMode.BETWEEN, min=70, max=90))
    assert ids(filtering.filter_grades(grades, criteria)) == [1, 2, 5]


def test_above_and_below_thresholds_are_inclusive(grades):
    above = GradeFilterCriteria(threshold=ThresholdFilter(mode="above", min=81))
    below = GradeFilterCriteria(threshold=ThresholdFilter(mode="below", max=75))
    assert ids(filtering.filter_grades(grades, above)) == [1, 4]
    assert ids(filtering.filter_grades(grades, below)) == [2, 3]


def test_all_mode_ignores_bounds(grades):
    criteria = GradeFilterCriteria(threshold=ThresholdFilter(mode="all", min=99, max=1))
    assert filtering.filter_grades(grades, criteria) == grades


def test_zero_max_points_grade_only_survives_mode_all():
    grades = [make_grade(1, 5, max_points=0), make_grade(2, 95)]
    above = GradeFilterCriteria(threshold=ThresholdFilter(mode="above", min=0))
    assert ids(filtering.filter_grades(grades, above)) == [2]
    assert ids(filtering.filter_grades(grades, GradeFilterCriteria())) == [1, 2]


def test_date_range_start_only():
    grades = [make_grade(1, 80, date="2024-01-10"), make_grade(2, 60, date="2024-03-01")]
    criteria = GradeFilterCriteria(dateRange=DateRange(start="2024-02-01"))
    assert ids(filtering.filter_grades(grades, criteria)) == [2]


def test_date_range_end_only(grades):
    criteria = GradeFilterCriteria(dateRange=DateRange(end="2024-02-01"))
    assert ids(filtering.filter_grades(grades, criteria)) == [1, 2]


def test_date_range_is_inclusive_on_both_ends(grades):
    criteria = GradeFilterCriteria(dateRange=DateRange(start="2024-02-01", end="2024-03-05"))
    assert ids(filtering.filter_grades(grades, criteria)) == [2, 3]


def test_date_range_ignores_time_of_day():
    late_in_the_day = make_grade(1, 80, date="2024-03-01T23:59:00")
    criteria = GradeFilterCriteria(dateRange=DateRange(start="2024-03-01T12:00:00", end="2024-03-01"))
    assert ids(filtering.filter_grades([late_in_the_day], criteria)) == [1]


@pytest.mark.parametrize("text, expected", [
    ("fractions", [1]),         # assignment name
    ("ALICE", [1, 4]),          # resolved student name
    ("world history", [3, 4]),  # resolved class name
    ("project", [4]),           # category
    ("   ", [1, 2, 3, 4]),      # blank text is no constraint
])
def test_text_search_is_case_insensitive_across_joined_fields(grades, students, classes, text, expected):
    result = filtering.filter_grades(grades, GradeFilterCriteria(text=text), students, classes)
    assert ids(result) == expected


def test_text_search_tolerates_dangling_references(students, classes):
    orphan = make_grade(9, 88, student_id=404, class_id=505, assignment="Lab Report")
    assert ids(filtering.filter_grades([orphan], GradeFilterCriteria(text="lab"), students, classes)) == [9]
    assert filtering.filter_grades([orphan], GradeFilterCriteria(text="alice"), students, classes) == []


def test_class_and_category_are_exact_matches(grades):
    assert ids(filtering.filter_grades(grades, GradeFilterCriteria(classId=20))) == [3, 4]
    assert ids(filtering.filter_grades(grades, GradeFilterCriteria(category="Quiz"))) == [1]
    # Category labels are free text and compared case-sensitively.
    assert filtering.filter_grades(grades, GradeFilterCriteria(category="quiz")) == []


def test_criteria_are_combined_with_and(grades, students, classes):
    criteria = GradeFilterCriteria(
        text="alice",
        classId=20,
        threshold=ThresholdFilter(mode="above", min=80),
    )
    assert ids(filtering.filter_grades(grades, criteria, students, classes)) == [4]


# --- Student filtering ---

def test_student_without_grades_passes_any_threshold(students):
    """
    Permissive default carried over from the roster page: a student with no
    grades has no average, and a missing average is treated as passing.
    """
    newcomer = Student(id=99, externalId="S-099", name="Dana New", email="dana@school.edu")
    graded = [make_grade(1, 85, student_id=1)]
    criteria = StudentFilterCriteria(threshold=ThresholdFilter(mode="above", min=90))

    result = filtering.filter_students(students + [newcomer], graded, criteria)

    assert 1 not in ids(result)
    assert 99 in ids(result)


def test_student_threshold_uses_the_overall_average(students, grades):
    # Alice: (92 + 81) / 2 = 86.5, Ben: 75, Chloe: 58
    criteria = StudentFilterCriteria(threshold=ThresholdFilter(mode="between", min=70, max=90))
    assert ids(filtering.filter_students(students, grades, criteria)) == [1, 2]


def test_student_assignment_type_needs_a_matching_grade(students, grades):
    criteria = StudentFilterCriteria(assignmentType="Project")
    assert ids(filtering.filter_students(students, grades, criteria)) == [1]


def test_student_date_range_needs_a_grade_in_range(students, grades):
    criteria = StudentFilterCriteria(dateRange=DateRange(start="2024-03-01"))
    assert ids(filtering.filter_students(students, grades, criteria)) == [1, 3]


def test_student_text_search_covers_roster_id_and_email(students, grades):
    assert ids(filtering.filter_students(students, grades, StudentFilterCriteria(text="s-002"))) == [2]
    assert ids(filtering.filter_students(students, grades, StudentFilterCriteria(text="CHLOE@"))) == [3]


def test_student_class_filter(students, grades):
    assert ids(filtering.filter_students(students, grades, StudentFilterCriteria(classId=10))) == [1, 2]


# --- Class search ---

def test_search_classes_matches_name_subject_and_term(classes):
    assert ids(filtering.search_classes(classes, "math")) == [10]
    assert ids(filtering.search_classes(classes, "fall")) == [10]
    assert ids(filtering.search_classes(classes, "history")) == [20]
    assert filtering.search_classes(classes, None) == classes


def test_resolve_name_falls_back_to_unknown(students):
    lookup = filtering.index_by_id(students)
    assert filtering.resolve_name(lookup, 2) == "Ben Okafor"
    assert filtering.resolve_name(lookup, 404) == "Unknown"
    assert filtering.resolve_name(lookup, None) == "Unknown"
