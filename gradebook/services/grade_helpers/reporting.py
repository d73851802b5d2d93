# /gradebook/services/grade_helpers/reporting.py

"""
Leaderboards, breakdowns and the flat export table built from grade
collections that have already been fetched (and optionally filtered).
"""

import io
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from ...models.grade_model import Grade, GradeView, LetterTier
from ...models.report_model import (
    CategoryPerformance,
    ClassStats,
    GradeDistribution,
    StudentRanking,
)
from ...models.student_model import Student
from .aggregation import average, extremes, group_average, scored_percentages
from .filtering import UNKNOWN, index_by_id, resolve_name
from .scoring import badge_variant, format_percentage, grade_percentage, tier

# Column order and header names of the grade export. Case-sensitive.
EXPORT_COLUMNS = [
    "Student",
    "Student ID",
    "Class",
    "Subject",
    "Assignment",
    "Category",
    "Points",
    "Max Points",
    "Percentage",
    "Date",
    "Notes",
]


def _descending(entries: List, key) -> List:
    # Python's sort is stable, so ties keep their incoming order. Entries
    # without an average go last.
    return sorted(entries, key=lambda e: (key(e) is None, -(key(e) or 0.0)))


def rank_students(students: Sequence, grades: Sequence) -> List[StudentRanking]:
    """
    One ranking row per student id that has grades, best average first.

    Rows start in the order of `students`; grades pointing at unknown students
    follow in first-seen order with `student` left empty. Equal averages are
    not broken any further.
    """
    groups = group_average(grades, lambda g: g.studentId)
    lookup = index_by_id(students)

    ordered_ids = [s.id for s in students if s.id in groups]
    ordered_ids += [student_id for student_id in groups if student_id not in lookup]

    rows = []
    for student_id in ordered_ids:
        stats = groups[student_id]
        student = lookup.get(student_id)
        rows.append(StudentRanking(
            studentId=student_id,
            student=Student.model_validate(student) if student is not None else None,
            studentName=resolve_name(lookup, student_id),
            average=stats.average,
            count=stats.count,
        ))
    return _descending(rows, lambda r: r.average)


def category_breakdown(grades: Sequence) -> List[CategoryPerformance]:
    """Average and count per category label, best category first."""
    rows = [
        CategoryPerformance(category=category, average=stats.average, count=stats.count)
        for category, stats in group_average(grades, lambda g: g.category).items()
    ]
    return _descending(rows, lambda r: r.average)


def tier_distribution(grades: Iterable) -> GradeDistribution:
    counts = {letter.value: 0 for letter in LetterTier}
    for pct in scored_percentages(grades):
        counts[tier(pct).value] += 1
    return GradeDistribution(**counts)


def class_stats(grades: Sequence, class_id: Optional[int] = None) -> Optional[ClassStats]:
    """
    Average, range, count and tier distribution for one class (or for every
    grade when `class_id` is None). None when no grade is selected; when grades
    are selected but none can be scored, only count is filled in.
    """
    selected = [g for g in grades if class_id is None or g.classId == class_id]
    if not selected:
        return None
    bounds = extremes(selected)
    return ClassStats(
        average=average(selected),
        min=bounds.min if bounds is not None else None,
        max=bounds.max if bounds is not None else None,
        count=len(selected),
        distribution=tier_distribution(selected),
    )


def to_grade_views(grades: Iterable, students: Iterable, classes: Iterable) -> List[GradeView]:
    """Joins grades with display names and derived scores, keeping input order."""
    student_lookup = index_by_id(students)
    class_lookup = index_by_id(classes)
    views = []
    for grade in grades:
        pct = grade_percentage(grade)
        views.append(GradeView(
            **Grade.model_validate(grade).model_dump(include=set(Grade.model_fields)),
            studentName=resolve_name(student_lookup, grade.studentId),
            className=resolve_name(class_lookup, grade.classId),
            percentage=pct,
            tier=tier(pct),
            badge=badge_variant(pct),
        ))
    return views


def recent_grades(grades: Sequence, limit: int = 5) -> List:
    """The `limit` newest grades."""
    if limit <= 0:
        return []
    return newest_first(grades)[:limit]


def newest_first(grades: Sequence) -> List:
    """Newest grades first. Grades on the same day keep their input order."""
    return sorted(grades, key=lambda g: g.date, reverse=True)


def build_export_rows(grades: Iterable, students: Iterable, classes: Iterable) -> List[Dict]:
    """
    Flattens grades into export rows, one per grade, in input order.

    Dangling student or class references export as "Unknown".
    """
    student_lookup = index_by_id(students)
    class_lookup = index_by_id(classes)
    rows = []
    for grade in grades:
        student = student_lookup.get(grade.studentId)
        cls = class_lookup.get(grade.classId)
        rows.append({
            "Student": student.name if student is not None else UNKNOWN,
            "Student ID": student.externalId if student is not None else UNKNOWN,
            "Class": cls.name if cls is not None else UNKNOWN,
            "Subject": cls.subject if cls is not None and cls.subject else UNKNOWN,
            "Assignment": grade.assignmentName,
            "Category": grade.category,
            "Points": grade.points,
            "Max Points": grade.maxPoints,
            "Percentage": format_percentage(grade_percentage(grade)),
            "Date": grade.date.isoformat(),
            "Notes": grade.notes or "",
        })
    return rows


def export_as_csv(rows: List[Dict]) -> str:
    """Serialises export rows. An empty export still carries the header line."""
    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    buffer = io.StringIO()
    df.to_csv(buffer, index=False)
    return buffer.getvalue()
