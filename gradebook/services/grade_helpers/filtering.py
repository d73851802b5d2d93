# /gradebook/services/grade_helpers/filtering.py

"""
The filter engine shared by the grades, students and classes listings.

Every function is pure: it returns a new list, keeps the input order and
never mutates its arguments. Criteria are AND-combined and an omitted
criterion imposes no constraint.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from ...models.filter_model import (
    GradeFilterCriteria,
    StudentFilterCriteria,
    ThresholdFilter,
    ThresholdMode,
)
from .aggregation import average
from .scoring import grade_percentage

UNKNOWN = "Unknown"


# --- Lookup helpers ---

def index_by_id(entities: Iterable) -> Dict[int, object]:
    return {entity.id: entity for entity in entities}


def resolve_name(lookup: Dict[int, object], entity_id: Optional[int], default: str = UNKNOWN) -> str:
    """Name of the referenced entity, or the placeholder when the reference dangles."""
    entity = lookup.get(entity_id) if entity_id is not None else None
    name = getattr(entity, "name", None)
    return name if name else default


# --- Predicates ---

def _normalize_query(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    query = text.strip().lower()
    return query or None


def _contains(query: str, *fields: Optional[str]) -> bool:
    return any(field and query in field.lower() for field in fields)


def passes_threshold(pct: Optional[float], threshold: ThresholdFilter, missing_passes: bool = False) -> bool:
    """
    Applies a threshold filter to one percentage. Bounds are inclusive.

    `missing_passes` decides the outcome for a value of None under any mode
    other than `all`.
    """
    if threshold.mode == ThresholdMode.ALL:
        return True
    if pct is None:
        return missing_passes
    if threshold.mode == ThresholdMode.ABOVE:
        return pct >= threshold.min
    if threshold.mode == ThresholdMode.BELOW:
        return pct <= threshold.max
    return threshold.min <= pct <= threshold.max


# --- Grade filtering ---

def filter_grades(
    grades: Sequence,
    criteria: Optional[GradeFilterCriteria] = None,
    students: Iterable = (),
    classes: Iterable = (),
) -> List:
    """
    Returns the grades matching every criterion.

    `students` and `classes` are only consulted for the text search, which
    also matches the resolved student and class names.
    """
    criteria = criteria or GradeFilterCriteria()
    query = _normalize_query(criteria.text)
    student_lookup = index_by_id(students) if query else {}
    class_lookup = index_by_id(classes) if query else {}

    result = []
    for grade in grades:
        if query and not _contains(
            query,
            grade.assignmentName,
            resolve_name(student_lookup, grade.studentId, default=""),
            resolve_name(class_lookup, grade.classId, default=""),
            grade.category,
        ):
            continue
        if criteria.classId is not None and grade.classId != criteria.classId:
            continue
        if criteria.category and grade.category != criteria.category:
            continue
        if not criteria.dateRange.is_open and not criteria.dateRange.contains(grade.date):
            continue
        if not passes_threshold(grade_percentage(grade), criteria.threshold):
            continue
        result.append(grade)
    return result


# --- Student filtering ---

def search_students(students: Sequence, text: Optional[str]) -> List:
    """Case-insensitive search over name, roster ID and email."""
    query = _normalize_query(text)
    if not query:
        return list(students)
    return [s for s in students if _contains(query, s.name, s.externalId, s.email)]


def filter_students(
    students: Sequence,
    grades: Iterable,
    criteria: Optional[StudentFilterCriteria] = None,
) -> List:
    """
    Returns the students matching every criterion.

    The threshold applies to each student's overall average. A student with
    no grades has no average and passes any threshold; the `assignmentType`
    and `dateRange` criteria need at least one matching grade, so such a
    student fails those.
    """
    criteria = criteria or StudentFilterCriteria()
    grades_by_student: Dict[int, list] = {}
    for grade in grades:
        grades_by_student.setdefault(grade.studentId, []).append(grade)

    result = []
    for student in search_students(students, criteria.text):
        own_grades = grades_by_student.get(student.id, [])
        if criteria.classId is not None and student.classId != criteria.classId:
            continue
        if criteria.assignmentType and not any(g.category == criteria.assignmentType for g in own_grades):
            continue
        if not criteria.dateRange.is_open and not any(criteria.dateRange.contains(g.date) for g in own_grades):
            continue
        if not passes_threshold(average(own_grades), criteria.threshold, missing_passes=True):
            continue
        result.append(student)
    return result


# --- Class search ---

def search_classes(classes: Sequence, text: Optional[str]) -> List:
    """Case-insensitive search over class name, subject and term."""
    query = _normalize_query(text)
    if not query:
        return list(classes)
    return [c for c in classes if _contains(query, c.name, c.subject, c.term)]
