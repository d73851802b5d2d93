# /gradebook/services/student_service.py

"""
Business logic for students: CRUD, the filtered roster listing, and the
per-student profile page.
"""

import logging
from typing import List, Optional

from ..models import student_model
from ..models.filter_model import StudentFilterCriteria
from ..models.report_model import StudentProfile
from .database_service import DatabaseService
from .grade_helpers import aggregation, filtering, reporting

logger = logging.getLogger(__name__)


# --- CRUD ---

def create_student(student_data: student_model.StudentCreate, db: DatabaseService) -> student_model.Student:
    """
    Creates a student. Roster IDs must be unique, so a second student with the
    same `externalId` is rejected.
    """
    existing_student = db.get_student_by_external_id(student_data.externalId)
    if existing_student:
        logger.warning("Student with roster ID %s already exists (id=%s).", student_data.externalId, existing_student.id)
        raise ValueError(f"A student with ID {student_data.externalId} already exists.")
    new_student = db.add_student(student_data.model_dump(mode="python"))
    logger.info("Created student %s (%s)", new_student.id, new_student.name)
    return new_student


def get_student(student_id: int, db: DatabaseService) -> Optional[student_model.Student]:
    return db.get_student_by_id(student_id)


def update_student(student_id: int, student_update: student_model.StudentUpdate, db: DatabaseService) -> Optional[student_model.Student]:
    update_data = student_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    new_external_id = update_data.get("externalId")
    if new_external_id:
        clash = db.get_student_by_external_id(new_external_id)
        if clash and clash.id != student_id:
            raise ValueError(f"A student with ID {new_external_id} already exists.")
    return db.update_student(student_id, update_data)


def delete_student(student_id: int, db: DatabaseService) -> bool:
    """
    Removes a student. Their grades stay in the store and show up as
    belonging to an "Unknown" student from then on.
    """
    was_deleted = db.delete_student(student_id)
    if not was_deleted:
        logger.warning("Delete requested for unknown student %s", student_id)
    return was_deleted


# --- Listings ---

def list_students(db: DatabaseService, criteria: Optional[StudentFilterCriteria] = None) -> List[student_model.StudentSummary]:
    """The roster page: filtered students, each with their running average."""
    snapshot = db.load_snapshot()
    students = filtering.filter_students(snapshot.students, snapshot.grades, criteria)
    grade_groups = aggregation.group_average(snapshot.grades, lambda g: g.studentId)

    summaries = []
    for student in students:
        stats = grade_groups.get(student.id)
        summaries.append(student_model.StudentSummary(
            **student.model_dump(),
            average=stats.average if stats else None,
            gradeCount=stats.count if stats else 0,
        ))
    return summaries


def get_student_profile(student_id: int, db: DatabaseService) -> Optional[StudentProfile]:
    snapshot = db.load_snapshot()
    student = next((s for s in snapshot.students if s.id == student_id), None)
    if student is None:
        return None

    own_grades = [g for g in snapshot.grades if g.studentId == student_id]
    views = reporting.to_grade_views(reporting.newest_first(own_grades), snapshot.students, snapshot.classes)
    return StudentProfile(
        student=student,
        className=filtering.resolve_name(filtering.index_by_id(snapshot.classes), student.classId),
        overallAverage=aggregation.average(own_grades),
        grades=views,
        categories=reporting.category_breakdown(own_grades),
    )
