# /gradebook/services/grade_service.py

"""
Business logic for grades: CRUD and the filtered grade listing.
"""

import logging
from typing import List, Optional

from ..models import grade_model
from ..models.filter_model import GradeFilterCriteria
from .database_service import DatabaseService
from .grade_helpers import filtering, reporting

logger = logging.getLogger(__name__)


def create_grade(grade_data: grade_model.GradeCreate, db: DatabaseService) -> grade_model.Grade:
    new_grade = db.add_grade(grade_data.model_dump())
    logger.info("Recorded grade %s for student %s", new_grade.id, new_grade.studentId)
    return new_grade


def get_grade(grade_id: int, db: DatabaseService) -> Optional[grade_model.Grade]:
    return db.get_grade_by_id(grade_id)


def update_grade(grade_id: int, grade_update: grade_model.GradeUpdate, db: DatabaseService) -> Optional[grade_model.Grade]:
    """
    Partially updates a grade. When only one of points/maxPoints changes, the
    merged record must still satisfy points <= maxPoints.
    """
    update_data = grade_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")

    if ("points" in update_data) != ("maxPoints" in update_data):
        current = db.get_grade_by_id(grade_id)
        if current is None:
            return None
        points = update_data.get("points", current.points)
        max_points = update_data.get("maxPoints", current.maxPoints)
        if points is not None and max_points is not None and points > max_points:
            raise ValueError("Points earned cannot exceed maximum points")

    return db.update_grade(grade_id, update_data)


def delete_grade(grade_id: int, db: DatabaseService) -> bool:
    was_deleted = db.delete_grade(grade_id)
    if not was_deleted:
        logger.warning("Delete requested for unknown grade %s", grade_id)
    return was_deleted


def list_grades(db: DatabaseService, criteria: Optional[GradeFilterCriteria] = None) -> List[grade_model.GradeView]:
    """
    The grades page: every grade matching the criteria, joined with student
    and class names, newest first.
    """
    snapshot = db.load_snapshot()
    matching = filtering.filter_grades(snapshot.grades, criteria, snapshot.students, snapshot.classes)
    return reporting.to_grade_views(reporting.newest_first(matching), snapshot.students, snapshot.classes)
