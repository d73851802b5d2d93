# /gradebook/services/class_service.py

"""
This service module acts as the business logic layer for all operations
related to classes.

Deleting a class does not touch the students or grades that reference it;
those references simply stop resolving and display as "Unknown".
"""

import logging
from typing import List, Optional

import pandas as pd

from ..models import class_model, student_model
from .database_service import DatabaseService
from .grade_helpers import aggregation, filtering

logger = logging.getLogger(__name__)


# --- Facade Methods for CRUD Operations ---

def create_class(class_data: class_model.ClassCreate, db: DatabaseService) -> class_model.Class:
    new_class = db.add_class(class_data.model_dump())
    logger.info("Created class %s (%s)", new_class.id, new_class.name)
    return new_class


def get_class(class_id: int, db: DatabaseService) -> Optional[class_model.Class]:
    return db.get_class_by_id(class_id)


def update_class(class_id: int, class_update: class_model.ClassUpdate, db: DatabaseService) -> Optional[class_model.Class]:
    update_data = class_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    return db.update_class(class_id, update_data)


def delete_class_by_id(class_id: int, db: DatabaseService) -> bool:
    was_deleted = db.delete_class(class_id)
    if not was_deleted:
        logger.warning("Delete requested for unknown class %s", class_id)
    return was_deleted


# --- Data Assembly ---

def get_all_classes_with_summary(db: DatabaseService, text: Optional[str] = None) -> List[class_model.ClassSummary]:
    """
    Retrieves every class matching the search text and enriches it with its
    student count, grade count and average percentage.
    """
    snapshot = db.load_snapshot()
    classes = filtering.search_classes(snapshot.classes, text)
    if not classes:
        return []

    students_df = pd.DataFrame([{"classId": s.classId} for s in snapshot.students])
    student_counts = {}
    if not students_df.empty:
        student_counts = students_df.dropna(subset=["classId"]).groupby("classId").size().to_dict()

    grade_groups = aggregation.group_average(snapshot.grades, lambda g: g.classId)

    summary_list = []
    for cls in classes:
        stats = grade_groups.get(cls.id)
        summary_list.append(class_model.ClassSummary(
            **cls.model_dump(),
            studentCount=int(student_counts.get(cls.id, 0)),
            gradeCount=stats.count if stats else 0,
            average=stats.average if stats else None,
        ))
    return summary_list


def get_students_in_class(class_id: int, db: DatabaseService) -> Optional[List[student_model.Student]]:
    """The class roster, or None when the class does not exist."""
    if db.get_class_by_id(class_id) is None:
        return None
    return db.get_students_by_class_id(class_id)
