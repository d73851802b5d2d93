# /gradebook/services/assignment_service.py

from typing import List, Optional

from ..models import assignment_model
from .database_service import DatabaseService


def create_assignment(assignment_data: assignment_model.AssignmentCreate, db: DatabaseService) -> assignment_model.Assignment:
    return db.add_assignment(assignment_data.model_dump())


def get_assignment(assignment_id: int, db: DatabaseService) -> Optional[assignment_model.Assignment]:
    return db.get_assignment_by_id(assignment_id)


def list_assignments(db: DatabaseService, class_id: Optional[int] = None) -> List[assignment_model.Assignment]:
    """All assignments, or only those of one class (used to prefill the grade form)."""
    assignments = db.get_all_assignments()
    if class_id is None:
        return assignments
    return [a for a in assignments if a.classId == class_id]


def update_assignment(assignment_id: int, assignment_update: assignment_model.AssignmentUpdate, db: DatabaseService) -> Optional[assignment_model.Assignment]:
    update_data = assignment_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    return db.update_assignment(assignment_id, update_data)


def delete_assignment(assignment_id: int, db: DatabaseService) -> bool:
    return db.delete_assignment(assignment_id)
