# /gradebook/services/database_helpers/grade_repository_sql.py

"""
This module contains the raw SQLAlchemy queries for the Assignment and Grade
tables.
"""

from typing import List, Dict, Optional
from sqlalchemy.orm import Session

from ...db.models.grade_models import Assignment, Grade


class GradeRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Assignment Methods ---

    def get_all_assignments(self) -> List[Assignment]:
        return self.db.query(Assignment).order_by(Assignment.id).all()

    def get_assignment_by_id(self, assignment_id: int) -> Optional[Assignment]:
        return self.db.query(Assignment).filter(Assignment.id == assignment_id).first()

    def add_assignment(self, record: Dict) -> Assignment:
        new_assignment = Assignment(**record)
        self.db.add(new_assignment)
        self.db.commit()
        self.db.refresh(new_assignment)
        return new_assignment

    def update_assignment(self, assignment_id: int, data: Dict) -> Optional[Assignment]:
        db_assignment = self.get_assignment_by_id(assignment_id)
        if db_assignment:
            for key, value in data.items():
                setattr(db_assignment, key, value)
            self.db.commit()
            self.db.refresh(db_assignment)
        return db_assignment

    def delete_assignment(self, assignment_id: int) -> bool:
        db_assignment = self.get_assignment_by_id(assignment_id)
        if db_assignment:
            self.db.delete(db_assignment)
            self.db.commit()
            return True
        return False

    # --- Grade Methods ---

    def get_all_grades(self) -> List[Grade]:
        return self.db.query(Grade).order_by(Grade.id).all()

    def get_grade_by_id(self, grade_id: int) -> Optional[Grade]:
        return self.db.query(Grade).filter(Grade.id == grade_id).first()

    def add_grade(self, record: Dict) -> Grade:
        new_grade = Grade(**record)
        self.db.add(new_grade)
        self.db.commit()
        self.db.refresh(new_grade)
        return new_grade

    def update_grade(self, grade_id: int, data: Dict) -> Optional[Grade]:
        db_grade = self.get_grade_by_id(grade_id)
        if db_grade:
            for key, value in data.items():
                setattr(db_grade, key, value)
            self.db.commit()
            self.db.refresh(db_grade)
        return db_grade

    def delete_grade(self, grade_id: int) -> bool:
        db_grade = self.get_grade_by_id(grade_id)
        if db_grade:
            self.db.delete(db_grade)
            self.db.commit()
            return True
        return False
