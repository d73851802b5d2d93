# /gradebook/services/database_helpers/class_student_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the Class and Student
tables. It is the direct interface to the database for all roster data.

Deletes never cascade: removing a class leaves its students (and their
grades) pointing at an id that no longer resolves.
"""

from typing import List, Dict, Optional
from sqlalchemy.orm import Session

# Import the SQLAlchemy models this repository will interact with.
from ...db.models.class_student_models import Class, Student


class ClassStudentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Class Methods ---

    def get_all_classes(self) -> List[Class]:
        return self.db.query(Class).order_by(Class.id).all()

    def get_class_by_id(self, class_id: int) -> Optional[Class]:
        return self.db.query(Class).filter(Class.id == class_id).first()

    def add_class(self, record: Dict) -> Class:
        """Creates a new Class record. The store assigns the id unless the record carries one."""
        new_class = Class(**record)
        self.db.add(new_class)
        self.db.commit()
        self.db.refresh(new_class)
        return new_class

    def update_class(self, class_id: int, data: Dict) -> Optional[Class]:
        db_class = self.get_class_by_id(class_id)
        if db_class:
            for key, value in data.items():
                setattr(db_class, key, value)
            self.db.commit()
            self.db.refresh(db_class)
        return db_class

    def delete_class(self, class_id: int) -> bool:
        db_class = self.get_class_by_id(class_id)
        if db_class:
            self.db.delete(db_class)
            self.db.commit()
            return True
        return False

    # --- Student Methods ---

    def get_all_students(self) -> List[Student]:
        return self.db.query(Student).order_by(Student.id).all()

    def get_student_by_id(self, student_id: int) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def get_students_by_class_id(self, class_id: int) -> List[Student]:
        return self.db.query(Student).filter(Student.classId == class_id).order_by(Student.id).all()

    def get_student_by_external_id(self, external_id: str) -> Optional[Student]:
        """Looks a student up by the roster ID typed in by the teacher."""
        return self.db.query(Student).filter(Student.externalId == external_id).first()

    def add_student(self, record: Dict) -> Student:
        new_student = Student(**record)
        self.db.add(new_student)
        self.db.commit()
        self.db.refresh(new_student)
        return new_student

    def update_student(self, student_id: int, data: Dict) -> Optional[Student]:
        db_student = self.get_student_by_id(student_id)
        if db_student:
            for key, value in data.items():
                setattr(db_student, key, value)
            self.db.commit()
            self.db.refresh(db_student)
        return db_student

    def delete_student(self, student_id: int) -> bool:
        db_student = self.get_student_by_id(student_id)
        if db_student:
            self.db.delete(db_student)
            self.db.commit()
            return True
        return False
