# /gradebook/services/database_service.py

"""
The Entity Gateway: one facade per request over the SQL repositories.

Reads return Pydantic models in the canonical entity shape, so nothing above
this layer touches ORM objects or a live session. Get and update return None
and delete returns False when the id does not exist. Any SQLAlchemy failure
is rolled back, logged and re-raised as `GatewayError`.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Generator, List, Optional, Tuple, TypeVar

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

# --- Core Database Setup ---
from ..db.database import get_db

from ..models.student_model import Student
from ..models.class_model import Class
from ..models.assignment_model import Assignment
from ..models.grade_model import Grade

from .database_helpers.class_student_repository_sql import ClassStudentRepositorySQL
from .database_helpers.grade_repository_sql import GradeRepositorySQL
from .exceptions import GatewayError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Tables whose integer ids may be supplied explicitly by the seeder.
ID_TABLES = ("classes", "students", "assignments", "grades")


@dataclass(frozen=True)
class GradebookSnapshot:
    """Every collection a view needs, read together as one batch."""
    students: Tuple[Student, ...]
    classes: Tuple[Class, ...]
    assignments: Tuple[Assignment, ...]
    grades: Tuple[Grade, ...]


def _one(model, obj):
    return model.model_validate(obj) if obj is not None else None


def _many(model, objs) -> List:
    return [model.model_validate(obj) for obj in objs]


class DatabaseService:
    def __init__(self, db_session: Session):
        self.session = db_session
        self.class_student_repo = ClassStudentRepositorySQL(db_session)
        self.grade_repo = GradeRepositorySQL(db_session)

    def _run(self, operation: str, call: Callable[[], T]) -> T:
        try:
            return call()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Gateway failure during %s: %s", operation, e)
            raise GatewayError(operation) from e

    # --- CLASS METHODS ---
    def get_all_classes(self) -> List[Class]:
        return self._run("list classes", lambda: _many(Class, self.class_student_repo.get_all_classes()))

    def get_class_by_id(self, class_id: int) -> Optional[Class]:
        return self._run("get class", lambda: _one(Class, self.class_student_repo.get_class_by_id(class_id)))

    def add_class(self, class_record: Dict) -> Class:
        return self._run("create class", lambda: _one(Class, self.class_student_repo.add_class(class_record)))

    def update_class(self, class_id: int, class_update_data: Dict) -> Optional[Class]:
        return self._run("update class", lambda: _one(Class, self.class_student_repo.update_class(class_id, class_update_data)))

    def delete_class(self, class_id: int) -> bool:
        return self._run("delete class", lambda: self.class_student_repo.delete_class(class_id))

    # --- STUDENT METHODS ---
    def get_all_students(self) -> List[Student]:
        return self._run("list students", lambda: _many(Student, self.class_student_repo.get_all_students()))

    def get_student_by_id(self, student_id: int) -> Optional[Student]:
        return self._run("get student", lambda: _one(Student, self.class_student_repo.get_student_by_id(student_id)))

    def get_students_by_class_id(self, class_id: int) -> List[Student]:
        return self._run("list class students", lambda: _many(Student, self.class_student_repo.get_students_by_class_id(class_id)))

    def get_student_by_external_id(self, external_id: str) -> Optional[Student]:
        return self._run("find student", lambda: _one(Student, self.class_student_repo.get_student_by_external_id(external_id)))

    def add_student(self, student_record: Dict) -> Student:
        return self._run("create student", lambda: _one(Student, self.class_student_repo.add_student(student_record)))

    def update_student(self, student_id: int, student_update_data: Dict) -> Optional[Student]:
        return self._run("update student", lambda: _one(Student, self.class_student_repo.update_student(student_id, student_update_data)))

    def delete_student(self, student_id: int) -> bool:
        return self._run("delete student", lambda: self.class_student_repo.delete_student(student_id))

    # --- ASSIGNMENT METHODS ---
    def get_all_assignments(self) -> List[Assignment]:
        return self._run("list assignments", lambda: _many(Assignment, self.grade_repo.get_all_assignments()))

    def get_assignment_by_id(self, assignment_id: int) -> Optional[Assignment]:
        return self._run("get assignment", lambda: _one(Assignment, self.grade_repo.get_assignment_by_id(assignment_id)))

    def add_assignment(self, assignment_record: Dict) -> Assignment:
        return self._run("create assignment", lambda: _one(Assignment, self.grade_repo.add_assignment(assignment_record)))

    def update_assignment(self, assignment_id: int, assignment_update_data: Dict) -> Optional[Assignment]:
        return self._run("update assignment", lambda: _one(Assignment, self.grade_repo.update_assignment(assignment_id, assignment_update_data)))

    def delete_assignment(self, assignment_id: int) -> bool:
        return self._run("delete assignment", lambda: self.grade_repo.delete_assignment(assignment_id))

    # --- GRADE METHODS ---
    def get_all_grades(self) -> List[Grade]:
        return self._run("list grades", lambda: _many(Grade, self.grade_repo.get_all_grades()))

    def get_grade_by_id(self, grade_id: int) -> Optional[Grade]:
        return self._run("get grade", lambda: _one(Grade, self.grade_repo.get_grade_by_id(grade_id)))

    def add_grade(self, grade_record: Dict) -> Grade:
        return self._run("create grade", lambda: _one(Grade, self.grade_repo.add_grade(grade_record)))

    def update_grade(self, grade_id: int, grade_update_data: Dict) -> Optional[Grade]:
        return self._run("update grade", lambda: _one(Grade, self.grade_repo.update_grade(grade_id, grade_update_data)))

    def delete_grade(self, grade_id: int) -> bool:
        return self._run("delete grade", lambda: self.grade_repo.delete_grade(grade_id))

    # --- BATCH READ ---
    def load_snapshot(self) -> GradebookSnapshot:
        """
        Reads students, classes, assignments and grades as one batch.
        Either all four collections come back or `GatewayError` is raised.
        """
        def read_all() -> GradebookSnapshot:
            return GradebookSnapshot(
                students=tuple(_many(Student, self.class_student_repo.get_all_students())),
                classes=tuple(_many(Class, self.class_student_repo.get_all_classes())),
                assignments=tuple(_many(Assignment, self.grade_repo.get_all_assignments())),
                grades=tuple(_many(Grade, self.grade_repo.get_all_grades())),
            )
        return self._run("load gradebook", read_all)

    def sync_id_sequences(self) -> None:
        """
        Moves each table's id sequence past the highest stored id. Needed on
        PostgreSQL after rows were inserted with explicit ids; other backends
        already hand out max(id) + 1.
        """
        if self.session.get_bind().dialect.name != "postgresql":
            return

        def resync() -> None:
            for table in ID_TABLES:
                self.session.execute(text(
                    f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                    f"COALESCE((SELECT MAX(id) FROM {table}), 0) + 1, false)"
                ))
            self.session.commit()
        self._run("sync id sequences", resync)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the request's
    session.
    """
    yield DatabaseService(db_session=db)
