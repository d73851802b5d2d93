# /gradebook/db/models/class_student_models.py

"""
This module defines the SQLAlchemy ORM models for the `Class` and `Student`
entities, which represent a teacher's classes and the students on the roster.

References between entities are plain integer columns. No foreign key is
declared, so deleting a class never touches the students that point at it and
readers must resolve a dangling `classId` to an "Unknown" placeholder.
"""

from sqlalchemy import Column, String, Integer, Date, JSON

from ..database import Base


class Class(Base):
    """
    SQLAlchemy model representing a class or course.
    """
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    subject = Column(String, nullable=False, default="")
    term = Column(String, nullable=True)

    # Ordered list of category labels (e.g. ["Homework", "Quiz", "Test"]).
    # Advisory only: Grade.category is never checked against it.
    gradeCategories = Column("grade_categories", JSON, nullable=False, default=list)


class Student(Base):
    """
    SQLAlchemy model representing a single student.
    """
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    # The roster ID typed in by the teacher, distinct from the integer key.
    externalId = Column("external_id", String, index=True, nullable=False)
    name = Column(String, index=True, nullable=False)
    email = Column(String, nullable=False, default="")
    phone = Column(String, nullable=False, default="")

    classId = Column("class_id", Integer, nullable=True, index=True)
    enrollmentDate = Column("enrollment_date", Date, nullable=True)

    # {"name": ..., "email": ..., "phone": ...} or NULL.
    parentContact = Column("parent_contact", JSON, nullable=True)
