# /gradebook/db/models/grade_models.py

"""
This module defines the SQLAlchemy ORM models for the `Assignment` and `Grade`
entities.

An Assignment is only a template used to prefill a new grade. A Grade is a
single scored piece of work for one student in one class.
"""

from sqlalchemy import Column, String, Integer, Float, Date, Text

from ..database import Base


class Assignment(Base):
    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    classId = Column("class_id", Integer, nullable=True, index=True)
    category = Column(String, nullable=False, default="Homework")
    maxPoints = Column("max_points", Float, nullable=False)
    dueDate = Column("due_date", Date, nullable=True)
    description = Column(Text, nullable=True)


class Grade(Base):
    """
    SQLAlchemy model representing one recorded score.

    `0 <= points <= maxPoints` and `maxPoints > 0` are expected by the UI but
    are not enforced here; the scoring helpers treat a zero denominator as
    "no value".
    """
    __tablename__ = "grades"

    id = Column(Integer, primary_key=True, index=True)
    studentId = Column("student_id", Integer, nullable=False, index=True)
    classId = Column("class_id", Integer, nullable=False, index=True)
    assignmentName = Column("assignment_name", String, nullable=False)
    # Free text. Matched case-sensitively by the filter and grouping helpers.
    category = Column(String, nullable=False, index=True)
    points = Column(Float, nullable=False)
    maxPoints = Column("max_points", Float, nullable=False)
    date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)
