# /gradebook/models/report_model.py

from pydantic import BaseModel, Field
from typing import Optional, List

from .student_model import Student
from .grade_model import GradeView


class GradeDistribution(BaseModel):
    """Counts of grades per five-way letter tier."""
    A: int = 0
    B: int = 0
    C: int = 0
    D: int = 0
    F: int = 0


class ClassStats(BaseModel):
    """
    Summary for one class. average, min and max are null when the class has
    grades but none of them can be scored.
    """
    average: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    count: int
    distribution: GradeDistribution


class StudentRanking(BaseModel):
    """
    One leaderboard row. `student` is null when the grades reference a
    student id that no longer exists.
    """
    studentId: int
    student: Optional[Student] = None
    studentName: str = "Unknown"
    average: Optional[float] = None
    count: int = 0


class CategoryPerformance(BaseModel):
    category: str
    average: Optional[float] = None
    count: int = 0


class StudentProfile(BaseModel):
    student: Student
    className: str = "Unknown"
    overallAverage: Optional[float] = Field(default=None, description="Null when the student has no grades yet.")
    grades: List[GradeView] = Field(default_factory=list)
    categories: List[CategoryPerformance] = Field(default_factory=list)
