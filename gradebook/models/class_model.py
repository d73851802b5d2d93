# /gradebook/models/class_model.py

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional

DEFAULT_GRADE_CATEGORIES = ["Homework", "Quiz", "Test", "Project"]


class ClassBase(BaseModel):
    name: str = Field(..., description="Display name of the class, e.g. 'Algebra I - Period 2'.")
    subject: str = Field(default="")
    term: Optional[str] = Field(default=None, description="Free text, e.g. 'Fall 2024'.")
    gradeCategories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_GRADE_CATEGORIES),
        description="Ordered category labels offered for this class. Advisory only."
    )


class ClassCreate(ClassBase):
    name: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)


class ClassUpdate(BaseModel):
    """All fields optional so a class can be partially updated."""
    name: Optional[str] = Field(default=None, min_length=1)
    subject: Optional[str] = Field(default=None, min_length=1)
    term: Optional[str] = None
    gradeCategories: Optional[List[str]] = None

    @field_validator("name", "subject", "gradeCategories")
    @classmethod
    def must_not_be_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class Class(ClassBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class ClassSummary(Class):
    """A class card on the classes page."""
    studentCount: int = 0
    gradeCount: int = 0
    average: Optional[float] = Field(default=None, description="Null when the class has no grades.")
