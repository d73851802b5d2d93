# /gradebook/models/assignment_model.py

import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional


class AssignmentBase(BaseModel):
    name: str
    classId: Optional[int] = None
    category: str = Field(default="Homework")
    maxPoints: float
    dueDate: Optional[datetime.date] = None
    description: Optional[str] = None


class AssignmentCreate(AssignmentBase):
    name: str = Field(..., min_length=1)
    maxPoints: float = Field(..., gt=0)


class AssignmentUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    classId: Optional[int] = None
    category: Optional[str] = None
    maxPoints: Optional[float] = Field(default=None, gt=0)
    dueDate: Optional[datetime.date] = None
    description: Optional[str] = None

    @field_validator("name", "category", "maxPoints")
    @classmethod
    def must_not_be_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class Assignment(AssignmentBase):
    """Assignments only prefill the grade form; nothing else reads them."""
    model_config = ConfigDict(from_attributes=True)

    id: int
