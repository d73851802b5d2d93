# /gradebook/models/grade_model.py

# --- Core Imports ---
import datetime
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from typing import Optional, Any

# The category choices offered by the grade form. Grade.category itself stays
# free text, so this list is a suggestion and never a constraint.
GRADE_CATEGORIES = ["Homework", "Quiz", "Test", "Project", "Participation", "Extra Credit"]


# --- Core Enumerations ---
class LetterTier(str, Enum):
    A = "A"; B = "B"; C = "C"; D = "D"; F = "F"

class BadgeVariant(str, Enum):
    SUCCESS = "success"
    PRIMARY = "primary"
    WARNING = "warning"
    ERROR = "error"


def coerce_calendar_date(value: Any) -> Any:
    """
    Drops the time-of-day from datetimes and ISO datetime strings so that every
    date comparison happens on calendar dates.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, str):
        value = value.strip()
        if len(value) > 10 and value[10] in ("T", " "):
            return value[:10]
    return value


# --- API Contract Models ---

class GradeBase(BaseModel):
    studentId: int
    classId: int
    assignmentName: str
    category: str
    points: float
    maxPoints: float
    date: datetime.date
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def drop_time_of_day(cls, v):
        return coerce_calendar_date(v)


class GradeCreate(GradeBase):
    """Incoming grade form. Enforces the rules the UI expects of stored grades."""
    assignmentName: str = Field(..., min_length=1)
    category: str = Field(default="Homework", min_length=1)
    points: float = Field(..., ge=0)
    maxPoints: float = Field(..., gt=0)
    date: datetime.date = Field(default_factory=datetime.date.today)

    @model_validator(mode="after")
    def points_within_max(self):
        if self.points > self.maxPoints:
            raise ValueError("Points earned cannot exceed maximum points")
        return self


class GradeUpdate(BaseModel):
    studentId: Optional[int] = None
    classId: Optional[int] = None
    assignmentName: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    points: Optional[float] = Field(default=None, ge=0)
    maxPoints: Optional[float] = Field(default=None, gt=0)
    date: Optional[datetime.date] = None
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def drop_time_of_day(cls, v):
        return coerce_calendar_date(v)

    @field_validator("studentId", "classId", "assignmentName", "category", "points", "maxPoints", "date")
    @classmethod
    def must_not_be_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @model_validator(mode="after")
    def points_within_max(self):
        if self.points is not None and self.maxPoints is not None and self.points > self.maxPoints:
            raise ValueError("Points earned cannot exceed maximum points")
        return self


class Grade(GradeBase):
    """
    The full representation of a stored grade. Read models are lenient: a
    record with `maxPoints == 0` still loads and simply scores as "no value".
    """
    model_config = ConfigDict(from_attributes=True)

    id: int


class GradeView(Grade):
    """A grade joined with display names and its derived score, for listings."""
    studentName: str = "Unknown"
    className: str = "Unknown"
    percentage: Optional[float] = None
    tier: Optional[LetterTier] = None
    badge: Optional[BadgeVariant] = None
