# /gradebook/models/filter_model.py

"""
Typed filter criteria shared by every listing that filters grades or students.

All criteria are optional and AND-combined; an omitted criterion imposes no
constraint. The defaults of every model below describe "no filtering at all".
"""

import datetime
from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from .grade_model import coerce_calendar_date


class ThresholdMode(str, Enum):
    ALL = "all"
    ABOVE = "above"
    BELOW = "below"
    BETWEEN = "between"


class ThresholdFilter(BaseModel):
    """
    A numeric percentage filter.

    `above` keeps pct >= min, `below` keeps pct <= max, `between` keeps
    min <= pct <= max. Both bounds are inclusive.
    """
    mode: ThresholdMode = ThresholdMode.ALL
    min: float = 0
    max: float = 100


class DateRange(BaseModel):
    """Inclusive calendar-date range. Either bound may be omitted."""
    start: Optional[datetime.date] = None
    end: Optional[datetime.date] = None

    @field_validator("start", "end", mode="before")
    @classmethod
    def drop_time_of_day(cls, v):
        return coerce_calendar_date(v)

    @property
    def is_open(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, day: datetime.date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True


class GradeFilterCriteria(BaseModel):
    text: Optional[str] = Field(default=None, description="Case-insensitive search over assignment, student, class and category.")
    classId: Optional[int] = None
    category: Optional[str] = Field(default=None, description="Exact, case-sensitive category label.")
    dateRange: DateRange = Field(default_factory=DateRange)
    threshold: ThresholdFilter = Field(default_factory=ThresholdFilter)


class StudentFilterCriteria(BaseModel):
    text: Optional[str] = Field(default=None, description="Case-insensitive search over name, roster ID and email.")
    classId: Optional[int] = None
    assignmentType: Optional[str] = Field(default=None, description="Keep students with at least one grade in this category.")
    dateRange: DateRange = Field(default_factory=DateRange)
    threshold: ThresholdFilter = Field(default_factory=ThresholdFilter)
