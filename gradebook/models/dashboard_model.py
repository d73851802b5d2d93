# /gradebook/models/dashboard_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field
from typing import List, Optional

from .grade_model import GradeView, BadgeVariant

# --- Model Definition ---

class ClassAverage(BaseModel):
    classId: int
    name: str
    subject: str = ""
    studentCount: int = 0
    average: Optional[float] = None
    badge: Optional[BadgeVariant] = None


class DashboardSummary(BaseModel):
    """
    Defines the data contract for the response of the dashboard summary endpoint.
    This model specifies the exact shape of the data that will be sent to the
    Home Page to populate its "Quick Info Cards".
    """

    studentCount: int = Field(..., description="The total number of students on record.", examples=[112])
    classCount: int = Field(..., description="The total number of classes.", examples=[4])
    gradeCount: int = Field(..., description="The total number of recorded grades.", examples=[380])
    overallAverage: Optional[float] = Field(
        default=None,
        description="Mean percentage over every grade. Null when nothing has been graded yet."
    )
    recentGrades: List[GradeView] = Field(default_factory=list)
    classAverages: List[ClassAverage] = Field(default_factory=list)
