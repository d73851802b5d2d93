# /gradebook/services/dashboard_service.py

# --- Core Imports ---
from .. import config
from ..models.dashboard_model import ClassAverage, DashboardSummary
from .database_service import DatabaseService
from .grade_helpers import aggregation, reporting, scoring


# --- Core Public Function ---

def get_summary_data(db: DatabaseService) -> DashboardSummary:
    """
    Calculates the dashboard summary statistics by retrieving data from the
    database service and performing aggregations.

    Args:
        db: An instance of the DatabaseService, provided by dependency injection.

    Returns:
        A DashboardSummary Pydantic object with the counts, the overall average,
        the most recent grades and one average per class.
    """
    snapshot = db.load_snapshot()

    class_groups = aggregation.group_average(snapshot.grades, lambda g: g.classId)
    class_averages = []
    for cls in snapshot.classes:
        stats = class_groups.get(cls.id)
        mean = stats.average if stats else None
        class_averages.append(ClassAverage(
            classId=cls.id,
            name=cls.name,
            subject=cls.subject,
            studentCount=sum(1 for s in snapshot.students if s.classId == cls.id),
            average=mean,
            badge=scoring.badge_variant(mean),
        ))

    recent = reporting.recent_grades(snapshot.grades, config.RECENT_GRADES_LIMIT)
    return DashboardSummary(
        studentCount=len(snapshot.students),
        classCount=len(snapshot.classes),
        gradeCount=len(snapshot.grades),
        overallAverage=aggregation.average(snapshot.grades),
        recentGrades=reporting.to_grade_views(recent, snapshot.students, snapshot.classes),
        classAverages=class_averages,
    )
