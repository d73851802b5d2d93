# /gradebook/services/report_service.py

"""
Business logic behind the reports page. Every function reads one snapshot
from the gateway and derives its result from it.
"""

from typing import List, Optional

from ..models.report_model import CategoryPerformance, ClassStats, StudentRanking
from .database_service import DatabaseService
from .grade_helpers import reporting


def get_class_stats(db: DatabaseService, class_id: Optional[int] = None) -> Optional[ClassStats]:
    snapshot = db.load_snapshot()
    return reporting.class_stats(snapshot.grades, class_id)


def get_student_rankings(db: DatabaseService, class_id: Optional[int] = None) -> List[StudentRanking]:
    snapshot = db.load_snapshot()
    grades = [g for g in snapshot.grades if class_id is None or g.classId == class_id]
    return reporting.rank_students(snapshot.students, grades)


def get_category_performance(db: DatabaseService, class_id: Optional[int] = None) -> List[CategoryPerformance]:
    snapshot = db.load_snapshot()
    grades = [g for g in snapshot.grades if class_id is None or g.classId == class_id]
    return reporting.category_breakdown(grades)


def export_grades_as_csv(db: DatabaseService) -> str:
    """Business logic to generate the full grade report as CSV text."""
    snapshot = db.load_snapshot()
    rows = reporting.build_export_rows(snapshot.grades, snapshot.students, snapshot.classes)
    return reporting.export_as_csv(rows)
