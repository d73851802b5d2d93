# /gradebook/routers/reports_router.py

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from typing import List, Optional

from ..models.report_model import CategoryPerformance, ClassStats, StudentRanking
from ..services import report_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

@router.get(
    "/class-stats",
    response_model=Optional[ClassStats],
    summary="Average, Range and Letter Distribution",
    description="Statistics for one class, or for every grade when no classId is given. Null when there are no grades."
)
def get_class_stats(classId: Optional[int] = Query(default=None), db: DatabaseService = Depends(get_db_service)):
    return report_service.get_class_stats(db=db, class_id=classId)

@router.get("/rankings", response_model=List[StudentRanking], summary="Students Ranked by Average")
def get_rankings(classId: Optional[int] = Query(default=None), db: DatabaseService = Depends(get_db_service)):
    return report_service.get_student_rankings(db=db, class_id=classId)

@router.get("/categories", response_model=List[CategoryPerformance], summary="Average per Grade Category")
def get_category_performance(classId: Optional[int] = Query(default=None), db: DatabaseService = Depends(get_db_service)):
    return report_service.get_category_performance(db=db, class_id=classId)

@router.get("/export", summary="Export Every Grade as CSV", response_class=StreamingResponse)
def export_grade_report(db: DatabaseService = Depends(get_db_service)):
    csv_string = report_service.export_grades_as_csv(db=db)
    return StreamingResponse(
        iter([csv_string]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=grade_report.csv"},
    )
