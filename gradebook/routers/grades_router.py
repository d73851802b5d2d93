# /gradebook/routers/grades_router.py

import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional

from ..models import grade_model
from ..models.filter_model import DateRange, GradeFilterCriteria, ThresholdFilter, ThresholdMode
from ..services import grade_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


def grade_criteria(
    q: Optional[str] = Query(default=None, description="Search assignment, student, class or category."),
    classId: Optional[int] = Query(default=None),
    category: Optional[str] = Query(default=None, description="Exact, case-sensitive category label."),
    start: Optional[datetime.date] = Query(default=None, description="Earliest grade date, inclusive."),
    end: Optional[datetime.date] = Query(default=None, description="Latest grade date, inclusive."),
    threshold: ThresholdMode = Query(default=ThresholdMode.ALL),
    min: float = Query(default=0),
    max: float = Query(default=100),
) -> GradeFilterCriteria:
    return GradeFilterCriteria(
        text=q,
        classId=classId,
        category=category,
        dateRange=DateRange(start=start, end=end),
        threshold=ThresholdFilter(mode=threshold, min=min, max=max),
    )


# --- GRADE COLLECTION ENDPOINTS (/api/grades) ---

@router.get("", response_model=List[grade_model.GradeView], summary="List Grades Matching the Filters")
def list_grades(criteria: GradeFilterCriteria = Depends(grade_criteria), db: DatabaseService = Depends(get_db_service)):
    return grade_service.list_grades(db=db, criteria=criteria)

@router.get("/categories", response_model=List[str], summary="Category Choices Offered by the Grade Form")
def list_categories():
    return grade_model.GRADE_CATEGORIES

@router.post("", response_model=grade_model.Grade, status_code=status.HTTP_201_CREATED, summary="Record a Grade")
def create_grade(grade_create: grade_model.GradeCreate, db: DatabaseService = Depends(get_db_service)):
    return grade_service.create_grade(grade_data=grade_create, db=db)

# --- INDIVIDUAL GRADE ENDPOINTS (/api/grades/{grade_id}) ---

@router.get("/{grade_id}", response_model=grade_model.Grade, summary="Get a Grade")
def get_grade(grade_id: int, db: DatabaseService = Depends(get_db_service)):
    grade = grade_service.get_grade(grade_id=grade_id, db=db)
    if grade is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Grade with ID {grade_id} not found")
    return grade

@router.put("/{grade_id}", response_model=grade_model.Grade, summary="Update a Grade")
def update_grade(grade_id: int, grade_update: grade_model.GradeUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated_grade = grade_service.update_grade(grade_id=grade_id, grade_update=grade_update, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_grade is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Grade with ID {grade_id} not found")
    return updated_grade

@router.delete("/{grade_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Grade")
def delete_grade(grade_id: int, db: DatabaseService = Depends(get_db_service)):
    if not grade_service.delete_grade(grade_id=grade_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Grade with ID {grade_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
