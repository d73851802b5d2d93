# /gradebook/routers/students_router.py

import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional

from ..models import student_model
from ..models.filter_model import DateRange, StudentFilterCriteria, ThresholdFilter, ThresholdMode
from ..models.report_model import StudentProfile
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


def student_criteria(
    q: Optional[str] = Query(default=None, description="Search name, roster ID or email."),
    classId: Optional[int] = Query(default=None),
    assignmentType: Optional[str] = Query(default=None, description="Only students with a grade in this category."),
    start: Optional[datetime.date] = Query(default=None),
    end: Optional[datetime.date] = Query(default=None),
    threshold: ThresholdMode = Query(default=ThresholdMode.ALL),
    min: float = Query(default=0),
    max: float = Query(default=100),
) -> StudentFilterCriteria:
    return StudentFilterCriteria(
        text=q,
        classId=classId,
        assignmentType=assignmentType,
        dateRange=DateRange(start=start, end=end),
        threshold=ThresholdFilter(mode=threshold, min=min, max=max),
    )


# --- STUDENT COLLECTION ENDPOINTS (/api/students) ---

@router.get("", response_model=List[student_model.StudentSummary], summary="List Students with Averages")
def list_students(criteria: StudentFilterCriteria = Depends(student_criteria), db: DatabaseService = Depends(get_db_service)):
    return student_service.list_students(db=db, criteria=criteria)

@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Create a Student")
def create_student(student_create: student_model.StudentCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.create_student(student_data=student_create, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

# --- INDIVIDUAL STUDENT ENDPOINTS (/api/students/{student_id}) ---

@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Student")
def get_student(student_id: int, db: DatabaseService = Depends(get_db_service)):
    student = student_service.get_student(student_id=student_id, db=db)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return student

@router.get("/{student_id}/profile", response_model=StudentProfile, summary="Get a Student's Grades and Averages")
def get_student_profile(student_id: int, db: DatabaseService = Depends(get_db_service)):
    profile = student_service.get_student_profile(student_id=student_id, db=db)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return profile

@router.put("/{student_id}", response_model=student_model.Student, summary="Update a Student")
def update_student(student_id: int, student_update: student_model.StudentUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated_student = student_service.update_student(student_id=student_id, student_update=student_update, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return updated_student

@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Student")
def delete_student(student_id: int, db: DatabaseService = Depends(get_db_service)):
    was_deleted = student_service.delete_student(student_id=student_id, db=db)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
