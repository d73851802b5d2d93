# /gradebook/routers/assignments_router.py

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional

from ..models import assignment_model
from ..services import assignment_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

@router.get("", response_model=List[assignment_model.Assignment], summary="List Assignments")
def list_assignments(classId: Optional[int] = Query(default=None), db: DatabaseService = Depends(get_db_service)):
    return assignment_service.list_assignments(db=db, class_id=classId)

@router.post("", response_model=assignment_model.Assignment, status_code=status.HTTP_201_CREATED, summary="Create an Assignment")
def create_assignment(assignment_create: assignment_model.AssignmentCreate, db: DatabaseService = Depends(get_db_service)):
    return assignment_service.create_assignment(assignment_data=assignment_create, db=db)

@router.get("/{assignment_id}", response_model=assignment_model.Assignment, summary="Get an Assignment")
def get_assignment(assignment_id: int, db: DatabaseService = Depends(get_db_service)):
    assignment = assignment_service.get_assignment(assignment_id=assignment_id, db=db)
    if assignment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return assignment

@router.put("/{assignment_id}", response_model=assignment_model.Assignment, summary="Update an Assignment")
def update_assignment(assignment_id: int, assignment_update: assignment_model.AssignmentUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated = assignment_service.update_assignment(assignment_id=assignment_id, assignment_update=assignment_update, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return updated

@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an Assignment")
def delete_assignment(assignment_id: int, db: DatabaseService = Depends(get_db_service)):
    if not assignment_service.delete_assignment(assignment_id=assignment_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
