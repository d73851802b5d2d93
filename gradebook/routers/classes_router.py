# /gradebook/routers/classes_router.py

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional

from ..models import class_model, student_model
from ..services import class_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- CLASS COLLECTION ENDPOINTS (/api/classes) ---

@router.get("", response_model=List[class_model.ClassSummary], summary="Get All Classes with Student Counts and Averages")
def get_all_classes(q: Optional[str] = Query(default=None, description="Search name, subject or term."), db: DatabaseService = Depends(get_db_service)):
    return class_service.get_all_classes_with_summary(db=db, text=q)

@router.post("", response_model=class_model.Class, status_code=status.HTTP_201_CREATED, summary="Create a New Class")
def create_new_class(class_create: class_model.ClassCreate, db: DatabaseService = Depends(get_db_service)):
    return class_service.create_class(class_data=class_create, db=db)

# --- INDIVIDUAL CLASS RESOURCE ENDPOINTS (/api/classes/{class_id}) ---

@router.get("/{class_id}", response_model=class_model.Class, summary="Get a Single Class")
def get_class_by_id(class_id: int, db: DatabaseService = Depends(get_db_service)):
    cls = class_service.get_class(class_id=class_id, db=db)
    if cls is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return cls

@router.get("/{class_id}/students", response_model=List[student_model.Student], summary="List the Students Enrolled in a Class")
def get_class_students(class_id: int, db: DatabaseService = Depends(get_db_service)):
    students = class_service.get_students_in_class(class_id=class_id, db=db)
    if students is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return students

@router.put("/{class_id}", response_model=class_model.Class, summary="Update a Class")
def update_class_details(class_id: int, class_update: class_model.ClassUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated_class = class_service.update_class(class_id=class_id, class_update=class_update, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_class is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return updated_class

@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Class")
def delete_class(class_id: int, db: DatabaseService = Depends(get_db_service)):
    was_deleted = class_service.delete_class_by_id(class_id=class_id, db=db)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
