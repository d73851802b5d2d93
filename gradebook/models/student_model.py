# /gradebook/models/student_model.py

# --- Core Imports ---
import datetime
from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from typing import Optional


# --- Model Definitions ---

class ParentContact(BaseModel):
    """Optional guardian contact details stored alongside a student."""
    model_config = ConfigDict(from_attributes=True)

    name: str = ""
    email: Optional[EmailStr] = None
    phone: str = ""

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class StudentBase(BaseModel):
    """
    The base model for a Student. Contains fields common to create and read operations.
    """
    externalId: str = Field(..., description="The roster ID typed in by the teacher (not the integer key).")
    name: str = Field(..., description="The full name of the student.")
    email: str = Field(default="")
    phone: str = Field(default="")
    classId: Optional[int] = Field(default=None, description="The class this student is enrolled in, if any.")
    enrollmentDate: Optional[datetime.date] = Field(default=None)
    parentContact: Optional[ParentContact] = Field(default=None)


class StudentCreate(StudentBase):
    """The model used for creating a new student. Applies the form's validation rules."""
    externalId: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    enrollmentDate: Optional[datetime.date] = Field(default_factory=datetime.date.today)

    @field_validator("name", "externalId", "phone")
    @classmethod
    def must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError("Field is required")
        return v.strip()


class StudentUpdate(BaseModel):
    """
    The model for updating a student. All fields are optional to allow for
    partial updates, but a field that is sent must not be null unless the
    student record allows it.
    """
    model_config = ConfigDict(from_attributes=True)

    externalId: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = Field(default=None)
    phone: Optional[str] = Field(default=None, min_length=1)
    classId: Optional[int] = Field(default=None)
    enrollmentDate: Optional[datetime.date] = Field(default=None)
    parentContact: Optional[ParentContact] = Field(default=None)

    @field_validator("externalId", "name", "email", "phone")
    @classmethod
    def must_not_be_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class Student(StudentBase):
    """
    The full representation of a Student resource, as it is stored in the
    database and returned by the API.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="The unique, server-generated identifier for the student.")


class StudentSummary(Student):
    """A student row on the roster page, enriched with their running average."""
    average: Optional[float] = Field(
        default=None,
        description="Mean grade percentage. Null when the student has no grades yet."
    )
    gradeCount: int = Field(default=0)
