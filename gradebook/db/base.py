# /gradebook/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# Importing them here ensures `Base.metadata` knows every table before
# `create_all` runs at startup.

from .database import Base

from .models.class_student_models import Class, Student
from .models.grade_models import Assignment, Grade
