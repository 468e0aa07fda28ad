"""
Persistence module: the loaded dataset and its read-only repositories.
"""

from .dataset import Dataset, load_dataset
from .repositories import (
    BaseRepository, StudentRepository, InstructorRepository, CourseRepository,
    EnrollmentRepository, AssignmentRepository, GradeRepository
)

__all__ = [
    "Dataset",
    "load_dataset",
    "BaseRepository",
    "StudentRepository",
    "InstructorRepository",
    "CourseRepository",
    "EnrollmentRepository",
    "AssignmentRepository",
    "GradeRepository",
]
