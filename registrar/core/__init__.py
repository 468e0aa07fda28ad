"""
Core module containing the record model, constants and exceptions.
"""

from .abstract_entity import AbstractRecord, canonical_id, ids_equal
from .entities import (
    Student, Instructor, Course, Enrollment, Assignment, Grade, RECORD_TYPES
)
from .enums import EnrollmentStatus, EntityType, GRADE_POINTS, NO_GRADES_MESSAGE
from .exceptions import (
    RegistrarException, ResourceNotFoundError, BadJoinError,
    DatasetError, ConfigurationError
)

__all__ = [
    # Records
    "AbstractRecord",
    "Student",
    "Instructor",
    "Course",
    "Enrollment",
    "Assignment",
    "Grade",
    "RECORD_TYPES",
    "canonical_id",
    "ids_equal",
    
    # Enums and constants
    "EnrollmentStatus",
    "EntityType",
    "GRADE_POINTS",
    "NO_GRADES_MESSAGE",
    
    # Exceptions
    "RegistrarException",
    "ResourceNotFoundError",
    "BadJoinError",
    "DatasetError",
    "ConfigurationError",
]
