"""
Enumerations and constants for the Registrar platform.
"""

from enum import Enum
from typing import Dict


class EnrollmentStatus(Enum):
    """Known enrollment status tags. The dataset may carry others."""
    ENROLLED = "enrolled"
    DROPPED = "dropped"
    COMPLETED = "completed"
    WAITLISTED = "waitlisted"


class EntityType(Enum):
    """The six collections of the dataset, valued by their JSON key."""
    STUDENT = "students"
    INSTRUCTOR = "instructors"
    COURSE = "courses"
    ENROLLMENT = "enrollments"
    ASSIGNMENT = "assignments"
    GRADE = "grades"
    
    @property
    def label(self) -> str:
        """Human readable singular name, used in not-found messages."""
        return self.name.capitalize()


# Letter grades outside this table weigh 0.0 in course averages.
GRADE_POINTS: Dict[str, float] = {
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
}

NO_GRADES_MESSAGE = "No grades available for this course"
