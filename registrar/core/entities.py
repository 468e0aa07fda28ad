"""
Record types for the six collections of the campus dataset.
"""

from typing import Any, Dict, Optional, Type

from .abstract_entity import AbstractRecord
from .enums import EntityType, EnrollmentStatus


class Student(AbstractRecord):
    """A student with a stored, authoritative GPA."""
    
    entity_name = "Student"
    __slots__ = ()
    
    @property
    def first_name(self) -> Optional[str]:
        return self.get("firstName")
    
    @property
    def last_name(self) -> Optional[str]:
        return self.get("lastName")
    
    @property
    def full_name(self) -> str:
        """First and last name; an absent part is left out."""
        parts = [self.first_name, self.last_name]
        return " ".join(str(part) for part in parts if part is not None)
    
    @property
    def gpa(self) -> Any:
        return self.get("gpa")


class Instructor(AbstractRecord):
    """An instructor teaching zero or more courses."""
    
    entity_name = "Instructor"
    __slots__ = ()
    
    @property
    def name(self) -> Optional[str]:
        return self.get("name")


class Course(AbstractRecord):
    """A course offering taught by one instructor."""
    
    entity_name = "Course"
    __slots__ = ()
    
    @property
    def code(self) -> Optional[str]:
        return self.get("code")
    
    @property
    def name(self) -> Optional[str]:
        return self.get("name")
    
    @property
    def instructor_id(self) -> Any:
        return self.get("instructorId")
    
    @property
    def schedule(self) -> Any:
        return self.get("schedule")


class Enrollment(AbstractRecord):
    """Links a student to a course, optionally with a letter grade."""
    
    entity_name = "Enrollment"
    __slots__ = ()
    
    @property
    def student_id(self) -> Any:
        return self.get("studentId")
    
    @property
    def course_id(self) -> Any:
        return self.get("courseId")
    
    @property
    def status(self) -> Optional[str]:
        return self.get("status")
    
    @property
    def grade(self) -> Optional[str]:
        return self.get("grade")
    
    @property
    def is_enrolled(self) -> bool:
        """Exact, case-sensitive match on the ``enrolled`` tag."""
        return self.status == EnrollmentStatus.ENROLLED.value
    
    @property
    def is_graded(self) -> bool:
        return bool(self.grade)


class Assignment(AbstractRecord):
    """Coursework belonging to a course."""
    
    entity_name = "Assignment"
    __slots__ = ()
    
    @property
    def course_id(self) -> Any:
        return self.get("courseId")


class Grade(AbstractRecord):
    """A grade entry recorded against an enrollment."""
    
    entity_name = "Grade"
    __slots__ = ()
    
    @property
    def enrollment_id(self) -> Any:
        return self.get("enrollmentId")


RECORD_TYPES: Dict[EntityType, Type[AbstractRecord]] = {
    EntityType.STUDENT: Student,
    EntityType.INSTRUCTOR: Instructor,
    EntityType.COURSE: Course,
    EntityType.ENROLLMENT: Enrollment,
    EntityType.ASSIGNMENT: Assignment,
    EntityType.GRADE: Grade,
}
