"""
Read-only repositories over the in-memory dataset.

Every lookup is a linear scan of one collection. ``find_by_id`` returns
``None`` for an absent id; callers decide whether that is an error.
"""

from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from ..core.abstract_entity import AbstractRecord, canonical_id
from ..core.entities import Student, Instructor, Course, Enrollment, Assignment, Grade
from ..core.enums import EntityType
from .dataset import Dataset

T = TypeVar('T', bound=AbstractRecord)


class BaseRepository(Generic[T]):
    """Base repository implementation with common functionality."""
    
    entity_type: EntityType
    
    def __init__(self, dataset: Dataset):
        self._dataset = dataset
    
    @property
    def _records(self) -> Tuple[T, ...]:
        return self._dataset.collection(self.entity_type)
    
    @property
    def entity_name(self) -> str:
        return self.entity_type.label
    
    def find_by_id(self, entity_id: Any) -> Optional[T]:
        """First record whose id loosely equals ``entity_id``."""
        key = canonical_id(entity_id)
        if key is None:
            return None
        for record in self._records:
            if record.key == key:
                return record
        return None
    
    def find_all(self) -> List[T]:
        """The whole collection in stored order."""
        return list(self._records)
    
    def find_where(self, predicate: Callable[[T], bool]) -> List[T]:
        """All records matching ``predicate``, order preserved."""
        return [record for record in self._records if predicate(record)]
    
    def find_by_field(self, field: str, value: Any) -> List[T]:
        """All records whose ``field`` loosely equals ``value``."""
        key = canonical_id(value)
        if key is None:
            return []
        return self.find_where(lambda record: canonical_id(record.get(field)) == key)
    
    def count(self) -> int:
        return len(self._records)


class StudentRepository(BaseRepository[Student]):
    """Repository for Student records."""
    entity_type = EntityType.STUDENT


class InstructorRepository(BaseRepository[Instructor]):
    """Repository for Instructor records."""
    entity_type = EntityType.INSTRUCTOR


class CourseRepository(BaseRepository[Course]):
    """Repository for Course records."""
    entity_type = EntityType.COURSE
    
    def find_by_instructor(self, instructor_id: Any) -> List[Course]:
        return self.find_by_field("instructorId", instructor_id)


class EnrollmentRepository(BaseRepository[Enrollment]):
    """Repository for Enrollment records."""
    entity_type = EntityType.ENROLLMENT
    
    def find_by_student(self, student_id: Any) -> List[Enrollment]:
        return self.find_by_field("studentId", student_id)
    
    def find_by_course(self, course_id: Any) -> List[Enrollment]:
        return self.find_by_field("courseId", course_id)


class AssignmentRepository(BaseRepository[Assignment]):
    """Repository for Assignment records."""
    entity_type = EntityType.ASSIGNMENT
    
    def find_by_course(self, course_id: Any) -> List[Assignment]:
        return self.find_by_field("courseId", course_id)


class GradeRepository(BaseRepository[Grade]):
    """Repository for Grade records."""
    entity_type = EntityType.GRADE
    
    def find_by_enrollment(self, enrollment_id: Any) -> List[Grade]:
        return self.find_by_field("enrollmentId", enrollment_id)
