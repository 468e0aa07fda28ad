"""
Query engine: lookups, relationship traversal and derived statistics over
the loaded dataset.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Union

from ..core.abstract_entity import AbstractRecord, canonical_id
from ..core.entities import Student, Course, Enrollment, Assignment, Grade
from ..core.enums import EntityType, GRADE_POINTS, NO_GRADES_MESSAGE
from ..core.exceptions import BadJoinError, ResourceNotFoundError
from ..persistence.dataset import Dataset
from ..persistence.repositories import (
    BaseRepository, StudentRepository, InstructorRepository, CourseRepository,
    EnrollmentRepository, AssignmentRepository, GradeRepository
)

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class StudentGPA:
    """Stored GPA of one student, passed through unchanged."""
    student_id: Any
    name: str
    gpa: Any
    
    def to_dict(self) -> Dict[str, Any]:
        return {"studentId": self.student_id, "name": self.name, "gpa": self.gpa}


@dataclass(frozen=True)
class CourseAverage:
    """Mean grade points of a course, as text with two decimals."""
    course_id: Any
    average_gpa: str
    graded_count: int
    
    def to_dict(self) -> Dict[str, Any]:
        return {"courseId": self.course_id, "averageGPA": self.average_gpa}


@dataclass(frozen=True)
class NoGradesAvailable:
    """Sentinel result for a course without any graded enrollment."""
    course_id: Any
    message: str = NO_GRADES_MESSAGE
    
    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


@dataclass(frozen=True)
class ScheduleEntry:
    """One enrolled course on a student's schedule."""
    course_code: Any
    course_name: Any
    schedule: Any
    
    @classmethod
    def from_course(cls, course: Course) -> "ScheduleEntry":
        return cls(course_code=course.code, course_name=course.name, schedule=course.schedule)
    
    def to_dict(self) -> Dict[str, Any]:
        return {"courseCode": self.course_code, "courseName": self.course_name,
                "schedule": self.schedule}


def grade_points(letter: Any) -> float:
    """Weight of a letter grade. Unknown letters weigh nothing."""
    if not isinstance(letter, str):
        return 0.0
    return GRADE_POINTS.get(letter, 0.0)


def format_average(value: float) -> str:
    """Two decimal digits, halves rounded away from zero."""
    return str(Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


class QueryEngine:
    """Read-only queries over one immutable dataset."""
    
    def __init__(self, dataset: Dataset):
        self._dataset = dataset
        self.students = StudentRepository(dataset)
        self.instructors = InstructorRepository(dataset)
        self.courses = CourseRepository(dataset)
        self.enrollments = EnrollmentRepository(dataset)
        self.assignments = AssignmentRepository(dataset)
        self.grades = GradeRepository(dataset)
        self._repositories: Dict[EntityType, BaseRepository] = {
            EntityType.STUDENT: self.students,
            EntityType.INSTRUCTOR: self.instructors,
            EntityType.COURSE: self.courses,
            EntityType.ENROLLMENT: self.enrollments,
            EntityType.ASSIGNMENT: self.assignments,
            EntityType.GRADE: self.grades,
        }
    
    @property
    def dataset(self) -> Dataset:
        return self._dataset
    
    def repository(self, entity_type: EntityType) -> BaseRepository:
        return self._repositories[entity_type]
    
    # Entity lookups
    
    def list_records(self, entity_type: EntityType) -> List[AbstractRecord]:
        """Every record of a collection, in stored order."""
        return self.repository(entity_type).find_all()
    
    def get_record(self, entity_type: EntityType, entity_id: Any) -> AbstractRecord:
        """A single record by id; ResourceNotFoundError when absent."""
        record = self.repository(entity_type).find_by_id(entity_id)
        if record is None:
            raise ResourceNotFoundError(entity_type.label, entity_id)
        return record
    
    # Strict joins
    
    def require_course(self, enrollment: Enrollment) -> Course:
        """The course an enrollment points at; BadJoinError if it dangles."""
        course = self.courses.find_by_id(enrollment.course_id)
        if course is None:
            raise BadJoinError("Enrollment", "courseId", "Course", enrollment.course_id)
        return course
    
    def _join_course(self, enrollment: Enrollment) -> Optional[Course]:
        course = self.courses.find_by_id(enrollment.course_id)
        if course is None:
            logger.warning("Enrollment %s references missing course %r",
                           enrollment.id, enrollment.course_id)
        return course
    
    def _join_student(self, enrollment: Enrollment) -> Optional[Student]:
        student = self.students.find_by_id(enrollment.student_id)
        if student is None:
            logger.warning("Enrollment %s references missing student %r",
                           enrollment.id, enrollment.student_id)
        return student
    
    # Relationship traversal
    
    def student_enrollments(self, student_id: Any) -> List[Enrollment]:
        return self.enrollments.find_by_student(student_id)
    
    def student_courses(self, student_id: Any) -> List[Optional[Course]]:
        """Courses of a student's enrollments; ``None`` where the course is missing."""
        return [self._join_course(enrollment)
                for enrollment in self.student_enrollments(student_id)]
    
    def course_students(self, course_id: Any) -> List[Optional[Student]]:
        """Students enrolled in a course; ``None`` where the student is missing."""
        return [self._join_student(enrollment)
                for enrollment in self.enrollments.find_by_course(course_id)]
    
    def instructor_courses(self, instructor_id: Any) -> List[Course]:
        return self.courses.find_by_instructor(instructor_id)
    
    def course_assignments(self, course_id: Any) -> List[Assignment]:
        return self.assignments.find_by_course(course_id)
    
    def enrollment_grades(self, enrollment_id: Any) -> List[Grade]:
        return self.grades.find_by_enrollment(enrollment_id)
    
    def instructor_students(self, instructor_id: Any) -> List[Student]:
        """Distinct students across all courses an instructor teaches.
        
        Students are deduplicated by id, keeping the first occurrence in
        enrollment order. Enrollments pointing at a missing student are
        skipped here, unlike course_students which keeps them as None.
        """
        course_keys = {course.key for course in self.instructor_courses(instructor_id)}
        course_keys.discard(None)
        if not course_keys:
            return []
        
        students: List[Student] = []
        seen = set()
        for enrollment in self.enrollments.find_where(
                lambda e: canonical_id(e.course_id) in course_keys):
            student = self._join_student(enrollment)
            if student is None or student.key in seen:
                continue
            seen.add(student.key)
            students.append(student)
        return students
    
    # Derived statistics
    
    def student_gpa(self, student_id: Any) -> StudentGPA:
        student = self.get_record(EntityType.STUDENT, student_id)
        return StudentGPA(student_id=student.id, name=student.full_name, gpa=student.gpa)
    
    def course_average(self, course_id: Any) -> Union[CourseAverage, NoGradesAvailable]:
        """Mean grade points over the graded enrollments of a course.
        
        Unrecognised letters count as 0.0 and still count toward the
        denominator. A course with no graded enrollment (including an
        unknown course) yields the NoGradesAvailable sentinel.
        """
        graded = [enrollment for enrollment in self.enrollments.find_by_course(course_id)
                  if enrollment.is_graded]
        if not graded:
            return NoGradesAvailable(course_id=course_id)
        
        total = sum(grade_points(enrollment.grade) for enrollment in graded)
        return CourseAverage(
            course_id=course_id,
            average_gpa=format_average(total / len(graded)),
            graded_count=len(graded)
        )
    
    def student_schedule(self, student_id: Any) -> List[Optional[ScheduleEntry]]:
        """Active courses of a student.
        
        Only enrollments whose status is exactly ``enrolled`` are listed.
        An enrollment whose course is missing appears as ``None``.
        """
        entries: List[Optional[ScheduleEntry]] = []
        for enrollment in self.student_enrollments(student_id):
            if not enrollment.is_enrolled:
                continue
            try:
                entries.append(ScheduleEntry.from_course(self.require_course(enrollment)))
            except BadJoinError as e:
                logger.warning("Schedule for student %r: %s", student_id, e.message)
                entries.append(None)
        return entries
    
    def get_statistics(self) -> Dict[str, Any]:
        """Collection sizes of the loaded dataset."""
        return {"records": len(self._dataset), "collections": self._dataset.counts()}
