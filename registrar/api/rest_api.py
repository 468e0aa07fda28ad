"""
REST API implementation for the Registrar platform using FastAPI.
"""

import logging
from typing import Optional, Dict, Any, List, Type, Union
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .. import __version__
from ..core.enums import EntityType
from ..core.exceptions import RegistrarException, ResourceNotFoundError
from ..services import QueryEngine, CourseAverage

logger = logging.getLogger(__name__)


# Pydantic models for API. Records keep any extra attribute found in the data file.
class RecordResponse(BaseModel):
    model_config = ConfigDict(extra="allow")
    
    id: Any


class StudentResponse(RecordResponse):
    firstName: Any = None
    lastName: Any = None
    gpa: Any = None


class InstructorResponse(RecordResponse):
    name: Any = None


class CourseResponse(RecordResponse):
    code: Any = None
    name: Any = None
    instructorId: Any = None
    schedule: Any = None


class EnrollmentResponse(RecordResponse):
    studentId: Any = None
    courseId: Any = None
    status: Any = None
    grade: Any = None


class AssignmentResponse(RecordResponse):
    courseId: Any = None


class GradeResponse(RecordResponse):
    enrollmentId: Any = None


class StudentGPAResponse(BaseModel):
    studentId: Any
    name: str
    gpa: Any = None


class CourseAverageResponse(BaseModel):
    courseId: str
    averageGPA: str


class MessageResponse(BaseModel):
    message: str


class ScheduleEntryResponse(BaseModel):
    courseCode: Any = None
    courseName: Any = None
    schedule: Any = None


def _dump(records) -> List[Optional[Dict[str, Any]]]:
    return [record.to_dict() if record is not None else None for record in records]


class RegistrarRestAPI:
    """REST API implementation for the Registrar platform."""
    
    def __init__(self, engine: QueryEngine):
        self._engine = engine
        
        # Create FastAPI app
        self.app = FastAPI(
            title="Registrar Query API",
            description="Read-only queries over students, instructors, courses, enrollments, assignments and grades",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )
        
        # Add CORS middleware
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        
        self._setup_exception_handlers()
        self._setup_routes()
    
    @property
    def engine(self) -> QueryEngine:
        return self._engine
    
    def _setup_exception_handlers(self):
        """Map domain errors to response bodies of the form {message}."""
        
        @self.app.exception_handler(ResourceNotFoundError)
        async def not_found_handler(request: Request, exc: ResourceNotFoundError):
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})
        
        @self.app.exception_handler(RegistrarException)
        async def registrar_error_handler(request: Request, exc: RegistrarException):
            logger.error("Unhandled %s on %s: %s", type(exc).__name__, request.url.path, exc.message)
            return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                                content={"message": exc.message})
        
        @self.app.exception_handler(Exception)
        async def internal_error_handler(request: Request, exc: Exception):
            logger.exception("Internal error on %s", request.url.path)
            return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                                content={"message": "Internal error"})
    
    def _add_entity_routes(self, entity_type: EntityType, response_model: Type[RecordResponse]):
        """Register list-all and get-by-id for one collection."""
        prefix = f"/api/{entity_type.value}"
        label = entity_type.label
        
        async def list_records():
            return _dump(self._engine.list_records(entity_type))
        
        async def get_record(entity_id: str):
            return self._engine.get_record(entity_type, entity_id).to_dict()
        
        list_records.__doc__ = f"List all {entity_type.value}."
        get_record.__doc__ = f"Get a {label.lower()} by ID."
        
        self.app.add_api_route(
            prefix, list_records, methods=["GET"],
            response_model=List[response_model], response_model_exclude_unset=True,
            name=f"list_{entity_type.value}"
        )
        self.app.add_api_route(
            prefix + "/{entity_id}", get_record, methods=["GET"],
            response_model=response_model, response_model_exclude_unset=True,
            responses={404: {"model": MessageResponse}},
            name=f"get_{label.lower()}"
        )
    
    def _setup_routes(self):
        """Setup API routes."""
        
        @self.app.get("/", response_model=Dict[str, str])
        async def root():
            """Root endpoint."""
            return {
                "message": "Registrar Query API",
                "version": __version__,
                "docs": "/docs"
            }
        
        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}
        
        @self.app.get("/route", response_class=PlainTextResponse)
        async def route_check():
            """Plain text liveness route."""
            return "route works!"
        
        @self.app.get("/data", response_model=Dict[str, Any])
        async def get_data():
            """The whole dataset document."""
            return self._engine.dataset.to_dict()
        
        # Entity lookups
        self._add_entity_routes(EntityType.STUDENT, StudentResponse)
        self._add_entity_routes(EntityType.INSTRUCTOR, InstructorResponse)
        self._add_entity_routes(EntityType.COURSE, CourseResponse)
        self._add_entity_routes(EntityType.ENROLLMENT, EnrollmentResponse)
        self._add_entity_routes(EntityType.ASSIGNMENT, AssignmentResponse)
        self._add_entity_routes(EntityType.GRADE, GradeResponse)
        
        # Relationships
        @self.app.get("/api/students/{student_id}/enrollments", response_model=List[EnrollmentResponse],
                      response_model_exclude_unset=True)
        async def get_student_enrollments(student_id: str):
            """Get student enrollments."""
            return _dump(self._engine.student_enrollments(student_id))
        
        @self.app.get("/api/students/{student_id}/courses", response_model=List[Optional[CourseResponse]],
                      response_model_exclude_unset=True)
        async def get_student_courses(student_id: str):
            """Get the courses a student is enrolled in. Missing courses are null."""
            return _dump(self._engine.student_courses(student_id))
        
        @self.app.get("/api/courses/{course_id}/students", response_model=List[Optional[StudentResponse]],
                      response_model_exclude_unset=True)
        async def get_course_students(course_id: str):
            """Get the students enrolled in a course. Missing students are null."""
            return _dump(self._engine.course_students(course_id))
        
        @self.app.get("/api/instructors/{instructor_id}/courses", response_model=List[CourseResponse],
                      response_model_exclude_unset=True)
        async def get_instructor_courses(instructor_id: str):
            """Get the courses an instructor teaches."""
            return _dump(self._engine.instructor_courses(instructor_id))
        
        @self.app.get("/api/courses/{course_id}/assignments", response_model=List[AssignmentResponse],
                      response_model_exclude_unset=True)
        async def get_course_assignments(course_id: str):
            """Get course assignments."""
            return _dump(self._engine.course_assignments(course_id))
        
        @self.app.get("/api/enrollments/{enrollment_id}/grades", response_model=List[GradeResponse],
                      response_model_exclude_unset=True)
        async def get_enrollment_grades(enrollment_id: str):
            """Get grades recorded against an enrollment."""
            return _dump(self._engine.enrollment_grades(enrollment_id))
        
        # Derived statistics
        @self.app.get("/api/students/{student_id}/gpa", response_model=StudentGPAResponse,
                      responses={404: {"model": MessageResponse}})
        async def get_student_gpa(student_id: str):
            """Get the stored GPA of a student."""
            return self._engine.student_gpa(student_id).to_dict()
        
        @self.app.get("/api/courses/{course_id}/average",
                      response_model=Union[CourseAverageResponse, MessageResponse])
        async def get_course_average(course_id: str):
            """Average grade points of a course, or a message when nothing is graded."""
            result = self._engine.course_average(course_id)
            if isinstance(result, CourseAverage):
                return CourseAverageResponse(courseId=course_id, averageGPA=result.average_gpa)
            return MessageResponse(message=result.message)
        
        @self.app.get("/api/instructors/{instructor_id}/students", response_model=List[StudentResponse],
                      response_model_exclude_unset=True)
        async def get_instructor_students(instructor_id: str):
            """Get the distinct students taught by an instructor."""
            return _dump(self._engine.instructor_students(instructor_id))
        
        @self.app.get("/api/students/{student_id}/schedule",
                      response_model=List[Optional[ScheduleEntryResponse]])
        async def get_student_schedule(student_id: str):
            """Get the courses a student is currently enrolled in."""
            return [entry.to_dict() if entry is not None else None
                    for entry in self._engine.student_schedule(student_id)]
