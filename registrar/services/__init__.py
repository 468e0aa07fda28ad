"""
Services module containing the query engine.
"""

from .query_service import (
    QueryEngine, StudentGPA, CourseAverage, NoGradesAvailable, ScheduleEntry,
    grade_points, format_average
)

__all__ = [
    "QueryEngine",
    "StudentGPA",
    "CourseAverage",
    "NoGradesAvailable",
    "ScheduleEntry",
    "grade_points",
    "format_average",
]
