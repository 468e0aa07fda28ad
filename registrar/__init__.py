"""
Registrar: a read-only query API over an in-memory campus dataset.

Students, instructors, courses, enrollments, assignments and grades are
loaded once from a JSON document and served over a FastAPI REST surface
with lookup, relationship traversal and derived statistic endpoints.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "Read-only campus registrar query API"
