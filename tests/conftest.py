"""
Pytest configuration and fixtures
"""
import copy

import pytest
from fastapi.testclient import TestClient

from registrar.api.rest_api import RegistrarRestAPI
from registrar.persistence import Dataset
from registrar.services import QueryEngine


SAMPLE_DOCUMENT = {
    "students": [
        {"id": 1, "firstName": "Ada", "lastName": "Lovelace", "gpa": 3.9, "email": "ada@example.edu"},
        {"id": 2, "firstName": "Alan", "lastName": "Turing", "gpa": 3.5},
        {"id": 7, "firstName": "Grace", "lastName": "Hopper", "gpa": 3.42},
    ],
    "instructors": [
        {"id": 1, "name": "Dr. Knuth"},
        {"id": 2, "name": "Dr. Liskov"},
        {"id": 3, "name": "Dr. Idle"},
    ],
    "courses": [
        {"id": 10, "code": "CS100", "name": "Programming", "instructorId": 1, "schedule": "MWF 09:00"},
        {"id": 11, "code": "CS200", "name": "Algorithms", "instructorId": 1, "schedule": "TTh 10:00"},
        {"id": 12, "code": "MA100", "name": "Calculus", "instructorId": 2, "schedule": "MWF 11:00"},
        {"id": 13, "code": "MA300", "name": "Topology", "instructorId": 2, "schedule": "F 14:00"},
    ],
    "enrollments": [
        {"id": 1, "studentId": 1, "courseId": 10, "status": "enrolled", "grade": "A"},
        {"id": 2, "studentId": 2, "courseId": 10, "status": "enrolled", "grade": "B"},
        {"id": 3, "studentId": 7, "courseId": 10, "status": "enrolled", "grade": "Z"},
        {"id": 4, "studentId": 1, "courseId": 11, "status": "enrolled", "grade": "B+"},
        {"id": 5, "studentId": 2, "courseId": 11, "status": "dropped"},
        {"id": 6, "studentId": 7, "courseId": 12, "status": "Enrolled", "grade": ""},
        {"id": 7, "studentId": 7, "courseId": 99, "status": "enrolled"},
        {"id": 8, "studentId": 42, "courseId": 12, "status": "enrolled", "grade": "A-"},
        {"id": 9, "studentId": 7, "courseId": 11, "status": "enrolled"},
    ],
    "assignments": [
        {"id": 1, "courseId": 10, "title": "Hello"},
        {"id": 2, "courseId": 11, "title": "Sorting"},
        {"id": 3, "courseId": 10, "title": "Loops"},
    ],
    "grades": [
        {"id": 1, "enrollmentId": 1, "score": 10},
        {"id": 2, "enrollmentId": 1, "score": 9},
        {"id": 3, "enrollmentId": 4, "score": 7},
    ],
}


@pytest.fixture
def sample_document():
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def dataset(sample_document):
    return Dataset.from_dict(sample_document)


@pytest.fixture
def engine(dataset):
    return QueryEngine(dataset)


@pytest.fixture
def client(engine):
    return TestClient(RegistrarRestAPI(engine).app)
