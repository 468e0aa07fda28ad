import pytest

from registrar.core import (
    Student, Course, Enrollment, canonical_id, ids_equal
)


@pytest.mark.parametrize("value, expected", [
    (7, "7"),
    (7.0, "7"),
    ("7", "7"),
    (" 7 ", "7"),
    ("07", "7"),
    ("7.0", "7"),
    (3.5, "3.5"),
    ("3.50", "3.5"),
    ("abc", "abc"),
    ("nan", "nan"),
    (None, None),
])
def test_canonical_id(value, expected):
    assert canonical_id(value) == expected


def test_ids_equal_is_loose_between_numbers_and_text():
    assert ids_equal(7, "7")
    assert ids_equal("7", 7.0)
    assert not ids_equal(7, "8")
    assert not ids_equal(None, None)
    assert not ids_equal(7, "seven")


def test_student_properties():
    student = Student({"id": 7, "firstName": "Grace", "lastName": "Hopper", "gpa": 3.42})
    assert student.id == 7
    assert student.key == "7"
    assert student.full_name == "Grace Hopper"
    assert student.gpa == 3.42


def test_records_are_read_only():
    course = Course({"id": 1, "code": "CS100"})
    with pytest.raises(AttributeError):
        course.code = "CS999"
    with pytest.raises(AttributeError):
        course.extra = 1


def test_to_dict_returns_a_copy():
    course = Course({"id": 1, "code": "CS100", "room": "B12"})
    data = course.to_dict()
    data["code"] = "changed"
    assert course.code == "CS100"
    assert course.to_dict() == {"id": 1, "code": "CS100", "room": "B12"}


def test_enrollment_status_match_is_exact():
    assert Enrollment({"id": 1, "status": "enrolled"}).is_enrolled
    assert not Enrollment({"id": 2, "status": "Enrolled"}).is_enrolled
    assert not Enrollment({"id": 3, "status": "dropped"}).is_enrolled
    assert not Enrollment({"id": 4}).is_enrolled


def test_enrollment_is_graded_only_with_non_empty_grade():
    assert Enrollment({"id": 1, "grade": "A"}).is_graded
    assert not Enrollment({"id": 2, "grade": ""}).is_graded
    assert not Enrollment({"id": 3, "grade": None}).is_graded
    assert not Enrollment({"id": 4}).is_graded


def test_records_compare_by_type_and_content():
    assert Student({"id": 1}) == Student({"id": 1})
    assert Student({"id": 1}) != Course({"id": 1})
    assert len({Student({"id": 1}), Student({"id": 1})}) == 1


@pytest.mark.parametrize("data, name", [
    ({"id": 1, "firstName": "Grace", "lastName": "Hopper"}, "Grace Hopper"),
    ({"id": 1, "firstName": "Grace"}, "Grace"),
    ({"id": 1, "firstName": None, "lastName": "Hopper"}, "Hopper"),
    ({"id": 1}, ""),
    ({"id": 1, "firstName": 8, "lastName": 5}, "8 5"),
])
def test_full_name_leaves_out_absent_parts(data, name):
    assert Student(data).full_name == name
