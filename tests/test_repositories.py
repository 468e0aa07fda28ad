from registrar.persistence import (
    StudentRepository, CourseRepository, EnrollmentRepository, GradeRepository
)


def test_find_by_id_uses_loose_equality(dataset):
    repo = StudentRepository(dataset)
    assert repo.find_by_id(7).first_name == "Grace"
    assert repo.find_by_id("7").first_name == "Grace"
    assert repo.find_by_id("07").first_name == "Grace"


def test_find_by_id_absent(dataset):
    repo = StudentRepository(dataset)
    assert repo.find_by_id(99) is None
    assert repo.find_by_id("abc") is None
    assert repo.find_by_id(None) is None


def test_find_by_id_returns_shared_instance(dataset):
    repo = StudentRepository(dataset)
    assert repo.find_by_id(1) is repo.find_by_id("1")


def test_find_by_id_returns_first_duplicate():
    from registrar.persistence import Dataset
    dataset = Dataset.from_dict({"students": [
        {"id": 1, "firstName": "First"},
        {"id": "1", "firstName": "Second"},
    ]})
    assert StudentRepository(dataset).find_by_id(1).first_name == "First"


def test_find_all_preserves_order(dataset):
    assert [c.code for c in CourseRepository(dataset).find_all()] == [
        "CS100", "CS200", "MA100", "MA300"
    ]


def test_find_where_preserves_order_and_returns_empty_list(dataset):
    repo = EnrollmentRepository(dataset)
    assert [e.id for e in repo.find_where(lambda e: e.status == "enrolled")] == [1, 2, 3, 4, 7, 8, 9]
    assert repo.find_where(lambda e: False) == []


def test_foreign_key_filters(dataset):
    enrollments = EnrollmentRepository(dataset)
    assert [e.id for e in enrollments.find_by_student("7")] == [3, 6, 7, 9]
    assert [e.id for e in enrollments.find_by_course(11)] == [4, 5, 9]
    assert [c.id for c in CourseRepository(dataset).find_by_instructor("2")] == [12, 13]
    assert [g.id for g in GradeRepository(dataset).find_by_enrollment(1)] == [1, 2]
    assert GradeRepository(dataset).find_by_enrollment("x") == []


def test_count(dataset):
    assert EnrollmentRepository(dataset).count() == 9
    assert StudentRepository(dataset).entity_name == "Student"
