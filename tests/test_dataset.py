import json

import pytest

from registrar.core import DatasetError, EntityType, Student
from registrar.persistence import Dataset, load_dataset


def test_from_dict_builds_typed_collections(dataset):
    students = dataset.collection(EntityType.STUDENT)
    assert isinstance(students, tuple)
    assert all(isinstance(s, Student) for s in students)
    assert [s.id for s in students] == [1, 2, 7]


def test_counts(dataset):
    assert dataset.counts() == {
        "students": 3,
        "instructors": 3,
        "courses": 4,
        "enrollments": 9,
        "assignments": 3,
        "grades": 3,
    }
    assert len(dataset) == 25


def test_missing_collection_is_empty():
    dataset = Dataset.from_dict({"students": [{"id": 1}]})
    assert dataset.collection(EntityType.GRADE) == ()
    assert len(dataset.collection(EntityType.STUDENT)) == 1


def test_to_dict_is_the_source_document(dataset, sample_document):
    assert dataset.to_dict() == sample_document


def test_to_dict_cannot_mutate_dataset(dataset):
    document = dataset.to_dict()
    document["students"].clear()
    assert len(dataset.collection(EntityType.STUDENT)) == 3
    assert len(dataset.to_dict()["students"]) == 3


def test_source_document_changes_do_not_leak(sample_document):
    dataset = Dataset.from_dict(sample_document)
    sample_document["students"][0]["firstName"] = "Changed"
    assert dataset.collection(EntityType.STUDENT)[0].first_name == "Ada"


@pytest.mark.parametrize("document", [
    [],
    "students",
    {"students": {"id": 1}},
    {"courses": [{"code": "CS100"}]},
    {"grades": [1, 2, 3]},
])
def test_malformed_documents_are_rejected(document):
    with pytest.raises(DatasetError):
        Dataset.from_dict(document)


def test_load_dataset_from_file(tmp_path, sample_document):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    dataset = load_dataset(path)
    assert dataset.counts()["enrollments"] == 9


def test_load_dataset_missing_file(tmp_path):
    with pytest.raises(DatasetError, match="not found"):
        load_dataset(tmp_path / "absent.json")


def test_load_dataset_invalid_json(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DatasetError, match="not valid JSON"):
        load_dataset(path)
