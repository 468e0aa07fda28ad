import json

import pytest

from registrar.core import ConfigurationError, DatasetError, EntityType
from registrar.main import (
    DEFAULT_CONFIG, RegistrarPlatform, build_config, load_config_file
)


def test_build_config_defaults():
    assert build_config(environ={}) == DEFAULT_CONFIG


def test_build_config_precedence():
    config = build_config(
        {"port": 6000, "host": "127.0.0.1"},
        environ={"PORT": "7000", "REGISTRAR_DATA_PATH": "/tmp/env.json"},
        overrides={"port": 8000, "data_path": None},
    )
    assert config["port"] == 8000
    assert config["host"] == "127.0.0.1"
    assert config["data_path"] == "/tmp/env.json"


def test_build_config_port_from_environment_is_int():
    assert build_config(environ={"PORT": "5050"})["port"] == 5050


@pytest.mark.parametrize("file_config", [
    {"port": "http"},
    {"port": 0},
    {"port": 70000},
    {"log_level": "verbose"},
])
def test_build_config_rejects_invalid_values(file_config):
    with pytest.raises(ConfigurationError):
        build_config(file_config, environ={})


def test_load_config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"port": 9000}), encoding="utf-8")
    assert load_config_file(str(path)) == {"port": 9000}


def test_load_config_file_errors(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config_file(str(tmp_path / "absent.json"))
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config_file(str(path))


def test_platform_with_injected_dataset(dataset):
    platform = RegistrarPlatform(dataset=dataset)
    assert platform.engine.dataset is dataset
    assert platform.app.title == "Registrar Query API"


def test_platform_loads_bundled_dataset():
    platform = RegistrarPlatform()
    student = platform.engine.get_record(EntityType.STUDENT, "7")
    assert platform.engine.student_gpa(student.id).gpa == 3.42


def test_platform_missing_dataset_aborts(tmp_path):
    with pytest.raises(DatasetError):
        RegistrarPlatform({"data_path": str(tmp_path / "absent.json")})
