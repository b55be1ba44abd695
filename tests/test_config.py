import json

import pytest

from frankenstein_player.config import ConfigError, ConfigManager, Environment

FULL = {
    "enviroment": "testing",
    "database": {"filename": "test.db", "schema_path": "schema.sql"},
    "paths": {
        "user_home": "/music/user",
        "public_user": "/music/public",
        "input_public": "/input/public",
        "input_user": "/input/user",
    },
    "name": "player",
}


def load(tmp_path, data):
    path = tmp_path / "test.config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    manager = ConfigManager(str(path))
    manager.load_config()
    return manager


def test_missing_file(tmp_path):
    manager = ConfigManager(str(tmp_path / "absent.json"))
    with pytest.raises(ConfigError, match="Config file not found"):
        manager.load_config()


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid JSON format"):
        ConfigManager(str(path)).load_config()


def test_full_config_values(tmp_path):
    manager = load(tmp_path, FULL)
    assert manager.database_path() == "test.db"
    assert manager.database_schema_path() == "schema.sql"
    assert manager.user_music_directory() == "/music/user"
    assert manager.public_music_directory() == "/music/public"
    assert manager.input_public_path() == "/input/public"
    assert manager.input_user_path() == "/input/user"
    assert manager.environment() is Environment.TESTING


def test_get_config_value(tmp_path):
    manager = load(tmp_path, FULL)
    assert manager.get_config_value("name") == "player"
    assert manager.get_config_value("missing") == ""


def test_database_filename_default(tmp_path):
    manager = load(tmp_path, {"database": {"schema_path": "s.sql"}})
    assert manager.database_path() == "frankenstein.db"


def test_database_missing(tmp_path):
    manager = load(tmp_path, {})
    with pytest.raises(ConfigError, match="Database configuration not found"):
        manager.database_path()
    with pytest.raises(ConfigError, match="Database configuration not found"):
        manager.database_schema_path()


@pytest.mark.parametrize("database", [{"filename": "x.db"}, {"schema_path": ""}])
def test_schema_path_missing_or_empty(tmp_path, database):
    manager = load(tmp_path, {"database": database})
    with pytest.raises(ConfigError, match="Database schema path not found"):
        manager.database_schema_path()


def test_paths_section_missing(tmp_path):
    manager = load(tmp_path, {})
    with pytest.raises(ConfigError, match="Paths configuration not found"):
        manager.validate_config_paths()


@pytest.mark.parametrize(
    "key, message",
    [
        ("user_home", "User music directory not found"),
        ("public_user", "Public music directory not found"),
        ("input_public", "Input public path not found"),
        ("input_user", "Input user path not found"),
    ],
)
def test_each_path_required(tmp_path, key, message):
    paths = dict(FULL["paths"])
    paths[key] = ""
    manager = load(tmp_path, {"paths": paths})
    with pytest.raises(ConfigError, match=message):
        manager.input_user_path()


@pytest.mark.parametrize(
    "value, expected",
    [
        ("production", Environment.PRODUCTION),
        ("testing", Environment.TESTING),
        ("anything", Environment.DEVELOPMENT),
    ],
)
def test_environment(tmp_path, value, expected):
    assert load(tmp_path, {"enviroment": value}).environment() is expected


def test_environment_defaults_to_production(tmp_path):
    assert load(tmp_path, {}).environment() is Environment.PRODUCTION


def test_str_contains_path_and_data(tmp_path):
    manager = load(tmp_path, {"a": "b"})
    text = str(manager)
    assert text.startswith("ConfigManager:\n - Config file path: ")
    assert manager.config_file_path in text
    assert json.dumps({"a": "b"}, indent=4) in text


def test_unloaded_config_has_no_database(tmp_path):
    manager = ConfigManager(str(tmp_path / "x.json"))
    with pytest.raises(ConfigError):
        manager.database_path()
    assert manager.get_config_value("anything") == ""