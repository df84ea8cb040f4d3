import json

import pytest

from arithmego.storage.config import (
    DEFAULT_AUTO_UPDATE,
    DEFAULT_DIFFICULTY,
    DEFAULT_DURATION_MS,
    Config,
    load_config,
    new_config,
    save_config,
)
from arithmego.storage.paths import config_path, set_config_dir_override


@pytest.fixture(autouse=True)
def temp_config_dir(tmp_path):
    set_config_dir_override(tmp_path)
    yield tmp_path
    set_config_dir_override(None)


def test_new_config():
    config = new_config()
    assert config.default_difficulty == DEFAULT_DIFFICULTY
    assert config.default_duration_ms == DEFAULT_DURATION_MS
    assert config.auto_update == DEFAULT_AUTO_UPDATE
    assert config.default_difficulty == "Easy"
    assert config.default_duration_ms == 60000


@pytest.mark.parametrize(
    "config, want",
    [
        (Config(), False),
        (Config(last_played_difficulty="Normal", last_played_duration_ms=60000), False),
        (Config(last_played_mode_id="addition", last_played_duration_ms=60000), False),
        (Config(last_played_mode_id="addition", last_played_difficulty="Normal"), False),
        (Config(last_played_mode_id="addition", last_played_difficulty="Normal", last_played_duration_ms=0), False),
        (Config(last_played_mode_id="addition", last_played_difficulty="Normal", last_played_duration_ms=-60000), False),
        (Config(last_played_mode_id="addition", last_played_difficulty="Normal", last_played_duration_ms=60000), True),
    ],
)
def test_has_last_played(config, want):
    assert config.has_last_played() is want


def test_to_dict_omits_empty_fields():
    assert Config().to_dict() == {"auto_update": False, "skip_quit_confirmation": False}
    d = Config(onboarded=True, input_method="typing").to_dict()
    assert d["onboarded"] is True
    assert d["input_method"] == "typing"


def test_load_save_config():
    config = load_config()
    assert config.default_difficulty == DEFAULT_DIFFICULTY
    assert config.auto_update == DEFAULT_AUTO_UPDATE

    config.default_difficulty = "Hard"
    config.default_duration_ms = 90000
    config.auto_update = False
    config.last_played_mode_id = "multiplication"
    config.last_played_difficulty = "Expert"
    config.last_played_duration_ms = 120000
    save_config(config)

    assert config_path().exists()

    loaded = load_config()
    assert loaded.default_difficulty == "Hard"
    assert loaded.default_duration_ms == 90000
    assert loaded.auto_update is False
    assert loaded.last_played_mode_id == "multiplication"
    assert loaded.last_played_difficulty == "Expert"
    assert loaded.last_played_duration_ms == 120000
    assert loaded.has_last_played()
    assert loaded == config


def test_saved_file_uses_json_keys():
    save_config(new_config())
    data = json.loads(config_path().read_text(encoding="utf-8"))
    assert data == {
        "default_difficulty": "Easy",
        "default_duration_ms": 60000,
        "auto_update": True,
        "skip_quit_confirmation": False,
    }


def test_load_config_corrupted_json():
    config_path().write_bytes(b'{"default_difficulty": "Hard", "auto_update')
    assert load_config() == new_config()


def test_load_config_non_object_json():
    config_path().write_bytes(b"[1, 2, 3]")
    assert load_config() == new_config()


def test_load_config_wrong_field_type():
    config_path().write_bytes(b'{"default_duration_ms": "long", "auto_update": false}')
    assert load_config() == new_config()


def test_load_config_applies_defaults():
    config_path().write_bytes(b'{"auto_update": false, "last_played_mode_id": "test"}')
    config = load_config()
    assert config.default_difficulty == DEFAULT_DIFFICULTY
    assert config.default_duration_ms == DEFAULT_DURATION_MS
    assert config.auto_update is False
    assert config.last_played_mode_id == "test"


def test_config_path(temp_config_dir):
    path = config_path()
    assert path.parent == temp_config_dir
    assert path.name == "config.json"