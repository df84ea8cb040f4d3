"""User preferences and Quick Play state, stored as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import Any

from arithmego.storage.paths import atomic_write, config_path

DEFAULT_DIFFICULTY = "Easy"
DEFAULT_DURATION_MS = 60000
DEFAULT_AUTO_UPDATE = True

# Fields written even when they hold their zero value.
_ALWAYS_WRITTEN = frozenset({"auto_update", "skip_quit_confirmation"})


@dataclass
class Config:
    """User preferences and the settings of the last game played."""

    onboarded: bool = False
    default_difficulty: str = ""
    default_duration_ms: int = 0
    last_played_mode_id: str = ""
    last_played_difficulty: str = ""
    last_played_duration_ms: int = 0
    auto_update: bool = False
    input_method: str = ""
    skip_quit_confirmation: bool = False

    def has_last_played(self) -> bool:
        """Return True if the last-played settings are complete."""
        return (
            self.last_played_mode_id != ""
            and self.last_played_difficulty != ""
            and self.last_played_duration_ms > 0
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty optional fields."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _ALWAYS_WRITTEN or value:
                result[f.name] = value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a Config from its JSON form; raises ValueError on a wrong type."""
        config = cls()
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                continue
            expected = type(getattr(config, f.name))
            valid = isinstance(value, expected) and (expected is bool or not isinstance(value, bool))
            if not valid:
                raise ValueError(f"config field {f.name!r} has the wrong type")
            setattr(config, f.name, value)
        return config


def new_config() -> Config:
    """Return a Config holding the defaults."""
    return Config(
        default_difficulty=DEFAULT_DIFFICULTY,
        default_duration_ms=DEFAULT_DURATION_MS,
        auto_update=DEFAULT_AUTO_UPDATE,
    )


def load_config() -> Config:
    """Read the config file.

    A missing or unreadable-as-JSON file gives the defaults; other I/O errors
    are raised.
    """
    path = config_path()
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return new_config()

    try:
        data = json.loads(raw)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("config is not a JSON object")
        config = Config.from_dict(data)
    except ValueError:
        # The config is not critical and can be regenerated.
        return new_config()

    if not config.default_difficulty:
        config.default_difficulty = DEFAULT_DIFFICULTY
    if config.default_duration_ms == 0:
        config.default_duration_ms = DEFAULT_DURATION_MS
    return config


def save_config(config: Config) -> None:
    """Write the config file atomically."""
    data = json.dumps(config.to_dict(), indent=2, ensure_ascii=False).encode("utf-8")
    atomic_write(config_path(), data)