"""Locations of the configuration and statistics files."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

CONFIG_DIR_NAME = "arithmego"
STATISTICS_FILE = "statistics.json"
CONFIG_FILE = "config.json"

_config_dir_override: Path | None = None


def set_config_dir_override(path: str | os.PathLike[str] | None) -> None:
    """Use ``path`` as the configuration directory; None or "" restores the default."""
    global _config_dir_override
    _config_dir_override = Path(path) if path else None


def _user_config_home() -> Path:
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA", "")
        if not appdata:
            raise OSError("%APPDATA% is not defined")
        return Path(appdata)

    home = os.environ.get("HOME", "")
    if sys.platform == "darwin":
        if not home:
            raise OSError("$HOME is not defined")
        return Path(home) / "Library" / "Application Support"

    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        if not os.path.isabs(xdg):
            raise OSError("path in $XDG_CONFIG_HOME is relative")
        return Path(xdg)
    if not home:
        raise OSError("neither $XDG_CONFIG_HOME nor $HOME are defined")
    return Path(home) / ".config"


def config_dir() -> Path:
    """Return the configuration directory, creating it if needed."""
    directory = _config_dir_override or _user_config_home() / CONFIG_DIR_NAME
    directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    return directory


def statistics_path() -> Path:
    """Return the path of the statistics file."""
    return config_dir() / STATISTICS_FILE


def config_path() -> Path:
    """Return the path of the configuration file."""
    return config_dir() / CONFIG_FILE


def atomic_write(path: str | os.PathLike[str], data: bytes) -> None:
    """Write ``data`` to ``path`` through a synced temporary file and a rename.

    The file is created with owner-only permissions. The temporary file is
    removed if anything fails.
    """
    target = Path(path)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f"{target.stem}-", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as tmp:
            os.chmod(tmp_name, 0o600)
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.remove(tmp_name)
        except FileNotFoundError:
            pass
        raise