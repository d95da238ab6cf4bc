"""Layered settings for dirkit (overrides, environment, TOML file, defaults)."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import tomllib

from .errors import ConfigError

CONFIG_ENV_VAR = "DIRKIT_CONFIG"

_SETTING_KEYS = ("os_name", "home")
_ENV_KEY_MAP: dict[str, str] = {
    "os_name": "DIRKIT_OS_NAME",
    "home": "DIRKIT_HOME",
}


_FileStamp = tuple[int, int]

# path -> (stamp, parsed keys); a file is parsed again only when its stamp changes
_file_cache: dict[Path, tuple[_FileStamp, dict[str, str]]] = {}
_file_cache_lock = threading.Lock()


def _load_config_from_file(path: Path) -> dict[str, str]:
    try:
        stat = path.stat()
    except FileNotFoundError:
        return {}
    except OSError as exc:
        raise ConfigError(f"could not load settings from {path}: {exc}") from exc
    stamp = (stat.st_mtime_ns, stat.st_size)
    with _file_cache_lock:
        cached = _file_cache.get(path)
        if cached is not None and cached[0] == stamp:
            return cached[1]
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"could not load settings from {path}: {exc}") from exc
    values = {key: str(value) for key, value in data.items() if key in _SETTING_KEYS}
    with _file_cache_lock:
        _file_cache[path] = (stamp, values)
    return values


@dataclass(frozen=True)
class DirkitSettings:
    """Host facts that callers may pin instead of reading them from the system."""

    os_name: str | None = None
    home: Path | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "DirkitSettings":
        home = values.get("home")
        return cls(
            os_name=values.get("os_name") or None,
            home=Path(home).expanduser() if home else None,
        )


def load_settings(
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, str] | None = None,
    config_path: Path | None = None,
) -> DirkitSettings:
    """Resolve settings using overrides, env, config file, defaults order."""
    env = os.environ if env is None else env
    overrides = dict(overrides or {})

    if config_path is None and (configured := env.get(CONFIG_ENV_VAR)):
        config_path = Path(configured).expanduser()
    file_layer = _load_config_from_file(config_path) if config_path else {}

    values: dict[str, str] = {}
    for key in _SETTING_KEYS:
        if value := overrides.get(key):
            values[key] = value
        elif value := env.get(_ENV_KEY_MAP[key]):
            values[key] = value
        elif value := file_layer.get(key):
            values[key] = value
    return DirkitSettings.from_mapping(values)
