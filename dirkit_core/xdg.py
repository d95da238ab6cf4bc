"""Reader for the XDG ``user-dirs.dirs`` file used by Unix desktops.

The file is a shell fragment of ``KEY="value"`` lines, for example::

    XDG_DOWNLOAD_DIR="$HOME/Downloads"
    XDG_MUSIC_DIR="$HOME/Music"

Lines are scanned in order and the last assignment of a key is the one that
counts, the same as when the file is sourced by a shell.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

__all__ = [
    "USER_DIRS_FILE",
    "XDG_DEFAULTS",
    "parse_user_dirs",
    "read_user_dir",
    "user_dirs_path",
]

logger = logging.getLogger(__name__)

USER_DIRS_FILE = Path(".config", "user-dirs.dirs")

# key -> default folder name under the home directory
XDG_DEFAULTS: dict[str, str] = {
    "XDG_DOWNLOAD_DIR": "Downloads",
    "XDG_DESKTOP_DIR": "Desktop",
    "XDG_DOCUMENTS_DIR": "Documents",
    "XDG_MUSIC_DIR": "Music",
    "XDG_PICTURES_DIR": "Pictures",
    "XDG_VIDEOS_DIR": "Videos",
}

_HOME_TOKENS = ("$HOME", "${HOME}")


def user_dirs_path(home: Path) -> Path:
    return home / USER_DIRS_FILE


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _expand(value: str, home: Path) -> Path:
    for token in _HOME_TOKENS:
        if value == token:
            return home
        if value.startswith(token + "/"):
            return home.joinpath(*(part for part in value[len(token) + 1 :].split("/") if part))
    path = Path(value)
    return path if path.is_absolute() else home / path


def _iter_assignments(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        yield key.strip(), _unquote(value)


def parse_user_dirs(text: str, home: Path) -> dict[str, Path]:
    """Return every assignment in `text`, later lines overriding earlier ones."""
    return {key: _expand(value, home) for key, value in _iter_assignments(text.splitlines())}


def read_user_dir(key: str, default: Path, home: Path) -> Path:
    """Resolve `key` from ``~/.config/user-dirs.dirs``, or return `default`.

    The file is read on every call. Undecodable bytes are kept as surrogate
    escapes so the returned path maps back to the original file name.
    """
    config = user_dirs_path(home)
    if not config.is_file():
        return default
    found: str | None = None
    with config.open(encoding="utf-8", errors="surrogateescape") as handle:
        for name, value in _iter_assignments(handle):
            if name == key:
                found = value
    if found is None:
        return default
    resolved = _expand(found, home)
    logger.debug("%s resolved to %s from %s", key, resolved, config)
    return resolved
