"""Create well-known directories (and an application subdirectory) on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from .dirs import DEFAULT, AppDirs, DirectoryKind
from .platforms import Platform

__all__ = [
    "create_desktop_dir",
    "create_directory",
    "create_documents_dir",
    "create_downloads_dir",
    "create_music_dir",
    "create_pictures_dir",
    "create_site_config_dir",
    "create_site_data_dir",
    "create_user_cache_dir",
    "create_user_config_dir",
    "create_user_data_dir",
    "create_user_log_dir",
    "create_videos_dir",
    "directory_path",
    "ensure_directory",
]

logger = logging.getLogger(__name__)

# Windows keeps cache and logs beneath the application folder in LOCALAPPDATA.
_WINDOWS_SUFFIXES: dict[DirectoryKind, str] = {
    DirectoryKind.USER_CACHE: "Cache",
    DirectoryKind.USER_LOG: "Logs",
}


def ensure_directory(path: Path) -> Path:
    """Create `path` and any missing parents; existing directories are fine."""
    if not path.is_dir():
        logger.debug("creating directory %s", path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def directory_path(
    dirs: AppDirs,
    kind: DirectoryKind,
    name: str | None = None,
    *,
    roaming: bool = False,
    local: bool = False,
) -> Path:
    """Compute the path `create_directory` would create, without touching disk."""
    strategy = dirs.concrete()
    path = strategy.resolve(kind, roaming=roaming, local=local)
    if name:
        path = path / name
        if strategy.platform is Platform.WINDOWS and kind in _WINDOWS_SUFFIXES:
            path = path / _WINDOWS_SUFFIXES[kind]
    return path


def create_directory(
    dirs: AppDirs,
    kind: DirectoryKind,
    name: str | None = None,
    *,
    roaming: bool = False,
    local: bool = False,
) -> Path:
    return ensure_directory(directory_path(dirs, kind, name, roaming=roaming, local=local))


def create_downloads_dir(name: str | None = None, *, dirs: AppDirs = DEFAULT) -> Path:
    return create_directory(dirs, DirectoryKind.DOWNLOADS, name)


def create_desktop_dir(name: str | None = None, *, dirs: AppDirs = DEFAULT) -> Path:
    return create_directory(dirs, DirectoryKind.DESKTOP, name)


def create_documents_dir(name: str | None = None, *, dirs: AppDirs = DEFAULT) -> Path:
    return create_directory(dirs, DirectoryKind.DOCUMENTS, name)


def create_music_dir(name: str | None = None, *, dirs: AppDirs = DEFAULT) -> Path:
    return create_directory(dirs, DirectoryKind.MUSIC, name)


def create_pictures_dir(name: str | None = None, *, dirs: AppDirs = DEFAULT) -> Path:
    return create_directory(dirs, DirectoryKind.PICTURES, name)


def create_videos_dir(name: str | None = None, *, dirs: AppDirs = DEFAULT) -> Path:
    return create_directory(dirs, DirectoryKind.VIDEOS, name)


def create_user_data_dir(
    name: str | None = None, roaming: bool = False, *, dirs: AppDirs = DEFAULT
) -> Path:
    """Create the user data directory, roaming with the profile on Windows if asked."""
    return create_directory(dirs, DirectoryKind.USER_DATA, name, roaming=roaming)


def create_user_config_dir(
    name: str | None = None, roaming: bool = False, *, dirs: AppDirs = DEFAULT
) -> Path:
    return create_directory(dirs, DirectoryKind.USER_CONFIG, name, roaming=roaming)


def create_user_cache_dir(name: str | None = None, *, dirs: AppDirs = DEFAULT) -> Path:
    """On Windows this is ``%LOCALAPPDATA%/<name>/Cache``."""
    return create_directory(dirs, DirectoryKind.USER_CACHE, name)


def create_user_log_dir(name: str | None = None, *, dirs: AppDirs = DEFAULT) -> Path:
    """On Windows this is ``%LOCALAPPDATA%/<name>/Logs``."""
    return create_directory(dirs, DirectoryKind.USER_LOG, name)


def create_site_data_dir(
    name: str | None = None, local: bool = False, *, dirs: AppDirs = DEFAULT
) -> Path:
    return create_directory(dirs, DirectoryKind.SITE_DATA, name, local=local)


def create_site_config_dir(name: str | None = None, *, dirs: AppDirs = DEFAULT) -> Path:
    return create_directory(dirs, DirectoryKind.SITE_CONFIG, name)
