"""Per-platform lookup of well-known user and site directories."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Mapping

from .env import LazyEnv, LazyValue, home_dir
from .errors import UnsupportedDirectoryError
from .platforms import Platform, current_platform, detect_platform, host_os_name
from .xdg import XDG_DEFAULTS, read_user_dir

__all__ = [
    "DEFAULT",
    "AppDirs",
    "DefaultDirs",
    "DirectoryKind",
    "MacOsDirs",
    "UnixDirs",
    "WindowsDirs",
    "for_platform",
]

logger = logging.getLogger(__name__)


class DirectoryKind(Enum):
    USER_DATA = "user-data"
    USER_CONFIG = "user-config"
    USER_CACHE = "user-cache"
    USER_LOG = "user-log"
    SITE_DATA = "site-data"
    SITE_CONFIG = "site-config"
    DOWNLOADS = "downloads"
    DESKTOP = "desktop"
    DOCUMENTS = "documents"
    MUSIC = "music"
    PICTURES = "pictures"
    VIDEOS = "videos"

    @property
    def modifier(self) -> str | None:
        """Name of the boolean flag this kind accepts, if any."""
        return _MODIFIERS.get(self)

    @classmethod
    def parse(cls, name: str) -> "DirectoryKind":
        normalized = name.strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedDirectoryError(f"unknown directory kind {name!r}") from None


_MODIFIERS: dict[DirectoryKind, str] = {
    DirectoryKind.USER_DATA: "roaming",
    DirectoryKind.USER_CONFIG: "roaming",
    DirectoryKind.SITE_DATA: "local",
}


class AppDirs(ABC):
    """Answers where each kind of well-known directory lives.

    Queries only compute paths; nothing is checked or created on disk.
    """

    platform: Platform

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self.env = env

    @property
    def home(self) -> Path:
        return home_dir(self.env)

    def concrete(self) -> "AppDirs":
        """Return the strategy that actually answers queries."""
        return self

    @abstractmethod
    def downloads_dir(self) -> Path: ...

    @abstractmethod
    def desktop_dir(self) -> Path: ...

    @abstractmethod
    def documents_dir(self) -> Path: ...

    @abstractmethod
    def music_dir(self) -> Path: ...

    @abstractmethod
    def pictures_dir(self) -> Path: ...

    @abstractmethod
    def videos_dir(self) -> Path: ...

    @abstractmethod
    def user_data_dir(self, roaming: bool = False) -> Path:
        """`roaming` selects the profile-synced location (Windows only)."""

    @abstractmethod
    def user_config_dir(self, roaming: bool = False) -> Path:
        """`roaming` selects the profile-synced location (Windows only)."""

    @abstractmethod
    def user_cache_dir(self) -> Path: ...

    @abstractmethod
    def user_log_dir(self) -> Path: ...

    @abstractmethod
    def site_data_dir(self, local: bool = False) -> Path:
        """`local` selects the locally installed variant (Unix only)."""

    @abstractmethod
    def site_config_dir(self) -> Path: ...

    def resolve(self, kind: DirectoryKind, *, roaming: bool = False, local: bool = False) -> Path:
        """Dispatch to the query for `kind`."""
        if roaming and kind.modifier != "roaming":
            raise UnsupportedDirectoryError(f"{kind.value} does not accept 'roaming'")
        if local and kind.modifier != "local":
            raise UnsupportedDirectoryError(f"{kind.value} does not accept 'local'")

        if kind is DirectoryKind.USER_DATA:
            return self.user_data_dir(roaming)
        if kind is DirectoryKind.USER_CONFIG:
            return self.user_config_dir(roaming)
        if kind is DirectoryKind.SITE_DATA:
            return self.site_data_dir(local)
        simple = {
            DirectoryKind.USER_CACHE: self.user_cache_dir,
            DirectoryKind.USER_LOG: self.user_log_dir,
            DirectoryKind.SITE_CONFIG: self.site_config_dir,
            DirectoryKind.DOWNLOADS: self.downloads_dir,
            DirectoryKind.DESKTOP: self.desktop_dir,
            DirectoryKind.DOCUMENTS: self.documents_dir,
            DirectoryKind.MUSIC: self.music_dir,
            DirectoryKind.PICTURES: self.pictures_dir,
            DirectoryKind.VIDEOS: self.videos_dir,
        }
        return simple[kind]()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MacOsDirs(AppDirs):
    # Finder localizes these folder names for display only, the names on disk
    # stay in English.
    platform = Platform.MACOS

    def downloads_dir(self) -> Path:
        return self.home / "Downloads"

    def desktop_dir(self) -> Path:
        return self.home / "Desktop"

    def documents_dir(self) -> Path:
        return self.home / "Documents"

    def music_dir(self) -> Path:
        return self.home / "Music"

    def pictures_dir(self) -> Path:
        return self.home / "Pictures"

    def videos_dir(self) -> Path:
        return self.home / "Videos"

    def user_data_dir(self, roaming: bool = False) -> Path:
        return self.home / "Library" / "Application Support"

    def user_config_dir(self, roaming: bool = False) -> Path:
        return self.user_data_dir(roaming)

    def user_cache_dir(self) -> Path:
        return self.home / "Library" / "Caches"

    def user_log_dir(self) -> Path:
        return self.home / "Library" / "Logs"

    def site_data_dir(self, local: bool = False) -> Path:
        return Path("/", "Library", "Application Support")

    def site_config_dir(self) -> Path:
        return self.site_data_dir(False)


class UnixDirs(AppDirs):
    """Freedesktop layout; media folders honour ``~/.config/user-dirs.dirs``."""

    platform = Platform.UNIX

    def _user_dir(self, key: str) -> Path:
        home = self.home
        return read_user_dir(key, home / XDG_DEFAULTS[key], home)

    def downloads_dir(self) -> Path:
        return self._user_dir("XDG_DOWNLOAD_DIR")

    def desktop_dir(self) -> Path:
        return self._user_dir("XDG_DESKTOP_DIR")

    def documents_dir(self) -> Path:
        return self._user_dir("XDG_DOCUMENTS_DIR")

    def music_dir(self) -> Path:
        return self._user_dir("XDG_MUSIC_DIR")

    def pictures_dir(self) -> Path:
        return self._user_dir("XDG_PICTURES_DIR")

    def videos_dir(self) -> Path:
        return self._user_dir("XDG_VIDEOS_DIR")

    def user_data_dir(self, roaming: bool = False) -> Path:
        return self.home / ".local" / "share"

    def user_config_dir(self, roaming: bool = False) -> Path:
        return self.home / ".config"

    def user_cache_dir(self) -> Path:
        return self.home / ".cache"

    def user_log_dir(self) -> Path:
        return self.home / ".cache" / "logs"

    def site_data_dir(self, local: bool = False) -> Path:
        if local:
            return Path("/", "usr", "local", "share")
        return Path("/", "usr", "share")

    def site_config_dir(self) -> Path:
        return Path("/", "etc")


class WindowsDirs(AppDirs):
    platform = Platform.WINDOWS

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        super().__init__(env)
        # read on first use so a missing variable only fails the queries that need it
        self._app_data = LazyEnv("APPDATA", env)
        self._local_app_data = LazyEnv("LOCALAPPDATA", env)
        self._program_data = LazyEnv("PROGRAMDATA", env)

    def downloads_dir(self) -> Path:
        return self.home / "Downloads"

    def desktop_dir(self) -> Path:
        return self.home / "Desktop"

    # pre-Vista folder names
    def documents_dir(self) -> Path:
        return self.home / "My Documents"

    def music_dir(self) -> Path:
        return self.home / "My Music"

    def pictures_dir(self) -> Path:
        return self.home / "My Pictures"

    def videos_dir(self) -> Path:
        return self.home / "My Videos"

    def user_data_dir(self, roaming: bool = False) -> Path:
        source = self._app_data if roaming else self._local_app_data
        return Path(source.get())

    def user_config_dir(self, roaming: bool = False) -> Path:
        return self.user_data_dir(roaming)

    def user_cache_dir(self) -> Path:
        return Path(self._local_app_data.get())

    def user_log_dir(self) -> Path:
        return Path(self._local_app_data.get())

    def site_data_dir(self, local: bool = False) -> Path:
        return Path(self._program_data.get())

    def site_config_dir(self) -> Path:
        return self.site_data_dir(False)


_STRATEGIES: dict[Platform, type[AppDirs]] = {
    Platform.WINDOWS: WindowsDirs,
    Platform.MACOS: MacOsDirs,
    Platform.UNIX: UnixDirs,
}

# strategies reading the process environment, one per platform for the whole process
_shared: dict[Platform, AppDirs] = {}
_shared_lock = threading.Lock()


def _shared_strategy(platform: Platform) -> AppDirs:
    with _shared_lock:
        strategy = _shared.get(platform)
        if strategy is None:
            strategy = _shared[platform] = _STRATEGIES[platform]()
        return strategy


class DefaultDirs(AppDirs):
    """Delegates every query to the strategy matching the host.

    Detection runs once per instance. Without an injected `env` the
    process-wide detected platform and its shared strategy are used.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        super().__init__(env)
        self._instance: LazyValue[AppDirs] = LazyValue(self._create_instance)

    def _create_instance(self) -> AppDirs:
        if self.env is None:
            detected = current_platform()
            logger.debug("default directories delegate to %s", detected.value)
            return _shared_strategy(detected)
        detected = detect_platform(host_os_name(self.env))
        logger.debug("default directories delegate to %s", detected.value)
        return _STRATEGIES[detected](self.env)

    @property
    def platform(self) -> Platform:  # type: ignore[override]
        return self._instance.get().platform

    def concrete(self) -> AppDirs:
        return self._instance.get()

    def downloads_dir(self) -> Path:
        return self.concrete().downloads_dir()

    def desktop_dir(self) -> Path:
        return self.concrete().desktop_dir()

    def documents_dir(self) -> Path:
        return self.concrete().documents_dir()

    def music_dir(self) -> Path:
        return self.concrete().music_dir()

    def pictures_dir(self) -> Path:
        return self.concrete().pictures_dir()

    def videos_dir(self) -> Path:
        return self.concrete().videos_dir()

    def user_data_dir(self, roaming: bool = False) -> Path:
        return self.concrete().user_data_dir(roaming)

    def user_config_dir(self, roaming: bool = False) -> Path:
        return self.concrete().user_config_dir(roaming)

    def user_cache_dir(self) -> Path:
        return self.concrete().user_cache_dir()

    def user_log_dir(self) -> Path:
        return self.concrete().user_log_dir()

    def site_data_dir(self, local: bool = False) -> Path:
        return self.concrete().site_data_dir(local)

    def site_config_dir(self) -> Path:
        return self.concrete().site_config_dir()


def for_platform(platform: Platform, env: Mapping[str, str] | None = None) -> AppDirs:
    """Return the strategy for `platform`; `Platform.DEFAULT` detects the host.

    Without an injected `env` the same instance is returned on every call, so
    Windows variables are read once per process. An injected `env` always
    gets a fresh strategy.
    """
    if not platform.is_concrete:
        return DefaultDirs(env)
    if env is None:
        return _shared_strategy(platform)
    return _STRATEGIES[platform](env)


DEFAULT = DefaultDirs()
