"""Platform-aware lookup and creation of well-known application directories."""

from .config import DirkitSettings, load_settings
from .dirs import (
    DEFAULT,
    AppDirs,
    DefaultDirs,
    DirectoryKind,
    MacOsDirs,
    UnixDirs,
    WindowsDirs,
    for_platform,
)
from .env import LazyEnv, LazyValue, get_env, get_env_or_none, home_dir
from .errors import (
    ConfigError,
    DirkitError,
    MissingEnvironmentVariableError,
    UnsupportedDirectoryError,
)
from .materialize import (
    create_desktop_dir,
    create_directory,
    create_documents_dir,
    create_downloads_dir,
    create_music_dir,
    create_pictures_dir,
    create_site_config_dir,
    create_site_data_dir,
    create_user_cache_dir,
    create_user_config_dir,
    create_user_data_dir,
    create_user_log_dir,
    create_videos_dir,
    directory_path,
    ensure_directory,
)
from .platforms import Platform, current_platform, detect_platform, host_os_name

__version__ = "0.1.0"

__all__ = [
    "DEFAULT",
    "AppDirs",
    "ConfigError",
    "DefaultDirs",
    "DirectoryKind",
    "DirkitError",
    "DirkitSettings",
    "LazyEnv",
    "LazyValue",
    "MacOsDirs",
    "MissingEnvironmentVariableError",
    "Platform",
    "UnixDirs",
    "UnsupportedDirectoryError",
    "WindowsDirs",
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
    "current_platform",
    "detect_platform",
    "directory_path",
    "ensure_directory",
    "for_platform",
    "get_env",
    "get_env_or_none",
    "home_dir",
    "host_os_name",
    "load_settings",
]
