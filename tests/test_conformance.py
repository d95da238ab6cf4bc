"""Cross-check the Unix and macOS layouts against platformdirs."""

from __future__ import annotations

from pathlib import Path

import pytest
from platformdirs.macos import MacOS
from platformdirs.unix import Unix

from dirkit_core.dirs import DirectoryKind, MacOsDirs, UnixDirs
from dirkit_core.materialize import directory_path

APP_NAME = "App"


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("XDG_DATA_HOME", "XDG_CONFIG_HOME", "XDG_CACHE_HOME"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.mark.parametrize(
    ("kind", "attribute"),
    [
        (DirectoryKind.USER_DATA, "user_data_dir"),
        (DirectoryKind.USER_CONFIG, "user_config_dir"),
        (DirectoryKind.USER_CACHE, "user_cache_dir"),
    ],
)
def test_unix_user_dirs_match_platformdirs(home: Path, kind: DirectoryKind, attribute: str) -> None:
    expected = Path(getattr(Unix(appname=APP_NAME, appauthor=False), attribute))
    assert directory_path(UnixDirs({"HOME": str(home)}), kind, APP_NAME) == expected


@pytest.mark.parametrize(
    ("kind", "attribute"),
    [
        (DirectoryKind.USER_DATA, "user_data_dir"),
        (DirectoryKind.USER_CACHE, "user_cache_dir"),
        (DirectoryKind.USER_LOG, "user_log_dir"),
    ],
)
def test_macos_user_dirs_match_platformdirs(home: Path, kind: DirectoryKind, attribute: str) -> None:
    expected = Path(getattr(MacOS(appname=APP_NAME, appauthor=False), attribute))
    assert directory_path(MacOsDirs({"HOME": str(home)}), kind, APP_NAME) == expected
