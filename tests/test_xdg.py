"""Tests for the XDG user-dirs reader."""

from __future__ import annotations

import os
from pathlib import Path

from dirkit_core.xdg import parse_user_dirs, read_user_dir, user_dirs_path


def _write_user_dirs(home: Path, text: str) -> Path:
    config = user_dirs_path(home)
    config.parent.mkdir(parents=True, exist_ok=True)
    config.write_text(text)
    return config


def test_missing_file_returns_default(tmp_path: Path) -> None:
    default = tmp_path / "Downloads"
    assert read_user_dir("XDG_DOWNLOAD_DIR", default, tmp_path) == default


def test_last_assignment_wins(tmp_path: Path) -> None:
    _write_user_dirs(
        tmp_path,
        'XDG_DOWNLOAD_DIR="$HOME/Downloads"\n'
        'XDG_DOWNLOAD_DIR="$HOME/MyDownloads"\n',
    )
    resolved = read_user_dir("XDG_DOWNLOAD_DIR", tmp_path / "Downloads", tmp_path)
    assert resolved == tmp_path / "MyDownloads"


def test_unmatched_key_returns_default(tmp_path: Path) -> None:
    _write_user_dirs(tmp_path, 'XDG_MUSIC_DIR="$HOME/Tunes"\n')
    default = tmp_path / "Pictures"
    assert read_user_dir("XDG_PICTURES_DIR", default, tmp_path) == default


def test_comments_and_similar_keys_are_ignored(tmp_path: Path) -> None:
    _write_user_dirs(
        tmp_path,
        "# XDG_VIDEOS_DIR=\"$HOME/Commented\"\n"
        "XDG_VIDEOS_DIR_EXTRA=\"$HOME/Other\"\n"
        "  XDG_VIDEOS_DIR=\"$HOME/Media/Videos\"  \n",
    )
    resolved = read_user_dir("XDG_VIDEOS_DIR", tmp_path / "Videos", tmp_path)
    assert resolved == tmp_path / "Media" / "Videos"


def test_absolute_and_relative_values(tmp_path: Path) -> None:
    parsed = parse_user_dirs(
        'XDG_DESKTOP_DIR="/srv/desktop"\n'
        "XDG_DOCUMENTS_DIR=Papers\n"
        'XDG_MUSIC_DIR="$HOME"\n'
        'XDG_PICTURES_DIR="${HOME}/Photos"\n',
        tmp_path,
    )
    assert parsed["XDG_DESKTOP_DIR"] == Path("/srv/desktop")
    assert parsed["XDG_DOCUMENTS_DIR"] == tmp_path / "Papers"
    assert parsed["XDG_MUSIC_DIR"] == tmp_path
    assert parsed["XDG_PICTURES_DIR"] == tmp_path / "Photos"


def test_parse_user_dirs_keeps_last_assignment(tmp_path: Path) -> None:
    parsed = parse_user_dirs(
        'XDG_DOWNLOAD_DIR="$HOME/Downloads"\nXDG_DOWNLOAD_DIR="$HOME/MyDownloads"\n',
        tmp_path,
    )
    assert parsed == {"XDG_DOWNLOAD_DIR": tmp_path / "MyDownloads"}


def test_file_is_read_on_every_call(tmp_path: Path) -> None:
    config = _write_user_dirs(tmp_path, 'XDG_DESKTOP_DIR="$HOME/First"\n')
    default = tmp_path / "Desktop"
    assert read_user_dir("XDG_DESKTOP_DIR", default, tmp_path) == tmp_path / "First"
    config.write_text('XDG_DESKTOP_DIR="$HOME/Second"\n')
    assert read_user_dir("XDG_DESKTOP_DIR", default, tmp_path) == tmp_path / "Second"


def test_non_utf8_value_maps_back_to_original_bytes(tmp_path: Path) -> None:
    config = user_dirs_path(tmp_path)
    config.parent.mkdir(parents=True)
    config.write_bytes(b'XDG_DOWNLOAD_DIR="$HOME/T\xe9l\xe9chargements"\n')

    resolved = read_user_dir("XDG_DOWNLOAD_DIR", tmp_path / "Downloads", tmp_path)
    assert resolved == tmp_path / "T\udce9l\udce9chargements"
    assert os.fsencode(resolved) == os.fsencode(tmp_path) + b"/T\xe9l\xe9chargements"
