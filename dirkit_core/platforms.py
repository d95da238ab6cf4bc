"""Classify the host operating system into one of the supported platforms."""

from __future__ import annotations

import logging
import os
import platform
import sys
from enum import Enum
from typing import Mapping

from .config import load_settings
from .env import LazyValue

__all__ = ["Platform", "current_platform", "detect_platform", "host_os_name"]

logger = logging.getLogger(__name__)


class Platform(Enum):
    WINDOWS = "windows"
    MACOS = "macos"
    UNIX = "unix"
    DEFAULT = "default"

    @property
    def is_concrete(self) -> bool:
        return self is not Platform.DEFAULT

    def resolve(self) -> "Platform":
        """Return the concrete platform, detecting the host for `DEFAULT`."""
        return current_platform() if self is Platform.DEFAULT else self


def detect_platform(os_name: str) -> Platform:
    """Map an OS name such as ``"Windows 10"`` or ``"Mac OS X"`` to a platform.

    Anything that is not recognised is assumed to be some *nix system.
    """
    name = os_name.lower()
    if name.startswith("windows"):
        return Platform.WINDOWS
    if name.startswith("mac os x"):
        return Platform.MACOS
    return Platform.UNIX


def host_os_name(env: Mapping[str, str] | None = None) -> str:
    """Return the host OS name in its long form, honouring ``DIRKIT_OS_NAME``."""
    env = os.environ if env is None else env
    settings = load_settings(env)
    if settings.os_name:
        return settings.os_name
    if sys.platform.startswith("win"):
        return f"Windows {platform.release()}".strip()
    if sys.platform == "darwin":
        return "Mac OS X"
    return platform.system() or sys.platform


def _detect_host_platform() -> Platform:
    os_name = host_os_name()
    detected = detect_platform(os_name)
    logger.debug("detected platform %s from os name %r", detected.value, os_name)
    return detected


_current = LazyValue(_detect_host_platform)


def current_platform() -> Platform:
    """Return the host platform, detected once per process."""
    return _current.get()
