"""Environment variable access and initialize-once values."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Callable, Generic, Mapping, TypeVar

from .config import load_settings
from .errors import MissingEnvironmentVariableError

__all__ = [
    "LazyEnv",
    "LazyValue",
    "get_env",
    "get_env_or_none",
    "home_dir",
]

T = TypeVar("T")

_UNSET = object()

_HOME_VARS = ("HOME", "USERPROFILE")

logger = logging.getLogger(__name__)


def get_env_or_none(name: str, env: Mapping[str, str] | None = None) -> str | None:
    env = os.environ if env is None else env
    return env.get(name)


def get_env(name: str, env: Mapping[str, str] | None = None) -> str:
    """Return the variable `name`, raising if it is not set at all."""
    value = get_env_or_none(name, env)
    if value is None:
        raise MissingEnvironmentVariableError(name)
    return value


def home_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the current user's home directory as seen through `env`.

    Candidates are the ``home`` setting, ``HOME`` and ``USERPROFILE``, in that
    order. Values that are not absolute after ``~`` expansion are skipped so
    that resolved directories never depend on the working directory.
    """
    env = os.environ if env is None else env
    settings = load_settings(env)
    candidates = [settings.home] + [env.get(name) for name in _HOME_VARS]
    for value in candidates:
        if not value:
            continue
        candidate = Path(value).expanduser()
        if candidate.is_absolute():
            return candidate
        logger.debug("ignoring relative home directory %s", candidate)
    return Path.home()


class LazyValue(Generic[T]):
    """Compute a value on first access and share it afterwards.

    Exceptions raised by the factory are propagated and nothing is stored,
    so a later access tries again.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._value: object = _UNSET
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        value = self._value
        if value is not _UNSET:
            return value  # type: ignore[return-value]
        with self._lock:
            if self._value is _UNSET:
                self._value = self._factory()
            return self._value  # type: ignore[return-value]


class LazyEnv(LazyValue[str]):
    """An environment variable read through `get_env` on first access."""

    def __init__(self, name: str, env: Mapping[str, str] | None = None) -> None:
        super().__init__(lambda: get_env(name, env))
        self.name = name
