from __future__ import annotations

import pytest

from dirkit_core import config, dirs


@pytest.fixture(autouse=True)
def isolated_caches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(dirs, "_shared", {})
    monkeypatch.setattr(config, "_file_cache", {})
