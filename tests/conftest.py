"""Shared pytest fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest
from plan_comments.settings import BASE_URL_ENV_VAR, VERBOSE_ENV_VAR


@dataclass
class RecordingLockURLBuilder:
    """Lock URL builder that records every lock key it is called with."""

    base_url: str = "http://x/"
    calls: list[str] = field(default_factory=list)

    def __call__(self, lock_key: str) -> str:
        self.calls.append(lock_key)
        return f"{self.base_url}{lock_key}"


@pytest.fixture
def lock_url_builder() -> RecordingLockURLBuilder:
    """Provide a fresh recording lock URL builder."""
    return RecordingLockURLBuilder()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run from an empty directory with renderer env vars unset.

    Setting before deleting makes monkeypatch restore the variables even when
    a test loads them from a `.env` file.
    """
    for name in (BASE_URL_ENV_VAR, VERBOSE_ENV_VAR):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
