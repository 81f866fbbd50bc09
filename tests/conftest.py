from __future__ import annotations

import os

import pytest

from simplejwt import FixedClock, Tokens
from simplejwt.config import Settings, get_settings

NOW = 1_700_000_000
SECRET = "123abcDEF!$£%456"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep the developer's .env and SIMPLEJWT_* variables out of the tests."""

    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("SIMPLEJWT_") or key.upper() in {"JWT_SECRET", "JWT_SECRET_KEY"}:
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def secret() -> str:
    return SECRET


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def tokens(settings: Settings, clock: FixedClock) -> Tokens:
    return Tokens(settings=settings, clock=clock)


@pytest.fixture
def now() -> int:
    return NOW
