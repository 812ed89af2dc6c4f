"""Root pytest configuration for uriref tests."""
import pytest

from uriref.settings import Settings


@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Keep tests independent of the caller's URIREF_* environment."""
    monkeypatch.delenv("URIREF_CHARSET", raising=False)
    monkeypatch.delenv("URIREF_LOG_LEVEL", raising=False)


@pytest.fixture
def settings():
    """Standard test settings."""
    return Settings(charset="utf-8")


@pytest.fixture
def utf8():
    return "utf-8"
