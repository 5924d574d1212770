from __future__ import annotations

from settings import get_settings


def test_defaults(monkeypatch):
    for name in ("FILEDB_PATH", "FILEDB_LOG_LEVEL", "FILEDB_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.db_path == "test.data"
    assert s.log_level == "INFO"
    assert s.debug is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FILEDB_PATH", "/tmp/other.data")
    monkeypatch.setenv("FILEDB_LOG_LEVEL", "warning")
    monkeypatch.delenv("FILEDB_DEBUG", raising=False)
    s = get_settings()
    assert s.db_path == "/tmp/other.data"
    assert s.log_level == "WARNING"


def test_debug_forces_debug_level(monkeypatch):
    monkeypatch.setenv("FILEDB_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("FILEDB_DEBUG", "yes")
    s = get_settings()
    assert s.debug is True
    assert s.log_level == "DEBUG"
