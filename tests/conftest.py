from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# `app` and `settings` are top-level modules next to the `filedb` package.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path of a DB file that does not exist yet."""
    return tmp_path / "test.data"


@pytest.fixture
def write_db_file(tmp_path: Path):
    """Write raw content to a DB file and return its path."""

    def _write(content: str, name: str = "test.data") -> Path:
        p = tmp_path / name
        p.write_bytes(content.encode("utf-8"))
        return p

    return _write
