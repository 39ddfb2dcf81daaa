"""Pytest fixtures for shortcwd tests."""

import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from shortcwd.config import get_settings
from shortcwd.models.home import HomeRecord

SETTINGS_ENV_VARS = [
    "SHORTCWD_MIN_HOME_DIR_UID",
    "SHORTCWD_MAX_HOME_DIR_UID",
    "SHORTCWD_PASSWD_FILE",
    "SHORTCWD_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and any SHORTCWD_* variables from the real environment."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory, canonicalized so prefixes compare cleanly."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def make_dirs(temp_dir: Path) -> Callable[..., Path]:
    """Create directories relative to the temp dir and return the temp dir."""

    def _make(*relative: str) -> Path:
        for rel in relative:
            (temp_dir / rel).mkdir(parents=True, exist_ok=True)
        return temp_dir

    return _make


@pytest.fixture
def home_records(temp_dir: Path) -> list[HomeRecord]:
    """User database fixture with homes under the temp dir."""
    for name in ("root", "alice", "shared"):
        (temp_dir / name).mkdir()
    return [
        HomeRecord(username="root", uid=0, home_dir=str(temp_dir / "root")),
        HomeRecord(username="daemon", uid=1, home_dir=str(temp_dir / "nonexistent")),
        HomeRecord(username="alice", uid=1000, home_dir=str(temp_dir / "alice")),
        HomeRecord(username="zed", uid=1001, home_dir=str(temp_dir / "shared")),
        HomeRecord(username="amy", uid=1002, home_dir=str(temp_dir / "shared")),
    ]
