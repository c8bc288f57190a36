"""
Shared fixtures for the fc2-backup test suite.

Provides:
- Backup settings isolated from the environment and .env files
- A sessions directory laid out like a live FC2 install
"""

import zipfile
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Set

import pytest

from fc2_backup.config.settings import BackupSettings


@pytest.fixture(scope="function")
def settings() -> BackupSettings:
    """Default settings, ignoring any .env file."""
    return BackupSettings(_env_file=None)


@pytest.fixture(scope="function")
def session_dir(tmp_path: Path) -> Path:
    """
    Sessions directory with:

        archives/                       (pre-existing, empty)
        fc2t/stuff.txt
        loose.txt
        constellation4/scripts/a.lua
        constellation4/logs/b.log
    """
    root = tmp_path / "sessions"
    (root / "archives").mkdir(parents=True)
    (root / "fc2t").mkdir()
    (root / "fc2t" / "stuff.txt").write_text("fc2t project")
    (root / "loose.txt").write_text("top level file")
    (root / "constellation4" / "scripts").mkdir(parents=True)
    (root / "constellation4" / "scripts" / "a.lua").write_text("print('hello')")
    (root / "constellation4" / "logs").mkdir()
    (root / "constellation4" / "logs" / "b.log").write_text("log line\n")
    return root


@pytest.fixture(scope="function")
def first_run_time() -> datetime:
    return datetime(2024, 2, 13, 13, 0, 0)


@pytest.fixture
def zip_names() -> Callable[[Path], List[str]]:
    """Read the entry names of a zip archive."""

    def _names(path: Path) -> List[str]:
        with zipfile.ZipFile(path, "r") as zf:
            return zf.namelist()

    return _names


@pytest.fixture
def scenario_entries() -> Set[str]:
    """Entries expected in the hourly snapshot of session_dir."""
    return {
        "constellation4/",
        "constellation4/scripts/",
        "constellation4/scripts/a.lua",
        "constellation4/logs/",
        "constellation4/logs/b.log",
    }
