import logging
import os
from pathlib import Path, PurePosixPath, PureWindowsPath

import pytest

from fc2_backup.config.settings import BackupSettings
from fc2_backup.core.exceptions import ConfigurationError
from fc2_backup.utils.logger import configure_from_settings, setup_logger
from fc2_backup.utils.path_utils import (
    get_relative_path,
    resolve_entry_collision,
    split_path_components,
    to_archive_name,
)


class TestPathUtils:
    """Path helper functions."""

    def test_get_relative_path(self, tmp_path):
        assert get_relative_path(tmp_path / "a" / "b", tmp_path) == Path("a/b")
        assert get_relative_path(Path("/elsewhere"), tmp_path) is None

    def test_split_path_components(self):
        assert split_path_components(PurePosixPath("a/b/c.lua")) == ["a", "b", "c.lua"]

    def test_to_archive_name(self):
        assert to_archive_name(PurePosixPath("a/b.lua")) == "a/b.lua"
        assert to_archive_name(PurePosixPath("a/b"), is_dir=True) == "a/b/"

    def test_to_archive_name_windows_separators(self):
        assert to_archive_name(PureWindowsPath("constellation4\\scripts"), is_dir=True) == "constellation4/scripts/"

    @pytest.mark.skipif(os.name == "nt", reason="POSIX file name bytes")
    def test_to_archive_name_undecodable_bytes(self):
        name = os.fsdecode(b"constellation4/caf\xe9.lua")

        assert to_archive_name(PurePosixPath(name)) == "constellation4/caf\\xe9.lua"

    def test_resolve_entry_collision(self):
        assert resolve_entry_collision("13.zip", []) == "13.zip"
        assert resolve_entry_collision("13.zip", ["13.zip"]) == "13 (1).zip"
        assert resolve_entry_collision("13.zip", ["13.zip", "13 (1).zip"]) == "13 (2).zip"

    def test_resolve_entry_collision_exhausted(self):
        with pytest.raises(ValueError):
            resolve_entry_collision("13.zip", ["13.zip", "13 (1).zip"], max_attempts=1)


class TestLogger:
    """Logger configuration."""

    @pytest.fixture(autouse=True)
    def _restore_logger(self):
        yield
        setup_logger()

    def test_setup_logger_handlers(self):
        log = setup_logger(name="fc2_backup.test", level=logging.DEBUG)

        assert log.level == logging.DEBUG
        assert len(log.handlers) == 2

    def test_log_file_from_settings(self, tmp_path):
        log_file = tmp_path / "logs" / "fc2-backup.log"
        settings = BackupSettings(_env_file=None, log_file=log_file, log_level="DEBUG")

        log = configure_from_settings(settings)
        log.info("backup started")
        for handler in log.handlers:
            handler.flush()

        assert "backup started" in log_file.read_text(encoding="utf-8")
        assert "\033[" not in log_file.read_text(encoding="utf-8")

    def test_unusable_log_file_raises_configuration_error(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        settings = BackupSettings(_env_file=None, log_file=blocker / "fc2-backup.log")

        with pytest.raises(ConfigurationError):
            configure_from_settings(settings)

        assert len(setup_logger().handlers) == 2
