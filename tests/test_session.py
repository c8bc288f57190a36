import pytest

from fc2_backup.config.settings import BackupSettings
from fc2_backup.core.exceptions import SessionUnavailableError
from fc2_backup.session import (
    EnvironmentSessionProvider,
    StaticSessionProvider,
    require_session_directory,
)


class TestRequireSessionDirectory:
    """Resolving the live sessions directory."""

    def test_existing_directory(self, session_dir):
        assert require_session_directory(StaticSessionProvider(session_dir)) == session_dir

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_no_session(self, value):
        with pytest.raises(SessionUnavailableError):
            require_session_directory(StaticSessionProvider(value))

    def test_not_a_directory(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")

        with pytest.raises(SessionUnavailableError) as excinfo:
            require_session_directory(StaticSessionProvider(path))

        assert str(path) in str(excinfo.value)

    def test_environment_provider(self, session_dir):
        settings = BackupSettings(_env_file=None, session_directory=session_dir)
        assert EnvironmentSessionProvider(settings).get_directory() == session_dir
