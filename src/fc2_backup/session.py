"""
Locating the live FC2 sessions directory.

© 2026 MBP LLC. All rights reserved.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from .config.settings import BackupSettings
from .core.exceptions import SessionUnavailableError


class SessionProvider(ABC):
    """Source of the live sessions directory."""

    @abstractmethod
    def get_directory(self) -> Optional[Path]:
        """Return the sessions directory, or None when no session is open."""
        pass


class StaticSessionProvider(SessionProvider):
    """Provider returning a fixed directory."""

    def __init__(self, directory: Optional[Path]):
        self.directory = directory

    def get_directory(self) -> Optional[Path]:
        return self.directory


class EnvironmentSessionProvider(SessionProvider):
    """Provider reading FC2_BACKUP_SESSION_DIRECTORY through the settings."""

    def __init__(self, settings: BackupSettings):
        self.settings = settings

    def get_directory(self) -> Optional[Path]:
        return self.settings.session_directory


def require_session_directory(provider: SessionProvider) -> Path:
    """
    Get the sessions directory or fail.

    Args:
        provider: Session provider

    Returns:
        Absolute sessions directory

    Raises:
        SessionUnavailableError: If no directory is available or it does not exist
    """
    directory = provider.get_directory()
    if directory is None or not str(directory).strip():
        raise SessionUnavailableError()

    directory = Path(directory).expanduser().absolute()
    if not directory.is_dir():
        raise SessionUnavailableError(f"sessions directory not found: {directory}")

    return directory
