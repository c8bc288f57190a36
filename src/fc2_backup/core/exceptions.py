"""Custom exception classes for fc2-backup.

Every failure is fatal to the current run; the orchestrator turns these into
an exit status.
"""

from pathlib import Path
from typing import Optional


class BackupError(Exception):
    """Base exception for all backup errors."""

    pass


class ConfigurationError(BackupError):
    """Raised when backup settings are invalid."""

    pass


class SessionUnavailableError(BackupError):
    """Raised when no live session directory is available."""

    def __init__(self, message: str = "fantasy.universe4 is not open"):
        super().__init__(message)


class ArchiveDirectoryError(BackupError):
    """Raised when the archives directory cannot be created."""

    def __init__(self, path: Path, detail: str = ""):
        self.path = path
        self.detail = detail
        message = f"failed to create directory {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class TreeWalkError(BackupError):
    """Raised when an entry of the session tree cannot be read."""

    def __init__(self, path: Path, detail: str = ""):
        self.path = path
        self.detail = detail
        message = f"failed to read \"{path}\""
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ArchiveError(BackupError):
    """Raised when a zip archive cannot be opened, written or closed."""

    def __init__(self, archive: Path, detail: str = "", entry: Optional[str] = None):
        self.archive = archive
        self.entry = entry
        self.detail = detail
        if entry is not None:
            message = f"failed to add \"{entry}\" into zip {archive}"
        else:
            message = f"failed to write zip file {archive}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DuplicateEntryError(ArchiveError):
    """Raised when the daily archive already holds an entry of the same name."""

    def __init__(self, archive: Path, entry: str):
        super().__init__(archive, detail="entry already exists", entry=entry)
