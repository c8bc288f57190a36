"""Core snapshot and rotation logic for fc2-backup."""

from .exceptions import (
    BackupError,
    ConfigurationError,
    SessionUnavailableError,
    ArchiveDirectoryError,
    TreeWalkError,
    ArchiveError,
    DuplicateEntryError,
)

__all__ = [
    "BackupError",
    "ConfigurationError",
    "SessionUnavailableError",
    "ArchiveDirectoryError",
    "TreeWalkError",
    "ArchiveError",
    "DuplicateEntryError",
]
