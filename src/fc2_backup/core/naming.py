"""
Archive naming for fc2-backup.

Derives every path a run touches from the sessions directory and one clock
reading, so later stages share a single immutable view of them.

© 2026 MBP LLC. All rights reserved.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..config.settings import BackupSettings


@dataclass(frozen=True)
class ArchivePaths:
    """Paths resolved for one backup run."""

    source_root: Path
    archive_root: Path
    daily_archive: Path
    hourly_snapshot: Path
    hourly_entry_name: str
    timestamp: datetime

    def describe(self) -> str:
        return (
            f"sessions directory: {self.source_root}\n"
            f"archives directory: {self.archive_root}\n"
            f"today's {self.daily_archive.suffix}: {self.daily_archive}\n"
            f"now's {self.hourly_snapshot.suffix}: {self.hourly_snapshot}"
        )


def daily_archive_name(now: datetime, settings: BackupSettings) -> str:
    """Name of the daily archive for the given time, e.g. "2024-02-13.zip"."""
    return f"{now.strftime(settings.daily_format)}{settings.archive_extension}"


def hourly_archive_name(now: datetime, settings: BackupSettings) -> str:
    """Name of the hourly snapshot for the given time, e.g. "13.zip"."""
    return f"{now.strftime(settings.hourly_format)}{settings.archive_extension}"


def resolve_paths(source_root: Path, now: datetime, settings: BackupSettings) -> ArchivePaths:
    """
    Resolve archive paths for a run.

    Args:
        source_root: Live sessions directory
        now: Local time of the run
        settings: Backup settings

    Returns:
        ArchivePaths for this run
    """
    source_root = Path(source_root).absolute()
    archive_root = source_root / settings.archive_dir_name
    hourly_name = hourly_archive_name(now, settings)

    return ArchivePaths(
        source_root=source_root,
        archive_root=archive_root,
        daily_archive=archive_root / daily_archive_name(now, settings),
        hourly_snapshot=archive_root / hourly_name,
        hourly_entry_name=hourly_name,
        timestamp=now,
    )
