"""
Backup run orchestration for fc2-backup.

A run resolves its paths, makes sure the archives folder exists, builds the
hourly snapshot and nests it into the daily archive:

    2024-02-13.zip
        -> 13.zip (1 PM)
        -> 14.zip (2 PM)
            -> constellation4
                -> scripts
                -> logs

The first failing stage aborts the run. Completed stages are not rolled back.

© 2026 MBP LLC. All rights reserved.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .daily_aggregator import DailyAggregator
from .exceptions import ArchiveDirectoryError, BackupError
from .naming import ArchivePaths, resolve_paths
from .path_filter import PathFilter
from .snapshot_builder import SnapshotBuilder, SnapshotStats
from .tree_walker import walk_tree
from ..config.settings import BackupSettings, get_settings
from ..session import EnvironmentSessionProvider, SessionProvider, require_session_directory
from ..utils.logger import configure_from_settings, logger


@dataclass(frozen=True)
class RunReport:
    """Outcome of a successful run."""

    paths: ArchivePaths
    snapshot: SnapshotStats
    daily_entry: str
    archive_root_created: bool


class BackupRunner:
    """Runs one hourly snapshot and daily rotation."""

    def __init__(
        self,
        source_root: Path,
        settings: Optional[BackupSettings] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        """
        Initialize backup runner.

        Args:
            source_root: Live sessions directory
            settings: Backup settings (defaults to get_settings())
            clock: Returns the local time of the run
        """
        self.source_root = Path(source_root)
        self.settings = settings or get_settings()
        self.clock = clock

        self.path_filter = PathFilter(self.settings.blacklist)
        self.snapshot_builder = SnapshotBuilder(self.settings.compression.zip_constant)
        self.daily_aggregator = DailyAggregator(self.settings.duplicate_policy)

    def run(self, now: Optional[datetime] = None) -> RunReport:
        """
        Execute a backup run.

        Args:
            now: Time of the run (read from the clock if None)

        Returns:
            RunReport describing what was written

        Raises:
            BackupError: On the first failing stage
        """
        if now is None:
            now = self.clock()

        paths = resolve_paths(self.source_root, now, self.settings)
        for line in paths.describe().splitlines():
            logger.info(line)

        created = self.ensure_archive_root(paths.archive_root)

        entries = walk_tree(paths.source_root, self.path_filter, self.settings.sort_entries)
        stats = self.snapshot_builder.build(paths.hourly_snapshot, entries)

        daily_entry = self.daily_aggregator.aggregate(
            paths.daily_archive,
            paths.hourly_snapshot,
            paths.hourly_entry_name
        )

        logger.info(f"Backup complete: {paths.daily_archive} -> {daily_entry}")
        return RunReport(
            paths=paths,
            snapshot=stats,
            daily_entry=daily_entry,
            archive_root_created=created
        )

    def ensure_archive_root(self, archive_root: Path) -> bool:
        """
        Create the archives directory if missing.

        Returns:
            True if the directory was created by this call

        Raises:
            ArchiveDirectoryError: If it cannot be created
        """
        if archive_root.is_dir():
            return False

        try:
            archive_root.mkdir()
        except OSError as e:
            raise ArchiveDirectoryError(archive_root, str(e)) from e

        logger.info("archives directory created")
        return True


def main(
    settings: Optional[BackupSettings] = None,
    provider: Optional[SessionProvider] = None,
    clock: Callable[[], datetime] = datetime.now
) -> int:
    """
    Run a backup and map the outcome to an exit status.

    Returns:
        0 on success, 1 on any failure
    """
    try:
        if settings is None:
            settings = get_settings()
        configure_from_settings(settings)

        if provider is None:
            provider = EnvironmentSessionProvider(settings)
        source_root = require_session_directory(provider)

        BackupRunner(source_root, settings, clock).run()
    except BackupError as e:
        logger.error(str(e))
        return 1

    return 0
