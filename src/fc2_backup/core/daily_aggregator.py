"""
Daily archive rotation.

Each run nests its hourly snapshot into the day's archive as one entry. The
daily archive is only ever appended to, except under the replace policy.

© 2026 MBP LLC. All rights reserved.
"""

import os
import shutil
import tempfile
import zipfile
from pathlib import Path
from typing import List

from .exceptions import ArchiveError, DuplicateEntryError
from ..config.settings import DuplicatePolicy
from ..utils.logger import logger
from ..utils.path_utils import resolve_entry_collision


class DailyAggregator:
    """Nests hourly snapshots into the daily archive."""

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.RENAME, max_renames: int = 9999):
        """
        Initialize daily aggregator.

        Args:
            duplicate_policy: How to handle an entry name already in the archive
            max_renames: Counter suffixes tried under the rename policy
        """
        self.duplicate_policy = DuplicatePolicy(duplicate_policy)
        self.max_renames = max_renames

    def list_entries(self, daily_path: Path) -> List[str]:
        """
        List entry names in a daily archive.

        Args:
            daily_path: Daily archive

        Returns:
            Entry names in archive order (empty if the archive does not exist)

        Raises:
            ArchiveError: If the file exists but is not a readable zip archive
        """
        daily_path = Path(daily_path)
        if not daily_path.exists():
            return []

        try:
            with zipfile.ZipFile(daily_path, "r") as zf:
                return zf.namelist()
        except (OSError, zipfile.BadZipFile) as e:
            raise ArchiveError(daily_path, str(e)) from e

    def aggregate(self, daily_path: Path, snapshot_path: Path, entry_name: str) -> str:
        """
        Add a snapshot to the daily archive.

        The daily archive is created if absent and never truncated.

        Args:
            daily_path: Daily archive
            snapshot_path: Hourly snapshot to nest
            entry_name: Name of the nested entry, normally the snapshot's file name

        Returns:
            Entry name actually written

        Raises:
            DuplicateEntryError: If entry_name exists and the policy is "error", or
                no free name is left under the "rename" policy
            ArchiveError: If the daily archive cannot be opened, written or closed
        """
        daily_path = Path(daily_path)
        snapshot_path = Path(snapshot_path)
        existing = self.list_entries(daily_path)

        if entry_name in existing:
            if self.duplicate_policy is DuplicatePolicy.ERROR:
                raise DuplicateEntryError(daily_path, entry_name)

            if self.duplicate_policy is DuplicatePolicy.REPLACE:
                self._replace_entry(daily_path, snapshot_path, entry_name)
                logger.info(f"Replaced {entry_name} in {daily_path}")
                return entry_name

            try:
                renamed = resolve_entry_collision(entry_name, existing, self.max_renames)
            except ValueError as e:
                raise DuplicateEntryError(daily_path, entry_name) from e
            logger.info(f"{entry_name} already in {daily_path}, storing as {renamed}")
            entry_name = renamed

        try:
            # Mode "a" creates the archive when missing and keeps existing entries
            with zipfile.ZipFile(daily_path, "a", compression=zipfile.ZIP_STORED) as zf:
                zf.write(snapshot_path, arcname=entry_name)
        except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
            raise ArchiveError(daily_path, str(e), entry=str(snapshot_path)) from e

        logger.info(f"Added {entry_name} to {daily_path} ({len(existing) + 1} entries)")
        return entry_name

    def _replace_entry(self, daily_path: Path, snapshot_path: Path, entry_name: str) -> None:
        """Rewrite the daily archive with entry_name pointing at the new snapshot."""
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{daily_path.stem}-", suffix=daily_path.suffix, dir=daily_path.parent
        )
        os.close(fd)
        tmp_path = Path(tmp_name)

        try:
            with zipfile.ZipFile(daily_path, "r") as src, \
                    zipfile.ZipFile(tmp_path, "w", compression=zipfile.ZIP_STORED) as dst:
                for info in src.infolist():
                    if info.filename == entry_name:
                        continue
                    copy = zipfile.ZipInfo(info.filename, date_time=info.date_time)
                    copy.compress_type = info.compress_type
                    copy.external_attr = info.external_attr
                    copy.comment = info.comment
                    copy.file_size = info.file_size
                    with src.open(info) as reader, dst.open(copy, "w") as writer:
                        shutil.copyfileobj(reader, writer)

                dst.write(snapshot_path, arcname=entry_name)

            os.replace(tmp_path, daily_path)
        except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
            tmp_path.unlink(missing_ok=True)
            raise ArchiveError(daily_path, str(e), entry=str(snapshot_path)) from e
