"""
Hourly snapshot construction.

© 2026 MBP LLC. All rights reserved.
"""

import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .exceptions import ArchiveError
from .tree_walker import TreeEntry
from ..utils.logger import logger


@dataclass
class SnapshotStats:
    """Counts gathered while building one snapshot."""

    directories: int = 0
    files: int = 0
    total_bytes: int = 0

    @property
    def entries(self) -> int:
        return self.directories + self.files


class SnapshotBuilder:
    """Builds the hourly snapshot archive from walked entries."""

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED):
        """
        Initialize snapshot builder.

        Args:
            compression: zipfile compression constant for file entries
        """
        self.compression = compression

    def build(self, path: Path, entries: Iterable[TreeEntry]) -> SnapshotStats:
        """
        Build a fresh snapshot archive.

        Any existing archive at path is truncated. Entries are written in the
        order given, without sorting or deduplication, and file contents are
        streamed from disk.

        Args:
            path: Snapshot archive to create
            entries: Entries to mirror into the archive

        Returns:
            SnapshotStats for the written archive

        Raises:
            ArchiveError: If the archive cannot be created, written or closed
        """
        path = Path(path)
        stats = SnapshotStats()

        logger.info(f"Building snapshot: {path}")

        try:
            with zipfile.ZipFile(path, "w", compression=self.compression) as zf:
                for entry in entries:
                    self._add_entry(zf, path, entry, stats)
        except (OSError, zipfile.LargeZipFile) as e:
            raise ArchiveError(path, str(e)) from e

        logger.info(
            f"Snapshot written: {path} "
            f"({stats.directories} directories, {stats.files} files, {stats.total_bytes} bytes)"
        )
        return stats

    def _add_entry(self, zf: zipfile.ZipFile, path: Path, entry: TreeEntry, stats: SnapshotStats) -> None:
        """Add one directory or file entry."""
        try:
            # ZipFile.write emits a "name/" entry for directories
            zf.write(entry.source_path, arcname=entry.archive_name)
        except (OSError, ValueError, zipfile.LargeZipFile) as e:
            kind = "directory" if entry.is_dir else "file"
            logger.debug(f"Failed to add {kind} {entry.source_path}")
            raise ArchiveError(path, str(e), entry=str(entry.source_path)) from e

        if entry.is_dir:
            stats.directories += 1
        else:
            stats.files += 1
            stats.total_bytes += zf.infolist()[-1].file_size
