"""
Recursive walk of the sessions directory.

© 2026 MBP LLC. All rights reserved.
"""

import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator

from .exceptions import TreeWalkError
from .path_filter import PathFilter
from ..utils.logger import logger
from ..utils.path_utils import get_relative_path, to_archive_name


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class TreeEntry:
    """One archivable entry found under the sessions directory."""

    relative_path: Path
    kind: EntryKind
    source_path: Path

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def archive_name(self) -> str:
        return to_archive_name(self.relative_path, is_dir=self.is_dir)


def _raise_walk_error(error: OSError) -> None:
    path = Path(error.filename) if error.filename else Path()
    raise TreeWalkError(path, error.strerror or str(error)) from error


def walk_tree(source_root: Path, path_filter: PathFilter, sort_entries: bool = True) -> Iterator[TreeEntry]:
    """
    Yield every archivable entry under source_root.

    Each directory entry is yielded before anything inside it. Blacklisted
    directories are not descended into. Directory symlinks are reported as
    directories but not followed. FIFOs and sockets are skipped; a dangling
    or unreadable file aborts the walk.

    Args:
        source_root: Sessions directory
        path_filter: Filter deciding which entries are skipped
        sort_entries: Visit names in sorted order instead of enumeration order

    Yields:
        TreeEntry for each included directory and file

    Raises:
        TreeWalkError: If a directory cannot be listed or a file cannot be stat()ed
    """
    source_root = Path(source_root)

    for dirpath, dirnames, filenames in os.walk(source_root, onerror=_raise_walk_error):
        current = Path(dirpath)
        relative_dir = get_relative_path(current, source_root)

        if sort_entries:
            dirnames.sort()
            filenames.sort()

        kept = []
        for name in dirnames:
            relative = relative_dir / name
            if not path_filter.should_descend(relative):
                logger.debug(f"Skipping directory: {relative}")
                continue
            kept.append(name)
            yield TreeEntry(relative, EntryKind.DIRECTORY, current / name)

        # Prune in place so os.walk never enters excluded directories
        dirnames[:] = kept

        for name in filenames:
            relative = relative_dir / name
            if path_filter.is_excluded(relative, is_dir=False):
                logger.debug(f"Skipping file: {relative}")
                continue

            source = current / name
            try:
                mode = source.stat().st_mode
            except OSError as e:
                raise TreeWalkError(source, e.strerror or str(e)) from e

            if not stat.S_ISREG(mode):
                logger.warning(f"Skipping special file: {source}")
                continue

            yield TreeEntry(relative, EntryKind.FILE, source)
