"""
Blacklist and top-level rules deciding which session entries are archived.

© 2026 MBP LLC. All rights reserved.
"""

from pathlib import PurePath
from typing import Collection, Iterable

from ..utils.path_utils import split_path_components


def is_blacklisted(relative_path: PurePath, blacklist: Collection[str]) -> bool:
    """
    Check whether any segment of a path is blacklisted.

    The whole path is scanned, not only the name, so descendants of a
    blacklisted directory are caught as well.

    Args:
        relative_path: Path relative to the sessions directory
        blacklist: Blacklisted directory names

    Returns:
        True if any segment matches
    """
    p = PurePath(relative_path)
    while p.name:
        if p.name in blacklist:
            return True
        p = p.parent
    return False


def is_top_level(relative_path: PurePath) -> bool:
    """True for direct children of the sessions directory."""
    return len(split_path_components(PurePath(relative_path))) == 1


def is_excluded(relative_path: PurePath, is_dir: bool, blacklist: Collection[str]) -> bool:
    """
    Decide whether an entry is left out of the hourly snapshot.

    Args:
        relative_path: Path relative to the sessions directory
        is_dir: Whether the entry is a directory
        blacklist: Blacklisted directory names

    Returns:
        True for blacklisted paths and for loose files in the sessions directory
    """
    if is_blacklisted(relative_path, blacklist):
        return True

    # Only sub-directories of the sessions directory are archived
    if is_top_level(relative_path) and not is_dir:
        return True

    return False


class PathFilter:
    """Filter bound to one blacklist."""

    def __init__(self, blacklist: Iterable[str]):
        self.blacklist = frozenset(blacklist)

    def is_excluded(self, relative_path: PurePath, is_dir: bool) -> bool:
        return is_excluded(relative_path, is_dir, self.blacklist)

    def should_descend(self, relative_path: PurePath) -> bool:
        """Whether the walker needs to look inside a directory at all."""
        return not is_blacklisted(relative_path, self.blacklist)

    def __repr__(self) -> str:
        return f"PathFilter(blacklist={sorted(self.blacklist)!r})"
