"""
Path helpers for mapping the session tree onto zip entry names.

© 2026 MBP LLC. All rights reserved.
"""

import os
from pathlib import Path, PurePath, PurePosixPath
from typing import Collection, Optional


def get_relative_path(path: Path, base: Path) -> Optional[Path]:
    """
    Get relative path from base to path.

    Args:
        path: Target path
        base: Base path

    Returns:
        Relative path or None if not relative
    """
    try:
        return path.relative_to(base)
    except ValueError:
        return None


def split_path_components(path: PurePath) -> list[str]:
    """
    Split path into individual components.

    Args:
        path: Input path

    Returns:
        List of path components
    """
    return list(path.parts)


def to_archive_name(relative_path: PurePath, is_dir: bool = False) -> str:
    """
    Convert a relative filesystem path into a zip entry name.

    Zip entry names always use forward slashes; directory entries end with one.
    Names that are not valid UTF-8 on disk keep their undecodable bytes as
    backslash escapes (e.g. "caf\\xe9.lua") so zipfile can encode them.

    Args:
        relative_path: Path relative to the session directory
        is_dir: Whether the entry is a directory

    Returns:
        Entry name suitable for ZipFile
    """
    name = PurePosixPath(*relative_path.parts).as_posix()
    name = os.fsencode(name).decode("utf-8", "backslashreplace")
    if is_dir and not name.endswith('/'):
        name += '/'
    return name


def resolve_entry_collision(name: str, existing: Collection[str], max_attempts: int = 9999) -> str:
    """
    Resolve entry name collisions by appending a counter.

    Args:
        name: Desired entry name (e.g. "13.zip")
        existing: Names already present in the archive
        max_attempts: Maximum number of attempts

    Returns:
        A name not present in existing, e.g. "13 (1).zip"

    Raises:
        ValueError: If no free name was found within max_attempts
    """
    if name not in existing:
        return name

    candidate = PurePosixPath(name)
    stem = candidate.stem
    suffix = candidate.suffix

    for i in range(1, max_attempts + 1):
        new_name = f"{stem} ({i}){suffix}"
        if new_name not in existing:
            return new_name

    raise ValueError(f"No free entry name for {name} after {max_attempts} attempts")
