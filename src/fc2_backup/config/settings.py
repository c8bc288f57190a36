"""
Backup settings with validation and environment support.

Provides:
- Pydantic v2 schema validation
- FC2_BACKUP_* environment variables and .env files
- Archive naming and blacklist configuration

© 2026 MBP LLC. All rights reserved.
"""

import zipfile
from datetime import datetime
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError

# Rendered once to check that a format string yields a usable file name
_FORMAT_PROBE = datetime(2024, 2, 13, 13, 5, 0)


class Compression(str, Enum):
    """Compression method for hourly snapshot entries."""

    STORED = "stored"
    DEFLATED = "deflated"
    BZIP2 = "bzip2"
    LZMA = "lzma"

    @property
    def zip_constant(self) -> int:
        return {
            Compression.STORED: zipfile.ZIP_STORED,
            Compression.DEFLATED: zipfile.ZIP_DEFLATED,
            Compression.BZIP2: zipfile.ZIP_BZIP2,
            Compression.LZMA: zipfile.ZIP_LZMA,
        }[self]


class DuplicatePolicy(str, Enum):
    """What to do when the daily archive already holds the hourly entry name."""

    RENAME = "rename"
    REPLACE = "replace"
    ERROR = "error"


class BackupSettings(BaseSettings):
    """fc2-backup settings."""

    # Session
    session_directory: Optional[Path] = Field(
        default=None, description="Live FC2 sessions directory"
    )

    # Archive layout
    archive_dir_name: str = Field(default="archives", description="Archives folder inside the sessions directory")
    blacklist: List[str] = Field(
        default_factory=lambda: ["archives", "fc2t"],
        description="Directory names never archived, at any depth",
    )
    daily_format: str = Field(default="%Y-%m-%d", description="strftime format of the daily archive")
    hourly_format: str = Field(default="%H", description="strftime format of the hourly snapshot")
    archive_extension: str = Field(default=".zip")

    # Archive behaviour
    compression: Compression = Field(default=Compression.DEFLATED)
    duplicate_policy: DuplicatePolicy = Field(default=DuplicatePolicy.RENAME)
    sort_entries: bool = Field(default=True, description="Walk directories in name order")

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="FC2_BACKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("archive_dir_name")
    def validate_archive_dir_name(cls, v):
        """Archives folder must be a single path segment."""
        if not v or "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"Invalid archive directory name: {v!r}")
        return v

    @field_validator("daily_format", "hourly_format")
    def validate_format(cls, v):
        """Ensure a format string renders to a plain file name."""
        if not v:
            raise ValueError("Format string must not be empty")
        rendered = _FORMAT_PROBE.strftime(v)
        if not rendered or "/" in rendered or "\\" in rendered:
            raise ValueError(f"Format {v!r} does not render to a file name (got {rendered!r})")
        return v

    @field_validator("archive_extension")
    def validate_extension(cls, v):
        """Normalize the extension to start with a dot."""
        if not v or v == ".":
            raise ValueError("Archive extension must not be empty")
        if not v.startswith("."):
            v = f".{v}"
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Ensure log level is a standard level name."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return v

    @model_validator(mode="after")
    def blacklist_archive_dir(self):
        """The archives folder must never archive itself."""
        if self.archive_dir_name not in self.blacklist:
            self.blacklist = [*self.blacklist, self.archive_dir_name]
        return self


@lru_cache(maxsize=1)
def get_settings() -> BackupSettings:
    """Get backup settings (cached singleton)."""
    load_dotenv()
    try:
        return BackupSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid fc2-backup settings: {e}") from e
