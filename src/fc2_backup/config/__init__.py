"""Configuration for fc2-backup."""

from .settings import BackupSettings, Compression, DuplicatePolicy, get_settings

__all__ = ["BackupSettings", "Compression", "DuplicatePolicy", "get_settings"]
