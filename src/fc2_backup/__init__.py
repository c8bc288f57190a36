"""
fc2-backup: hourly and daily zip snapshots of the FC2 sessions folder.

© 2026 MBP LLC. All rights reserved.
"""

__version__ = "1.0.0"
