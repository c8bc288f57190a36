"""Entry point for ``python -m fc2_backup`` and the fc2-backup script."""

import sys

from .core.backup_runner import main


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
