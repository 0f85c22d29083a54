"""
Create the assessment tables on the configured database.

Usage (from backend/ with DATABASE_URL set):
  python -m navigator.scripts.init_db
"""
from __future__ import annotations

import sys

from navigator.main import bootstrap
from navigator.platform.database import Base


def main() -> int:
    logger = bootstrap(create_tables=True)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
