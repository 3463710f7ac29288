#!/usr/bin/env python3
"""
Standalone database initialization script
Creates every inPEP table on the database named by DATABASE_URL
"""

import sys
import os
import logging

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings  # noqa: E402
from domain.models import init_database  # noqa: E402

logger = logging.getLogger("inpep.scripts.init_db")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    try:
        init_database()
    except Exception as exc:
        logger.error(f"Database initialization failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("inPEP Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("\nSUCCESS! Tables are ready to use.\n")
    else:
        print("\nFAILED! Check the errors above.\n")

    sys.exit(exit_code)
