#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the meal_records table (if missing) in the database named by DATABASE_URL
"""

import sys
import os
import logging

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import anyio

from app.config import settings
from domain.models import create_db_engine
from main import initialize_with_retry

logger = logging.getLogger("elainediet.scripts.init_db")


def main() -> int:
    engine = create_db_engine(settings)
    try:
        anyio.run(initialize_with_retry, engine)
    except Exception as exc:
        logger.error(f"Schema creation failed: {exc}")
        return 1
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print(f"{settings.app_name} Database Initialization (Standalone)")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("SUCCESS! Table meal_records is ready.")
    else:
        print("FAILED! Check the errors above.")

    sys.exit(exit_code)
