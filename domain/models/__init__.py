"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    create_db_engine,
    create_session_factory,
    init_database,
)
from domain.models.meal_record import MealRecord, NUMERIC_FIELDS

__all__ = [
    # Database
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_database",
    # Meal record
    "MealRecord",
    "NUMERIC_FIELDS",
]
