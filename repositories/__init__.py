"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.meal_record_repository import MealRecordRepository

__all__ = [
    "BaseRepository",
    "MealRecordRepository",
]
