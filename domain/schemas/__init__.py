"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.record_schemas import (
    MealRecordCreate,
    MealRecordResponse,
    RecordListParams,
    DailySummaryResponse,
)

__all__ = [
    "MealRecordCreate",
    "MealRecordResponse",
    "RecordListParams",
    "DailySummaryResponse",
]
