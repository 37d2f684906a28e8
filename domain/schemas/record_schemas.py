from pydantic import BaseModel, Field, field_validator
from typing import Optional, Any
from datetime import date, datetime

from core.utils.helpers import to_int


class MealRecordCreate(BaseModel):
    """Schema for creating a new meal record.

    ``date`` and ``meal`` are optional here so that their absence is reported
    by the service as a 400 rather than a schema error. The seven portion
    counts are coerced to integers at the boundary (non-numeric -> 0).
    """

    date: Optional[Any] = Field(
        None, description="Calendar date, 'YYYY/MM/DD' or 'YYYY-MM-DD'"
    )
    meal: Optional[Any] = Field(
        None, description="Meal label (e.g. 'Breakfast', 'Lunch', 'Dinner', 'Snack')"
    )
    whole_grains: int = Field(default=0, description="Whole grain portions")
    vegetables: int = Field(default=0, description="Vegetable portions")
    protein_low: int = Field(default=0, description="Low-fat protein portions")
    protein_med: int = Field(default=0, description="Medium-fat protein portions")
    protein_high: int = Field(default=0, description="High-fat protein portions")
    protein_xhigh: int = Field(default=0, description="Very high-fat protein portions")
    junk_food: int = Field(default=0, description="Junk food portions")
    note: Optional[str] = Field(None, description="Free text note")
    image_url: Optional[str] = Field(
        None, description="URL of an externally stored meal photo"
    )

    @field_validator(
        "whole_grains",
        "vegetables",
        "protein_low",
        "protein_med",
        "protein_high",
        "protein_xhigh",
        "junk_food",
        mode="before",
    )
    @classmethod
    def coerce_portion(cls, v):
        return to_int(v)

    @field_validator("note", "image_url", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return None if v is None else str(v)


class MealRecordResponse(BaseModel):
    """Schema for a persisted meal record"""

    id: int
    created_at: datetime
    date: date
    meal: str
    whole_grains: int
    vegetables: int
    protein_low: int
    protein_med: int
    protein_high: int
    protein_xhigh: int
    junk_food: int
    note: Optional[str] = None
    image_url: Optional[str] = None

    model_config = {"from_attributes": True}


class RecordListParams(BaseModel):
    """Normalized listing parameters (dates already in canonical form)"""

    on_date: Optional[date] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    limit: int = 100
    offset: int = 0
    descending: bool = True


class DailySummaryResponse(BaseModel):
    """Per-day sums over all meal records of one date"""

    date: str = Field(..., description="Normalized date 'YYYY-MM-DD'")
    whole_grains: int = 0
    vegetables: int = 0
    protein_total: int = Field(
        0, description="protein_low + protein_med + protein_high + protein_xhigh"
    )
    junk_food: int = 0
