"""
Meal record model - one row per logged meal entry.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    TIMESTAMP,
    Date,
    Index,
)
from sqlalchemy.sql import func

from domain.models.database import Base


NUMERIC_FIELDS = (
    "whole_grains",
    "vegetables",
    "protein_low",
    "protein_med",
    "protein_high",
    "protein_xhigh",
    "junk_food",
)


class MealRecord(Base):
    """Meal composition entry (food group portions for one meal on one date)"""

    __tablename__ = "meal_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(
        TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    )
    date = Column(Date, nullable=False)
    meal = Column(Text, nullable=False)
    whole_grains = Column(Integer, nullable=False, default=0, server_default="0")
    vegetables = Column(Integer, nullable=False, default=0, server_default="0")
    protein_low = Column(Integer, nullable=False, default=0, server_default="0")
    protein_med = Column(Integer, nullable=False, default=0, server_default="0")
    protein_high = Column(Integer, nullable=False, default=0, server_default="0")
    protein_xhigh = Column(Integer, nullable=False, default=0, server_default="0")
    junk_food = Column(Integer, nullable=False, default=0, server_default="0")
    note = Column(Text)
    image_url = Column(Text)

    __table_args__ = (
        Index("ix_meal_records_date", "date"),
        Index("ix_meal_records_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<MealRecord id={self.id} date={self.date} meal={self.meal!r}>"
