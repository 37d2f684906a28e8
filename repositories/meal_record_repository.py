"""
Meal Record Repository - Data access layer for meal records
"""

from typing import List, Dict
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy import func

from repositories.base import BaseRepository
from domain.models import MealRecord
from domain.schemas.record_schemas import RecordListParams


class MealRecordRepository(BaseRepository[MealRecord]):
    """Repository for meal record data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealRecord)

    def create_record(
        self,
        record_date: date,
        meal: str,
        whole_grains: int = 0,
        vegetables: int = 0,
        protein_low: int = 0,
        protein_med: int = 0,
        protein_high: int = 0,
        protein_xhigh: int = 0,
        junk_food: int = 0,
        note: str = None,
        image_url: str = None,
    ) -> MealRecord:
        """Insert a meal record; id and created_at are assigned by the database"""
        record = MealRecord(
            date=record_date,
            meal=meal,
            whole_grains=whole_grains,
            vegetables=vegetables,
            protein_low=protein_low,
            protein_med=protein_med,
            protein_high=protein_high,
            protein_xhigh=protein_xhigh,
            junk_food=junk_food,
            note=note,
            image_url=image_url,
        )
        return self.create(record)

    def list_records(self, params: RecordListParams) -> List[MealRecord]:
        """Records filtered by exact date or date range, ordered by creation time"""
        query = self.db.query(MealRecord)

        # Exact date wins over the range bounds
        if params.on_date is not None:
            query = query.filter(MealRecord.date == params.on_date)
        else:
            if params.date_from is not None:
                query = query.filter(MealRecord.date >= params.date_from)
            if params.date_to is not None:
                query = query.filter(MealRecord.date <= params.date_to)

        if params.descending:
            query = query.order_by(MealRecord.created_at.desc(), MealRecord.id.desc())
        else:
            query = query.order_by(MealRecord.created_at.asc(), MealRecord.id.asc())

        return query.limit(params.limit).offset(params.offset).all()

    def get_daily_totals(self, record_date: date) -> Dict[str, int]:
        """Sum portion counts over all records of one date (zeros when none)"""
        protein = (
            MealRecord.protein_low
            + MealRecord.protein_med
            + MealRecord.protein_high
            + MealRecord.protein_xhigh
        )
        row = (
            self.db.query(
                func.coalesce(func.sum(MealRecord.whole_grains), 0).label("whole_grains"),
                func.coalesce(func.sum(MealRecord.vegetables), 0).label("vegetables"),
                func.coalesce(func.sum(protein), 0).label("protein_total"),
                func.coalesce(func.sum(MealRecord.junk_food), 0).label("junk_food"),
            )
            .filter(MealRecord.date == record_date)
            .one()
        )

        return {
            "whole_grains": int(row.whole_grains),
            "vegetables": int(row.vegetables),
            "protein_total": int(row.protein_total),
            "junk_food": int(row.junk_food),
        }
