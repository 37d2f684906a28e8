"""Meal record routes"""

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session
import logging
from typing import List, Optional

from api.dependencies import get_db
from domain.schemas.record_schemas import (
    MealRecordCreate,
    MealRecordResponse,
    DailySummaryResponse,
)
from services import RecordService
from api.responses import CLIENT_ERROR, STORE_ERROR

router = APIRouter(tags=["Meal Records"])
logger = logging.getLogger("elainediet.api.records")


@router.post(
    "/records",
    response_model=MealRecordResponse,
    responses={**CLIENT_ERROR, **STORE_ERROR},
)
def create_record(
    payload: Optional[MealRecordCreate] = Body(None),
    db: Session = Depends(get_db),
):
    """
    Log one meal.

    Example body:
        {"date": "2025/10/25", "meal": "Lunch", "vegetables": 3, "note": "salad"}

    Portion counts that are missing or non-numeric are stored as 0.
    Duplicate submissions create duplicate rows.

    Raises:
        400: date or meal missing, or date not a valid calendar date
        500: store failure
    """
    if payload is None:
        # An empty body is reported like {} (missing date and meal)
        payload = MealRecordCreate()
    return RecordService.create_record(db, payload)


@router.get(
    "/records",
    response_model=List[MealRecordResponse],
    responses={**CLIENT_ERROR, **STORE_ERROR},
)
def list_records(
    date: Optional[str] = Query(None, description="Exact date; range is ignored when set"),
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive lower bound"),
    date_to: Optional[str] = Query(None, alias="to", description="Inclusive upper bound"),
    limit: Optional[str] = Query(None, description="Max rows, default 100, clamped to [0, 500]"),
    offset: Optional[str] = Query(None, description="Rows to skip, default 0"),
    order: Optional[str] = Query(None, description="'asc' or 'desc' on creation time"),
    db: Session = Depends(get_db),
):
    """
    List meal records.

    Usage:
        GET /records?date=2025-10-25
        GET /records?from=2025-10-01&to=2025-10-31
        GET /records?limit=50&offset=0&order=desc
    """
    params = RecordService.build_list_params(
        date=date,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
        offset=offset,
        order=order,
    )
    return RecordService.list_records(db, params)


@router.get(
    "/summary",
    response_model=DailySummaryResponse,
    responses={**CLIENT_ERROR, **STORE_ERROR},
)
def get_summary(
    date: Optional[str] = Query(None, description="'YYYY-MM-DD' or 'YYYY/MM/DD'"),
    db: Session = Depends(get_db),
):
    """
    Daily totals for one date.

    Returns whole_grains, vegetables, protein_total (all four protein tiers)
    and junk_food sums; all zero when nothing was logged that day.
    """
    summary = RecordService.summarize_day(db, date)
    logger.info(f"Summary served for {summary.date}")
    return summary
