from typing import Any, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from domain.enums import MealType, SortOrder
from domain.schemas.record_schemas import (
    MealRecordCreate,
    MealRecordResponse,
    RecordListParams,
    DailySummaryResponse,
)
from repositories import MealRecordRepository
from core.utils.helpers import to_date, to_iso_date, to_int, clamp
from app.exceptions import StoreError, ValidationError

logger = logging.getLogger("elainediet.records")

DEFAULT_LIMIT = 100
MAX_LIMIT = 500


def _store_failure(db: Session, message: str, exc: SQLAlchemyError) -> StoreError:
    """Roll back the session and wrap a driver failure"""
    db.rollback()
    detail = str(getattr(exc, "orig", None) or exc)
    return StoreError(message, detail=detail)


class RecordService:
    @staticmethod
    def create_record(db: Session, payload: MealRecordCreate) -> MealRecordResponse:
        """
        Validate and persist one meal record.

        Args:
            db: Database session
            payload: Request body; portion counts are already coerced to ints

        Returns:
            MealRecordResponse with the stored row, including id and created_at

        Raises:
            ValidationError: If date or meal is missing
            InvalidDate: If date cannot be normalized
            StoreError: If the insert fails
        """
        if not payload.date or not payload.meal:
            logger.warning("create_record rejected: date and meal are required")
            raise ValidationError("date and meal are required")

        record_date = to_date(payload.date)
        meal = str(payload.meal)
        if not MealType.is_known(meal):
            logger.debug(f"create_record: unrecognized meal label {meal!r}")

        repo = MealRecordRepository(db)
        try:
            record = repo.create_record(
                record_date=record_date,
                meal=meal,
                whole_grains=payload.whole_grains,
                vegetables=payload.vegetables,
                protein_low=payload.protein_low,
                protein_med=payload.protein_med,
                protein_high=payload.protein_high,
                protein_xhigh=payload.protein_xhigh,
                junk_food=payload.junk_food,
                note=payload.note,
                image_url=payload.image_url,
            )
        except SQLAlchemyError as e:
            logger.exception(f"INSERT ERROR: {e}")
            raise _store_failure(db, "insert failed", e) from e

        logger.info(
            f"record_created id={record.id} date={record.date} meal={record.meal}"
        )
        return MealRecordResponse.model_validate(record)

    @staticmethod
    def build_list_params(
        date: Any = None,
        date_from: Any = None,
        date_to: Any = None,
        limit: Any = None,
        offset: Any = None,
        order: Any = None,
    ) -> RecordListParams:
        """
        Normalize raw listing query values.

        limit falls back to 100 when it coerces to 0 and is clamped to [0, 500];
        offset is clamped to >= 0; any order other than 'asc' means descending.
        When an exact date is given the range bounds are ignored.

        Raises:
            InvalidDate: If any supplied date value cannot be normalized
        """
        params = RecordListParams(
            limit=clamp(to_int(limit) or DEFAULT_LIMIT, 0, MAX_LIMIT),
            offset=clamp(to_int(offset), 0),
            descending=SortOrder.parse(order) is SortOrder.DESC,
        )
        if date:
            params.on_date = to_date(date)
        else:
            if date_from:
                params.date_from = to_date(date_from)
            if date_to:
                params.date_to = to_date(date_to)
        return params

    @staticmethod
    def list_records(db: Session, params: RecordListParams) -> List[MealRecordResponse]:
        """
        List meal records matching params.

        Raises:
            StoreError: If the query fails
        """
        logger.debug(f"list_records params={params.model_dump()}")
        try:
            records = MealRecordRepository(db).list_records(params)
        except SQLAlchemyError as e:
            logger.exception(f"LIST ERROR: {e}")
            raise _store_failure(db, "list failed", e) from e

        return [MealRecordResponse.model_validate(r) for r in records]

    @staticmethod
    def summarize_day(db: Session, date: Optional[Any]) -> DailySummaryResponse:
        """
        Sum whole grains, vegetables, all protein tiers and junk food for one date.

        Dates without records yield zeros.

        Raises:
            ValidationError: If date is missing
            InvalidDate: If date cannot be normalized
            StoreError: If the aggregate query fails
        """
        if not date:
            logger.warning("summarize_day rejected: date is required")
            raise ValidationError("date is required")

        iso_date = to_iso_date(date)
        try:
            totals = MealRecordRepository(db).get_daily_totals(to_date(iso_date))
        except SQLAlchemyError as e:
            logger.exception(f"SUMMARY ERROR: {e}")
            raise _store_failure(db, "summary failed", e) from e

        logger.debug(f"summarize_day date={iso_date} totals={totals}")
        return DailySummaryResponse(date=iso_date, **totals)
