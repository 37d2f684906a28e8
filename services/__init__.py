"""Services package - Business logic layer"""

from services.record_service import RecordService

__all__ = [
    "RecordService",
]
