"""
App package - Application configuration and error types.
"""

from app.config import settings
from app.exceptions import (
    ServiceError,
    ValidationError,
    InvalidDate,
    StoreError,
)

__all__ = [
    "settings",
    "ServiceError",
    "ValidationError",
    "InvalidDate",
    "StoreError",
]
