"""
Response models for documentation of error and health payloads.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error payload returned by every failure path"""

    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
    detail: Optional[Any] = Field(None, description="Additional error context")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")


CLIENT_ERROR = {400: {"model": ErrorResponse, "description": "Missing or invalid input"}}
STORE_ERROR = {500: {"model": ErrorResponse, "description": "Store failure"}}
