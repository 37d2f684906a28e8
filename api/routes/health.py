"""Health check routes"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.config import settings
from api.responses import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse)
def root():
    """Liveness check; no dependencies are touched"""
    return f"{settings.app_name} API running"


@router.get("/health-check", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint"""
    return {"status": "ok", "service": settings.app_name}
