"""Service health check route"""

from fastapi import APIRouter

from app.config import settings
from core.utils.helpers import utcnow

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    """Basic health check endpoint"""
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "timestamp": utcnow().isoformat(),
    }
