"""
Health check endpoint for deployment monitoring.
"""
import logging
from fastapi import APIRouter
from datetime import datetime, timezone

from app.api.routes.jobs import get_matching_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
def health_check():
    """
    Health check endpoint for deployment monitoring.
    
    Reports "degraded" if the matching criteria cannot be loaded. Does not call
    the ATS proxy.
    """
    status = "healthy"
    targets = None
    
    try:
        targets = len(get_matching_config().targets)
        criteria_status = "loaded"
    except Exception as e:
        logger.error(f"Matching criteria unavailable: {e}")
        criteria_status = "error"
        status = "degraded"
    
    return {
        "status": status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "criteria": criteria_status,
        "targets": targets,
        "version": "1.0.0",
    }
