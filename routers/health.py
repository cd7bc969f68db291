"""
routers/health.py - Health Check and System Status Endpoints

Endpoints for monitoring application health:
- GET /: Root endpoint with API info
- GET /health: Record source and database health check
"""

import time
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

import schemas
from config import ENVIRONMENT, RECORD_SOURCE, RECORD_SOURCE_DATABASE
from database import check_database_health, get_pool_stats
from records import RecordSourceError, load_advocates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])

API_VERSION = "1.0.0"


@router.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": "Advocate Directory API is running",
        "version": API_VERSION,
        "environment": ENVIRONMENT,
        "docs": "/docs",
        "health": "/health"
    }


@router.get(
    "/health",
    response_model=schemas.HealthCheck,
    summary="Health check endpoint",
    description="Check the health status of the API and its dependencies",
    responses={503: {"model": schemas.HealthCheck, "description": "A dependency is unhealthy"}},
)
def health_check():
    """
    Health check that validates:
    - The advocate record source can be loaded
    - Database connectivity (database record source only)
    """
    healthy = True
    checks = {}

    # Check record source
    try:
        records = load_advocates()
        checks["records"] = {
            "status": "healthy",
            "source": RECORD_SOURCE,
            "count": len(records)
        }
    except RecordSourceError as exc:
        healthy = False
        checks["records"] = {
            "status": "unhealthy",
            "source": RECORD_SOURCE,
            "error": str(exc)
        }

    # Check database
    if RECORD_SOURCE == RECORD_SOURCE_DATABASE:
        if check_database_health():
            checks["database"] = {
                "status": "healthy",
                "pool_stats": get_pool_stats()
            }
        else:
            healthy = False
            checks["database"] = {"status": "unhealthy"}

    health_status = schemas.HealthCheck(
        status="healthy" if healthy else "unhealthy",
        timestamp=time.time(),
        checks=checks,
    )
    if not healthy:
        logger.warning(f"Health check failed: {checks}")

    status_code = 200 if healthy else 503
    return JSONResponse(content=health_status.model_dump(), status_code=status_code)
