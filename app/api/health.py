from datetime import datetime, timezone

from fastapi import APIRouter
from sqlalchemy import text

from app.config import get_settings
from app.database import engine

router = APIRouter(tags=["Health"])

ENDPOINTS = [
    "GET /api/v1/products",
    "GET /api/v1/products/{id}",
    "POST /api/v1/products",
    "PUT /api/v1/products/{id}",
    "DELETE /api/v1/products/{id}",
    "GET /api/v1/users",
    "GET /api/v1/users/{id}",
    "POST /api/v1/users",
    "PUT /api/v1/users/{id}",
    "DELETE /api/v1/users/{id}",
    "GET /api/v1/orders",
    "GET /api/v1/orders/{id}",
    "POST /api/v1/orders",
    "PUT /api/v1/orders/{id}",
    "DELETE /api/v1/orders/{id}",
]


@router.get(
    "/health",
    summary="Health check",
    description="Check if the API is running."
)
def health_check():
    """Simple health check."""
    settings = get_settings()
    return {
        "status": "UP",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc),
    }


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the database is reachable."
)
def readiness_check():
    checks = {"database": False}

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            checks["database"] = True
    except Exception as e:
        checks["database_error"] = str(e)

    return {
        "status": "ready" if checks["database"] else "not_ready",
        "checks": checks
    }


@router.get(
    "/info",
    summary="API information",
    description="Get information about the API."
)
def info():
    settings = get_settings()
    return {
        "name": settings.APP_NAME,
        "description": settings.APP_DESCRIPTION,
        "version": settings.APP_VERSION,
        "endpoints": ENDPOINTS,
    }
