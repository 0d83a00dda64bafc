import logging

from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check that the database is reachable."
)
def readiness_check(request: Request):
    """
    Readiness check for the database connection pool.

    Backend errors are logged, not returned.
    """
    checks = {"database": False}

    try:
        with request.app.state.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            checks["database"] = True
    except SQLAlchemyError as e:
        logger.error(f"Readiness check failed: {e}")

    return {
        "status": "ready" if all(checks.values()) else "not_ready",
        "checks": checks
    }
