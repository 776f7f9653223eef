"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the key-value backend cannot be read
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from countnotes.config import get_settings
from countnotes.core.repository_protocols import KeyValueBackend
from countnotes.core.result import Err
from countnotes.api.deps import get_backend
from countnotes.services.storage_guard import guarded

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "countnotes-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(backend: KeyValueBackend = Depends(get_backend)):
    """Readiness probe: a read of the counter key must succeed."""
    settings = get_settings()
    probe = await guarded(
        backend.read_string(settings.counter_key),
        operation="health", key=settings.counter_key,
        timeout_seconds=settings.storage_timeout_seconds,
    )
    if isinstance(probe, Err):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
