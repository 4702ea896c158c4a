"""Health Probes — liveness and database readiness.

Invariants:
    - GET /api/health/ answers 200 whenever the process can serve requests
    - GET /api/health/ready answers 503 until the database round-trips a query
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

import eureka.infrastructure.database as database

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def liveness():
    return {"status": "ok", "service": "eureka-api"}


@router.get("/ready")
async def readiness():
    # Looked up at call time: db_manager is assigned by the lifespan after import
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "checks": {"database": "unavailable"}},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
