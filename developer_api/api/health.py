"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from developer_api.config import get_settings
from developer_api.models.responses import HealthResponse, HealthDependency

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """System health check with validator status."""
    dependencies = {}

    validator = getattr(request.app.state, "developer_validator", None)
    if validator is None:
        dependencies["developer_validator"] = HealthDependency(
            status="unhealthy", message="validator not initialised"
        )
    else:
        dependencies["developer_validator"] = HealthDependency(
            status="healthy", message=f"{len(validator.rule_sets)} rule sets"
        )

    # Overall status
    all_healthy = all(d.status == "healthy" for d in dependencies.values())

    return HealthResponse(
        status="healthy" if all_healthy else "unhealthy",
        version=get_settings().VERSION,
        uptime_seconds=round(time.time() - _start_time, 2),
        dependencies=dependencies,
    )
