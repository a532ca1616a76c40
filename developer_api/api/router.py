"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from developer_api.api.health import router as health_router
from developer_api.api.developers import router as developers_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Developer validation
api_router.include_router(developers_router, tags=["Developers"])
