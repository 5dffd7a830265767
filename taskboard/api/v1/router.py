"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from taskboard.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from taskboard.api.v1.endpoints import assistant, health, tasks, taxonomy

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(taxonomy.router, prefix="/taxonomy", tags=["taxonomy"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(assistant.router, prefix="/assistant", tags=["assistant"])
