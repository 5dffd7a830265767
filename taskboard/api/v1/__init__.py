"""API v1: versioned REST routes."""

from taskboard.api.v1.router import api_router

__all__ = ["api_router"]
