"""
API v1 Router - Aggregates all API endpoints.
"""
from fastapi import APIRouter

from lifetracer.api.v1 import categories, events, timeline

api_router = APIRouter()

# Data endpoints
api_router.include_router(categories.router, prefix="/categories", tags=["Categories"])
api_router.include_router(events.router, prefix="/events", tags=["Events"])

# Layout endpoints (linear and global views)
api_router.include_router(timeline.router, prefix="/timeline", tags=["Timeline"])
