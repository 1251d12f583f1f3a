"""
Timeline API endpoints.

- /linear: one column per category, events placed by date at a zoom level
- /global: every event folded into 25-year serpentine bands
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from lifetracer.api.deps import get_owner_id
from lifetracer.config import get_settings
from lifetracer.db.session import get_db
from lifetracer.schemas.timeline import GlobalTimeline, LinearTimeline
from lifetracer.services import timeline_service

settings = get_settings()

router = APIRouter()


@router.get("/linear", response_model=LinearTimeline)
async def get_linear_timeline(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
    zoom: int = Query(
        settings.zoom_default,
        ge=settings.zoom_min,
        le=settings.zoom_max,
        description="Pixels per year",
    ),
    category_id: Optional[str] = Query(None, description="Only place this category's events"),
):
    """
    Per-category vertical timeline.

    Returns an empty state instead of positions when there is no category
    or no event in an existing category.
    """
    return timeline_service.get_linear_timeline(db, owner_id, zoom=zoom, category_id=category_id)


@router.get("/global", response_model=GlobalTimeline)
async def get_global_timeline(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
    selected: Optional[List[str]] = Query(
        None,
        description="Category IDs to show (repeat the parameter); all when omitted",
    ),
):
    """Banded global timeline, rows alternating direction."""
    return timeline_service.get_global_timeline(db, owner_id, selected=selected)
