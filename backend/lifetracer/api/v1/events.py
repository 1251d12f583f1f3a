"""
Events API endpoints.

Events ("souvenirs") are the dated moments placed on the timelines.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from lifetracer.api.deps import get_owner_id
from lifetracer.db.session import get_db
from lifetracer.schemas.event import EventCreate, EventList, EventUpdate, LifeEvent
from lifetracer.services import event_service

router = APIRouter()


@router.get("", response_model=EventList)
async def list_events(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
    category_id: Optional[str] = Query(None, description="Filter by category ID"),
    year_start: Optional[int] = Query(None, description="First year included"),
    year_end: Optional[int] = Query(None, description="Last year included"),
    important_only: bool = Query(False, description="Only super-souvenirs"),
):
    """List events, newest first."""
    events = event_service.get_events(
        db,
        owner_id,
        category_id=category_id,
        year_start=year_start,
        year_end=year_end,
        important_only=important_only,
    )
    return EventList(items=events, total=len(events))


@router.get("/uncategorized", response_model=EventList)
async def list_uncategorized_events(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """Events whose category was deleted."""
    events = event_service.get_uncategorized_events(db, owner_id)
    return EventList(items=events, total=len(events))


@router.post("", response_model=LifeEvent, status_code=201)
async def create_event(
    data: EventCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return event_service.create_event(db, owner_id, data)


@router.get("/{event_id}", response_model=LifeEvent)
async def get_event(
    event_id: str,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return event_service.require_event(db, owner_id, event_id)


@router.patch("/{event_id}", response_model=LifeEvent)
async def update_event(
    event_id: str,
    data: EventUpdate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return event_service.update_event(db, owner_id, event_id, data)


@router.post("/{event_id}/toggle-important", response_model=LifeEvent)
async def toggle_important(
    event_id: str,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """Promote an event to super-souvenir, or demote it."""
    return event_service.toggle_important(db, owner_id, event_id)


@router.delete("/{event_id}", status_code=204)
async def delete_event(
    event_id: str,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    event_service.delete_event(db, owner_id, event_id)
