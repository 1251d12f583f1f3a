"""
Event service - CRUD operations for an owner's life events.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from lifetracer.errors import NotFoundError, UnknownCategoryError
from lifetracer.models.event import LifeEvent
from lifetracer.schemas.event import EventCreate, EventUpdate
from lifetracer.services import category_service

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "date", "category_id")


def get_events(
    db: Session,
    owner_id: str,
    category_id: Optional[str] = None,
    year_start: Optional[int] = None,
    year_end: Optional[int] = None,
    important_only: bool = False,
) -> list[LifeEvent]:
    """Owner's events, newest first, with optional filtering."""
    query = db.query(LifeEvent).filter(LifeEvent.owner_id == owner_id)

    if category_id is not None:
        query = query.filter(LifeEvent.category_id == category_id)
    if important_only:
        query = query.filter(LifeEvent.is_important.is_(True))

    events = query.order_by(LifeEvent.date.desc(), LifeEvent.created_at.desc()).all()

    # Year bounds on a Date column are portable only in Python
    if year_start is not None:
        events = [e for e in events if e.date.year >= year_start]
    if year_end is not None:
        events = [e for e in events if e.date.year <= year_end]
    return events


def get_events_by_category(db: Session, owner_id: str, category_id: str) -> list[LifeEvent]:
    category_service.require_category(db, owner_id, category_id)
    return get_events(db, owner_id, category_id=category_id)


def get_uncategorized_events(db: Session, owner_id: str) -> list[LifeEvent]:
    return (
        db.query(LifeEvent)
        .filter(LifeEvent.owner_id == owner_id, LifeEvent.category_id.is_(None))
        .order_by(LifeEvent.date.desc())
        .all()
    )


def get_event_by_id(db: Session, owner_id: str, event_id: str) -> Optional[LifeEvent]:
    return (
        db.query(LifeEvent)
        .filter(LifeEvent.owner_id == owner_id, LifeEvent.id == event_id)
        .first()
    )


def require_event(db: Session, owner_id: str, event_id: str) -> LifeEvent:
    event = get_event_by_id(db, owner_id, event_id)
    if event is None:
        logger.warning("Event %s not found for owner %s", event_id, owner_id)
        raise NotFoundError("Event", event_id)
    return event


def _check_category(db: Session, owner_id: str, category_id: str) -> None:
    if category_service.get_category_by_id(db, owner_id, category_id) is None:
        raise UnknownCategoryError(category_id)


def create_event(db: Session, owner_id: str, data: EventCreate) -> LifeEvent:
    _check_category(db, owner_id, data.category_id)
    event = LifeEvent(owner_id=owner_id, **data.model_dump())
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Created event %s on %s", event.id, event.date)
    return event


def update_event(db: Session, owner_id: str, event_id: str, data: EventUpdate) -> LifeEvent:
    event = require_event(db, owner_id, event_id)
    changes = data.model_dump(exclude_unset=True)
    for field in REQUIRED_FIELDS:
        if changes.get(field, ...) is None:
            changes.pop(field)
    if "category_id" in changes:
        _check_category(db, owner_id, changes["category_id"])
    for field, value in changes.items():
        setattr(event, field, value)
    db.commit()
    db.refresh(event)
    logger.info("Updated event %s: %s", event.id, sorted(changes))
    return event


def toggle_important(db: Session, owner_id: str, event_id: str) -> LifeEvent:
    """Flip the super-souvenir flag."""
    event = require_event(db, owner_id, event_id)
    event.is_important = not event.is_important
    db.commit()
    db.refresh(event)
    logger.info("Event %s important=%s", event.id, event.is_important)
    return event


def delete_event(db: Session, owner_id: str, event_id: str) -> None:
    event = require_event(db, owner_id, event_id)
    db.delete(event)
    db.commit()
    logger.info("Deleted event %s", event_id)
