"""Timeline service - builds view models from an owner's stored data."""
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from lifetracer.config import get_settings
from lifetracer.core.state import LifeState
from lifetracer.schemas.category import Category
from lifetracer.schemas.event import LifeEvent
from lifetracer.schemas.timeline import GlobalTimeline, LinearTimeline, ZoomSlider
from lifetracer.services import category_service, event_service


def load_state(db: Session, owner_id: str, zoom: Optional[int] = None) -> LifeState:
    """Snapshot of the owner's categories and events."""
    settings = get_settings()
    categories = [
        Category.model_validate(c) for c in category_service.get_categories(db, owner_id)
    ]
    events = [
        LifeEvent.model_validate(e) for e in event_service.get_events(db, owner_id)
    ]
    state = LifeState.from_collections(categories, events)
    return state.with_zoom(
        zoom if zoom is not None else settings.zoom_default,
        settings.zoom_min,
        settings.zoom_max,
    )


def get_linear_timeline(
    db: Session,
    owner_id: str,
    zoom: Optional[int] = None,
    category_id: Optional[str] = None,
) -> LinearTimeline:
    settings = get_settings()
    state = load_state(db, owner_id, zoom)
    view = state.linear_view(
        focus_category_id=category_id,
        padding=settings.timeline_start_padding,
    )
    slider = ZoomSlider(min=settings.zoom_min, max=settings.zoom_max, step=settings.zoom_step)
    return view.model_copy(update={"slider": slider})


def get_global_timeline(
    db: Session,
    owner_id: str,
    selected: Optional[Iterable[str]] = None,
) -> GlobalTimeline:
    settings = get_settings()
    state = load_state(db, owner_id).with_selection(selected)
    return state.global_view(band_years=settings.band_years)
