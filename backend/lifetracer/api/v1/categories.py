"""
Categories API endpoints.

Categories are the columns of the linear timeline and the filter chips
of the global one.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lifetracer.api.deps import get_owner_id
from lifetracer.core.palette import palette
from lifetracer.db.session import get_db
from lifetracer.schemas.category import Category, CategoryCreate, CategoryList, CategoryUpdate
from lifetracer.schemas.event import EventList
from lifetracer.services import category_service, event_service

router = APIRouter()


@router.get("", response_model=CategoryList)
async def list_categories(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """Owner's categories in insertion order."""
    categories = category_service.get_categories(db, owner_id)
    return CategoryList(items=categories, total=len(categories))


@router.get("/palette")
async def get_palette():
    """Colors and icons available to categories."""
    return palette()


@router.post("", response_model=Category, status_code=201)
async def create_category(
    data: CategoryCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return category_service.create_category(db, owner_id, data)


@router.get("/{category_id}", response_model=Category)
async def get_category(
    category_id: str,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return category_service.require_category(db, owner_id, category_id)


@router.patch("/{category_id}", response_model=Category)
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return category_service.update_category(db, owner_id, category_id, data)


@router.delete("/{category_id}")
async def delete_category(
    category_id: str,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """
    Delete a category.

    Linked events are not deleted: they lose their category and disappear
    from the timelines until they are moved to another one.
    """
    detached = category_service.delete_category(db, owner_id, category_id)
    return {"deleted": category_id, "uncategorized_events": detached}


@router.get("/{category_id}/events", response_model=EventList)
async def list_category_events(
    category_id: str,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    events = event_service.get_events_by_category(db, owner_id, category_id)
    return EventList(items=events, total=len(events))
