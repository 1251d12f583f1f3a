"""Category service - CRUD operations for an owner's categories."""
import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from lifetracer.errors import NotFoundError
from lifetracer.models.category import Category
from lifetracer.models.event import LifeEvent
from lifetracer.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def get_categories(db: Session, owner_id: str) -> list[Category]:
    """Owner's categories in insertion order."""
    return (
        db.query(Category)
        .filter(Category.owner_id == owner_id)
        .order_by(Category.position, Category.created_at)
        .all()
    )


def get_category_by_id(db: Session, owner_id: str, category_id: str) -> Optional[Category]:
    return (
        db.query(Category)
        .filter(Category.owner_id == owner_id, Category.id == category_id)
        .first()
    )


def require_category(db: Session, owner_id: str, category_id: str) -> Category:
    category = get_category_by_id(db, owner_id, category_id)
    if category is None:
        logger.warning("Category %s not found for owner %s", category_id, owner_id)
        raise NotFoundError("Category", category_id)
    return category


def create_category(db: Session, owner_id: str, data: CategoryCreate) -> Category:
    last_position = (
        db.query(func.max(Category.position))
        .filter(Category.owner_id == owner_id)
        .scalar()
    )
    category = Category(
        owner_id=owner_id,
        name=data.name,
        color=data.color,
        icon=data.icon,
        position=(last_position or 0) + 1,
    )
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info("Created category %s (%s)", category.id, category.name)
    return category


def update_category(db: Session, owner_id: str, category_id: str, data: CategoryUpdate) -> Category:
    category = require_category(db, owner_id, category_id)
    changes = data.model_dump(exclude_unset=True)
    for field in ("name", "color"):
        if changes.get(field, ...) is None:
            changes.pop(field)
    for field, value in changes.items():
        setattr(category, field, value)
    db.commit()
    db.refresh(category)
    logger.info("Updated category %s: %s", category.id, sorted(changes))
    return category


def delete_category(db: Session, owner_id: str, category_id: str) -> int:
    """
    Delete a category and detach its events.

    The events are kept with category_id set to NULL, written in the same
    transaction. Returns the number of detached events.
    """
    category = require_category(db, owner_id, category_id)
    detached = (
        db.query(LifeEvent)
        .filter(LifeEvent.owner_id == owner_id, LifeEvent.category_id == category_id)
        .update({LifeEvent.category_id: None}, synchronize_session="fetch")
    )
    db.delete(category)
    db.commit()
    logger.info("Deleted category %s, %d events now uncategorized", category_id, detached)
    return detached
