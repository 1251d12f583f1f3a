"""Pydantic schemas for API request/response validation."""
from lifetracer.schemas.category import Category, CategoryCreate, CategoryUpdate, CategoryList
from lifetracer.schemas.event import LifeEvent, EventCreate, EventUpdate, EventList
from lifetracer.schemas.timeline import LinearTimeline, GlobalTimeline, EmptyView

__all__ = [
    "Category", "CategoryCreate", "CategoryUpdate", "CategoryList",
    "LifeEvent", "EventCreate", "EventUpdate", "EventList",
    "LinearTimeline", "GlobalTimeline", "EmptyView",
]
