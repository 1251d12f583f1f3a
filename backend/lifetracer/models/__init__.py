"""
SQLAlchemy models for Life Tracer.
"""
from lifetracer.models.base import Base
from lifetracer.models.category import Category
from lifetracer.models.event import LifeEvent

__all__ = [
    "Base",
    "Category",
    "LifeEvent",
]
