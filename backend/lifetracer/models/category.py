"""
Category model.

A user-defined column of the linear timeline (Travel, Work, Family...).
Deleting a category keeps its events; their category_id is set to NULL.
"""
from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import relationship

from lifetracer.core.palette import CategoryColor, CategoryIcon, DEFAULT_COLOR
from lifetracer.models.base import Base, TimestampMixin, new_id


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Category(Base, TimestampMixin):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_id)
    owner_id = Column(String(64), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    color = Column(
        Enum(CategoryColor, native_enum=False, length=20, values_callable=_enum_values),
        nullable=False,
        default=DEFAULT_COLOR,
    )
    icon = Column(Enum(CategoryIcon, native_enum=False, length=20, values_callable=_enum_values))

    # Insertion order; created_at alone ties within the same second
    position = Column(Integer, nullable=False, default=0)

    events = relationship("LifeEvent", back_populates="category", passive_deletes=True)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
