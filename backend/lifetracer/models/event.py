"""
LifeEvent model.

A "souvenir": one dated moment of the owner's life, attached to a
category. Dates are calendar dates without a time component.
"""
from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from lifetracer.models.base import Base, TimestampMixin, new_id


class LifeEvent(Base, TimestampMixin):
    __tablename__ = "events"
    __table_args__ = (
        CheckConstraint(
            "emotional_valence IS NULL OR (emotional_valence >= -5 AND emotional_valence <= 5)",
            name="ck_events_emotional_valence",
        ),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    owner_id = Column(String(64), nullable=False, index=True)

    title = Column(String(500), nullable=False)
    description = Column(Text)
    location = Column(String(255))
    people = Column(JSON)  # list of names

    # Temporal data
    date = Column(Date, nullable=False, index=True)
    end_date = Column(Date)
    is_current = Column(Boolean, nullable=False, default=False)  # ongoing, no fixed end

    # NULL once the category has been deleted
    category_id = Column(String(36), ForeignKey("categories.id", ondelete="SET NULL"), index=True)

    is_important = Column(Boolean, nullable=False, default=False)  # super-souvenir
    emotional_valence = Column(Integer)  # -5..5

    category = relationship("Category", back_populates="events")

    def __repr__(self):
        return f"<LifeEvent(id={self.id}, title='{self.title}', date={self.date})>"
