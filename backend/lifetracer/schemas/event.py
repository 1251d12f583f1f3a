"""Life event schemas."""
import datetime as dt
from pydantic import BaseModel, Field, field_validator
from typing import Optional


def _split_people(value):
    """Accept a list of names or the comma separated form input."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.split(",")
    names = [name.strip() for name in value if name and name.strip()]
    return names or None


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _strip_title(value):
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("title is required")
    return value


class EventFields(BaseModel):
    """Fields shared by every event schema, without input checks."""
    title: str
    date: dt.date
    end_date: Optional[dt.date] = None
    description: Optional[str] = None
    location: Optional[str] = None
    people: Optional[list[str]] = None
    is_important: bool = False
    emotional_valence: Optional[int] = None
    is_current: bool = False


class EventBase(EventFields):
    """Input checks for new events."""
    title: str = Field(..., min_length=1, max_length=500)
    location: Optional[str] = Field(None, max_length=255)
    emotional_valence: Optional[int] = Field(None, ge=-5, le=5)

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str) -> str:
        return _strip_title(value)

    @field_validator("description", "location", mode="before")
    @classmethod
    def blank_optional(cls, value):
        return _blank_to_none(value)

    @field_validator("people", mode="before")
    @classmethod
    def split_people(cls, value):
        return _split_people(value)


class EventCreate(EventBase):
    """Schema for creating an event."""
    category_id: str = Field(..., min_length=1)


class EventUpdate(BaseModel):
    """Schema for updating an event (only provided fields are written)."""
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    people: Optional[list[str]] = None
    category_id: Optional[str] = Field(None, min_length=1)
    is_important: Optional[bool] = None
    emotional_valence: Optional[int] = Field(None, ge=-5, le=5)
    is_current: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: Optional[str]) -> Optional[str]:
        return _strip_title(value)

    @field_validator("description", "location", mode="before")
    @classmethod
    def blank_optional(cls, value):
        return _blank_to_none(value)

    @field_validator("people", mode="before")
    @classmethod
    def split_people(cls, value):
        return _split_people(value)


class LifeEvent(EventFields):
    """
    Stored event. category_id is None once its category was deleted.

    Input checks live on EventCreate/EventUpdate so stored rows always load.
    """
    id: str
    owner_id: str
    category_id: Optional[str] = None

    class Config:
        from_attributes = True


class EventList(BaseModel):
    items: list[LifeEvent]
    total: int
