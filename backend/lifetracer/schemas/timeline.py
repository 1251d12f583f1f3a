"""
Timeline view models.

Returned by the layout engine and served as-is to the front end.
"""
from typing import Literal, Optional
from pydantic import BaseModel

from lifetracer.schemas.category import Category
from lifetracer.schemas.event import LifeEvent

EmptyState = Literal["no_categories", "no_events"]


class EmptyView(BaseModel):
    state: EmptyState
    message: str


# ============== Linear view ==============

class CategoryColumn(BaseModel):
    category: Category
    column_index: int  # 0 is the year ruler


class RulerYear(BaseModel):
    year: int
    top: float


class PositionedEvent(BaseModel):
    event: LifeEvent
    column_index: int
    vertical_offset: float
    date_label: str


class ZoomSlider(BaseModel):
    min: int
    max: int
    step: int


class LinearTimeline(BaseModel):
    zoom: int
    zoom_percent: int
    slider: Optional[ZoomSlider] = None
    ruler_width: int
    columns: list[CategoryColumn]
    years: list[RulerYear]
    events: list[PositionedEvent]
    height: float
    empty: Optional[EmptyView] = None


# ============== Global view ==============

class YearTick(BaseModel):
    year: int
    percent: float
    prominence: Literal["edge", "major", "minor"]


class BandEvent(BaseModel):
    event: LifeEvent
    category: Category
    date_label: str
    horizontal_percent: float
    is_reverse_row: bool
    marker: Literal["bar", "dot"]
    label_align: Literal["start", "center", "end"]


class Band(BaseModel):
    index: int
    start_year: int
    end_year: int  # exclusive
    is_reverse: bool
    connector: Optional[Literal["left", "right"]] = None
    ticks: list[YearTick]
    events: list[BandEvent]


class FilterOption(BaseModel):
    category: Category
    selected: bool


class GlobalTimeline(BaseModel):
    band_years: int
    filters: list[FilterOption]
    bands: list[Band]
    empty: Optional[EmptyView] = None
