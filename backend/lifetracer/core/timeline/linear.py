"""
Linear timeline layout.

Every category gets a vertical column; an event sits at a vertical offset
proportional to the days elapsed since January 1st of the year before the
earliest visible event:

    offset = padding + days_between(date, min_date) / 365 * zoom

The ruler lists every year from the year before the first event to two
years after the last one.
"""
import logging
from datetime import date
from typing import Optional, Sequence

from lifetracer.core.timeline.columns import RULER_WIDTH, layout_columns, visible_events
from lifetracer.core.timeline.dates import DAYS_PER_YEAR, days_between, ensure_date, format_event_date
from lifetracer.schemas.category import Category
from lifetracer.schemas.event import LifeEvent
from lifetracer.schemas.timeline import (
    EmptyView,
    LinearTimeline,
    PositionedEvent,
    RulerYear,
)

logger = logging.getLogger(__name__)

START_PADDING = 50
EXTRA_HEIGHT = 200

NO_CATEGORIES = EmptyView(
    state="no_categories",
    message="Commencez par créer une catégorie",
)
NO_EVENTS = EmptyView(
    state="no_events",
    message="Aucun souvenir pour le moment",
)


def vertical_offset(value: date, min_date: date, zoom: float, padding: float = START_PADDING) -> float:
    return padding + days_between(value, min_date) / DAYS_PER_YEAR * zoom


def ruler_years(min_year: int, max_year: int) -> list[int]:
    """Years shown on the ruler, padded by one year before and two after."""
    return list(range(min_year - 1, max_year + 3))


def zoom_percent(zoom: int) -> int:
    return round(zoom / 1000 * 100)


def layout_linear(
    events: Sequence[LifeEvent],
    categories: Sequence[Category],
    zoom: int,
    padding: float = START_PADDING,
    focus_category_id: Optional[str] = None,
) -> LinearTimeline:
    """
    Position events on the per-category timeline.

    With focus_category_id only that category's events are placed, every
    column is still laid out.
    """
    columns = layout_columns(categories)
    base = dict(
        zoom=zoom,
        zoom_percent=zoom_percent(zoom),
        ruler_width=RULER_WIDTH,
        columns=columns,
    )

    if not columns:
        return LinearTimeline(**base, years=[], events=[], height=0, empty=NO_CATEGORIES)

    if focus_category_id is not None:
        events = [e for e in events if e.category_id == focus_category_id]

    shown = visible_events(events, categories)
    if not shown:
        return LinearTimeline(**base, years=[], events=[], height=0, empty=NO_EVENTS)

    dates = [ensure_date(e.date) for e in shown]
    min_year = min(dates).year
    max_year = max(dates).year
    years = ruler_years(min_year, max_year)
    min_date = date(years[0], 1, 1)
    logger.debug("Linear range %s..%s at zoom %s", years[0], years[-1], zoom)

    column_of = {column.category.id: column.column_index for column in columns}
    positioned = [
        PositionedEvent(
            event=event,
            column_index=column_of[event.category_id],
            vertical_offset=vertical_offset(event.date, min_date, zoom, padding),
            date_label=format_event_date(event.date),
        )
        for event in shown
    ]
    positioned.sort(key=lambda p: (p.column_index, p.event.date))

    return LinearTimeline(
        **base,
        years=[
            RulerYear(year=year, top=padding + (year - years[0]) * zoom)
            for year in years
        ],
        events=positioned,
        height=len(years) * zoom + EXTRA_HEIGHT,
    )
