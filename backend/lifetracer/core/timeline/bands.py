"""
Global timeline layout.

The observed year range is cut into rows ("bands") of a fixed number of
years. Rows alternate direction so the timeline reads as one folded line:
even rows run left to right, odd rows right to left.

Band membership is decided by year bucketing; position_percent only
places an event inside the band it already belongs to.
"""
import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from lifetracer.core.timeline.columns import (
    resolve_selection,
    selected_events,
    visible_events,
)
from lifetracer.core.timeline.dates import ensure_date, format_event_date, precise_year
from lifetracer.schemas.category import Category
from lifetracer.schemas.event import LifeEvent
from lifetracer.schemas.timeline import (
    Band,
    BandEvent,
    EmptyView,
    FilterOption,
    GlobalTimeline,
    YearTick,
)

logger = logging.getLogger(__name__)

BAND_YEARS = 25
MAJOR_TICK_EVERY = 5
LABEL_EDGE_PERCENT = 10

NO_EVENTS = EmptyView(
    state="no_events",
    message="Ajoutez des souvenirs pour voir la vue globale.",
)


@dataclass(frozen=True)
class YearBand:
    index: int
    start_year: int
    end_year: int  # exclusive

    @property
    def is_reverse(self) -> bool:
        return self.index % 2 == 1

    def contains(self, year: int) -> bool:
        return self.start_year <= year < self.end_year


def partition_years(years: Iterable[int], band_years: int = BAND_YEARS) -> list[YearBand]:
    """Smallest run of contiguous bands covering every year."""
    years = list(years)
    if not years:
        return []
    start_year = min(years)
    span = (max(years) + 1) - start_year
    row_count = math.ceil(span / band_years)
    return [
        YearBand(
            index=i,
            start_year=start_year + i * band_years,
            end_year=start_year + (i + 1) * band_years,
        )
        for i in range(row_count)
    ]


def partition_events(events: Iterable[LifeEvent], band_years: int = BAND_YEARS) -> list[YearBand]:
    return partition_years((ensure_date(e.date).year for e in events), band_years)


def position_percent(value, band_start_year: int, is_reverse: bool, band_years: int = BAND_YEARS) -> float:
    """Horizontal position of a date inside its band, in percent."""
    percent = (precise_year(value) - band_start_year) * (100 / band_years)
    if is_reverse:
        percent = 100 - percent
    return max(0.0, min(100.0, percent))


def year_ticks(band: YearBand, band_years: int = BAND_YEARS) -> list[YearTick]:
    ticks = []
    for i in range(band_years + 1):
        percent = i / band_years * 100
        if i == 0 or i == band_years:
            prominence = "edge"
        elif i % MAJOR_TICK_EVERY == 0:
            prominence = "major"
        else:
            prominence = "minor"
        ticks.append(YearTick(
            year=band.start_year + i,
            percent=100 - percent if band.is_reverse else percent,
            prominence=prominence,
        ))
    return ticks


def label_align(percent: float) -> str:
    """Keep tooltips inside the row near its ends."""
    if percent < LABEL_EDGE_PERCENT:
        return "start"
    if percent > 100 - LABEL_EDGE_PERCENT:
        return "end"
    return "center"


def layout_global(
    events: Sequence[LifeEvent],
    categories: Sequence[Category],
    selected: Optional[Iterable[str]] = None,
    band_years: int = BAND_YEARS,
) -> GlobalTimeline:
    """
    Lay out every event on the banded timeline.

    Bands span all events, including uncategorized ones; only events of
    selected, still existing categories are placed inside them.
    """
    selection = resolve_selection(categories, selected)
    filters = [
        FilterOption(category=category, selected=category.id in selection)
        for category in categories
    ]

    if not visible_events(events, categories):
        return GlobalTimeline(band_years=band_years, filters=filters, bands=[], empty=NO_EVENTS)

    year_bands = partition_events(events, band_years)
    logger.debug(
        "Global range %s..%s in %d bands",
        year_bands[0].start_year, year_bands[-1].end_year, len(year_bands),
    )

    category_of = {category.id: category for category in categories}
    placed = sorted(selected_events(events, categories, selection), key=lambda e: e.date)

    bands = []
    last_index = len(year_bands) - 1
    for year_band in year_bands:
        reverse = year_band.is_reverse
        band_events = []
        for event in placed:
            if not year_band.contains(event.date.year):
                continue
            percent = position_percent(event.date, year_band.start_year, reverse, band_years)
            band_events.append(BandEvent(
                event=event,
                category=category_of[event.category_id],
                date_label=format_event_date(event.date),
                horizontal_percent=percent,
                is_reverse_row=reverse,
                marker="bar" if event.is_important else "dot",
                label_align=label_align(percent),
            ))

        connector = None
        if year_band.index < last_index:
            connector = "left" if reverse else "right"

        bands.append(Band(
            index=year_band.index,
            start_year=year_band.start_year,
            end_year=year_band.end_year,
            is_reverse=reverse,
            connector=connector,
            ticks=year_ticks(year_band, band_years),
            events=band_events,
        ))

    return GlobalTimeline(band_years=band_years, filters=filters, bands=bands)
