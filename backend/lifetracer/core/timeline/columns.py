"""
Category columns and category filtering.

Events pointing at a deleted category (category_id None or unknown) are
never positioned; they stay in the store as uncategorized.
"""
from typing import Iterable, Optional

from lifetracer.schemas.category import Category
from lifetracer.schemas.event import LifeEvent
from lifetracer.schemas.timeline import CategoryColumn

RULER_WIDTH = 80  # px


def layout_columns(categories: Iterable[Category]) -> list[CategoryColumn]:
    """One column per category in list order, after the ruler column."""
    return [
        CategoryColumn(category=category, column_index=index)
        for index, category in enumerate(categories, start=1)
    ]


def live_category_ids(categories: Iterable[Category]) -> set[str]:
    return {category.id for category in categories}


def visible_events(events: Iterable[LifeEvent], categories: Iterable[Category]) -> list[LifeEvent]:
    """Events whose category still exists."""
    live = live_category_ids(categories)
    return [event for event in events if event.category_id in live]


def default_selection(categories: Iterable[Category]) -> frozenset[str]:
    """Global view starts with every known category selected."""
    return frozenset(live_category_ids(categories))


def toggle_selection(selected: frozenset[str], category_id: str) -> frozenset[str]:
    if category_id in selected:
        return selected - {category_id}
    return selected | {category_id}


def resolve_selection(
    categories: Iterable[Category],
    selected: Optional[Iterable[str]] = None,
) -> frozenset[str]:
    """Selected ids restricted to live categories; None means all of them."""
    categories = list(categories)
    if selected is None:
        return default_selection(categories)
    return frozenset(selected) & live_category_ids(categories)


def selected_events(
    events: Iterable[LifeEvent],
    categories: Iterable[Category],
    selected: Optional[Iterable[str]] = None,
) -> list[LifeEvent]:
    """Events of live categories that are part of the selection."""
    keep = resolve_selection(categories, selected)
    return [event for event in events if event.category_id in keep]
