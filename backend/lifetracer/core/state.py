"""
LifeState - immutable snapshot of one owner's timeline state.

Holds the categories and events the views are computed from, plus the
ephemeral view settings (zoom, global filter selection). Every mutation
returns a new snapshot; the receiver is never modified.
"""
from dataclasses import dataclass, replace
from typing import Optional

from lifetracer.core.timeline.bands import BAND_YEARS, layout_global
from lifetracer.core.timeline.columns import resolve_selection, toggle_selection
from lifetracer.core.timeline.linear import START_PADDING, layout_linear
from lifetracer.errors import NotFoundError
from lifetracer.schemas.category import Category
from lifetracer.schemas.event import LifeEvent
from lifetracer.schemas.timeline import GlobalTimeline, LinearTimeline

ZOOM_MIN = 100
ZOOM_MAX = 4000
ZOOM_DEFAULT = 100


def clamp_zoom(zoom: int, zoom_min: int = ZOOM_MIN, zoom_max: int = ZOOM_MAX) -> int:
    return max(zoom_min, min(zoom_max, zoom))


def _newest_first(events) -> tuple[LifeEvent, ...]:
    return tuple(sorted(events, key=lambda e: e.date, reverse=True))


@dataclass(frozen=True)
class LifeState:
    categories: tuple[Category, ...] = ()
    events: tuple[LifeEvent, ...] = ()
    zoom: int = ZOOM_DEFAULT
    # None until the user toggles a filter: every category is selected
    selected_category_ids: Optional[frozenset[str]] = None

    @classmethod
    def from_collections(cls, categories, events, zoom: int = ZOOM_DEFAULT) -> "LifeState":
        return cls(
            categories=tuple(categories),
            events=_newest_first(events),
            zoom=clamp_zoom(zoom),
        )

    # ----- categories -----

    def _category_index(self, category_id: str) -> int:
        for index, category in enumerate(self.categories):
            if category.id == category_id:
                return index
        raise NotFoundError("Category", category_id)

    def with_category_added(self, category: Category) -> "LifeState":
        return replace(self, categories=self.categories + (category,))

    def with_category_updated(self, category_id: str, **changes) -> "LifeState":
        index = self._category_index(category_id)
        updated = self.categories[index].model_copy(update=changes)
        categories = self.categories[:index] + (updated,) + self.categories[index + 1:]
        return replace(self, categories=categories)

    def with_category_removed(self, category_id: str) -> "LifeState":
        """Drop the category; its events stay, uncategorized."""
        self._category_index(category_id)
        selected = self.selected_category_ids
        if selected is not None:
            selected = selected - {category_id}
        return replace(
            self,
            categories=tuple(c for c in self.categories if c.id != category_id),
            events=tuple(
                e.model_copy(update={"category_id": None}) if e.category_id == category_id else e
                for e in self.events
            ),
            selected_category_ids=selected,
        )

    # ----- events -----

    def _event_index(self, event_id: str) -> int:
        for index, event in enumerate(self.events):
            if event.id == event_id:
                return index
        raise NotFoundError("Event", event_id)

    def with_event_added(self, event: LifeEvent) -> "LifeState":
        return replace(self, events=_newest_first(self.events + (event,)))

    def with_event_updated(self, event_id: str, **changes) -> "LifeState":
        index = self._event_index(event_id)
        updated = self.events[index].model_copy(update=changes)
        events = self.events[:index] + (updated,) + self.events[index + 1:]
        return replace(self, events=_newest_first(events))

    def with_event_removed(self, event_id: str) -> "LifeState":
        self._event_index(event_id)
        return replace(self, events=tuple(e for e in self.events if e.id != event_id))

    def events_by_category(self, category_id: str) -> list[LifeEvent]:
        return [e for e in self.events if e.category_id == category_id]

    def uncategorized_events(self) -> list[LifeEvent]:
        live = {c.id for c in self.categories}
        return [e for e in self.events if e.category_id not in live]

    # ----- view settings -----

    def with_zoom(self, zoom: int, zoom_min: int = ZOOM_MIN, zoom_max: int = ZOOM_MAX) -> "LifeState":
        return replace(self, zoom=clamp_zoom(zoom, zoom_min, zoom_max))

    def effective_selection(self) -> frozenset[str]:
        return resolve_selection(self.categories, self.selected_category_ids)

    def with_category_toggled(self, category_id: str) -> "LifeState":
        return replace(
            self,
            selected_category_ids=toggle_selection(self.effective_selection(), category_id),
        )

    def with_selection(self, category_ids) -> "LifeState":
        selected = None if category_ids is None else frozenset(category_ids)
        return replace(self, selected_category_ids=selected)

    # ----- views -----

    def linear_view(self, focus_category_id: Optional[str] = None, padding: float = START_PADDING) -> LinearTimeline:
        return layout_linear(
            self.events,
            self.categories,
            self.zoom,
            padding=padding,
            focus_category_id=focus_category_id,
        )

    def global_view(self, band_years: int = BAND_YEARS) -> GlobalTimeline:
        return layout_global(
            self.events,
            self.categories,
            self.effective_selection(),
            band_years=band_years,
        )
