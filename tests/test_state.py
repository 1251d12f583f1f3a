import pytest

from lifetracer.core.state import LifeState, ZOOM_MAX, ZOOM_MIN
from lifetracer.errors import NotFoundError

from conftest import make_category, make_event


@pytest.fixture
def state():
    return LifeState.from_collections(
        [make_category("travel"), make_category("work")],
        [
            make_event("a", "2001-01-01", "travel"),
            make_event("b", "2010-01-01", "travel"),
            make_event("c", "2005-01-01", "travel"),
            make_event("d", "2008-01-01", "work"),
        ],
    )


def test_events_are_newest_first(state):
    assert [e.id for e in state.events] == ["b", "d", "c", "a"]


def test_mutations_return_new_snapshots(state):
    updated = state.with_event_added(make_event("e", "2020-01-01", "work"))

    assert len(state.events) == 4
    assert updated.events[0].id == "e"
    assert updated is not state


def test_removing_category_keeps_events_uncategorized(state):
    after = state.with_category_removed("travel")

    assert [c.id for c in after.categories] == ["work"]
    assert len(after.events) == 4
    assert sorted(e.id for e in after.uncategorized_events()) == ["a", "b", "c"]
    assert all(e.category_id is None for e in after.uncategorized_events())
    # original snapshot untouched
    assert len(state.events_by_category("travel")) == 3

    view = after.linear_view()
    assert [p.event.id for p in view.events] == ["d"]
    assert all(e.event.id == "d" for band in after.global_view().bands for e in band.events)


def test_update_and_remove_event(state):
    moved = state.with_event_updated("a", date=make_event("x", "2030-01-01").date)
    assert moved.events[0].id == "a"

    removed = moved.with_event_removed("a")
    assert "a" not in {e.id for e in removed.events}

    with pytest.raises(NotFoundError):
        removed.with_event_removed("a")


def test_update_category(state):
    renamed = state.with_category_updated("work", name="Boulot")
    assert renamed.categories[1].name == "Boulot"
    assert state.categories[1].name == "Work"

    with pytest.raises(NotFoundError):
        state.with_category_updated("nope", name="x")


def test_zoom_is_clamped(state):
    assert state.with_zoom(50).zoom == ZOOM_MIN
    assert state.with_zoom(99999).zoom == ZOOM_MAX
    assert state.with_zoom(1200).zoom == 1200


def test_selection_defaults_to_all_and_toggles(state):
    assert state.effective_selection() == {"travel", "work"}

    without_travel = state.with_category_toggled("travel")
    assert without_travel.effective_selection() == {"work"}
    assert without_travel.with_category_toggled("travel").effective_selection() == {"travel", "work"}

    view = without_travel.global_view()
    assert [e.event.id for band in view.bands for e in band.events] == ["d"]


def test_new_category_is_not_auto_selected_after_toggle(state):
    toggled = state.with_category_toggled("travel")
    grown = toggled.with_category_added(make_category("family"))
    assert grown.effective_selection() == {"work"}
    assert state.with_category_added(make_category("family")).effective_selection() == {
        "travel", "work", "family",
    }
