import pytest

from display_state import CATEGORIES, DETAIL, DisplayState, Empty, Found, Loading, ViewerStates


def test_regions_start_empty():
    state = DisplayState()
    assert state.get(DETAIL) == Empty()
    assert state.get(CATEGORIES) == Empty()


def test_begin_then_resolve():
    state = DisplayState()
    ticket = state.begin(DETAIL, Loading("Cargando..."))
    assert state.get(DETAIL) == Loading("Cargando...")
    assert state.resolve(DETAIL, ticket, Found("x"))
    assert state.get(DETAIL) == Found("x")


def test_stale_resolution_is_dropped():
    state = DisplayState()
    first = state.begin(DETAIL, Loading())
    second = state.begin(DETAIL, Loading())

    assert state.resolve(DETAIL, second, Found("second"))
    assert not state.resolve(DETAIL, first, Found("first"))
    assert state.get(DETAIL) == Found("second")


def test_regions_are_independent():
    state = DisplayState()
    detail = state.begin(DETAIL, Loading())
    state.begin(CATEGORIES, Loading())
    assert state.resolve(DETAIL, detail, Found("d"))


def test_unknown_region():
    with pytest.raises(KeyError):
        DisplayState().get("sidebar")


def test_each_viewer_has_its_own_tickets():
    viewers = ViewerStates()
    page_a = viewers.get("a")
    page_b = viewers.get("b")

    ticket = page_a.begin(DETAIL, Loading())
    page_b.begin(DETAIL, Loading())

    assert viewers.get("a") is page_a
    assert page_a.resolve(DETAIL, ticket, Found("a"))


def test_open_registers_a_new_viewer():
    viewers = ViewerStates()
    viewer_id, state = viewers.open()
    assert viewer_id in viewers
    assert viewers.get(viewer_id) is state


def test_missing_viewer_gets_throwaway_state():
    viewers = ViewerStates()
    assert viewers.get(None) is not viewers.get(None)
    assert len(viewers) == 0


def test_least_recently_used_viewer_is_dropped():
    viewers = ViewerStates(max_viewers=2)
    viewers.get("a")
    viewers.get("b")
    viewers.get("a")
    viewers.get("c")

    assert "a" in viewers
    assert "b" not in viewers
    assert len(viewers) == 2
