"""Tests for keeping the search box in step with navigation."""
from __future__ import annotations

import pytest

from contacts_app.navigation import (
    HistoryMode,
    InputField,
    MemoryRouter,
    SearchSyncController,
)
from contacts_app.navigation.controller import DISPLAYING, EDITING


@pytest.fixture
def router():
    return MemoryRouter("/")


@pytest.fixture
def controller(router):
    ctrl = SearchSyncController(router, InputField())
    ctrl.mount()
    return ctrl


class TestFieldSync:
    """The field always shows the last committed query."""

    def test_mount_shows_committed_query(self):
        router = MemoryRouter("/?q=gra")
        controller = SearchSyncController(router)
        controller.mount()

        assert controller.field.value == "gra"
        assert controller.phase == DISPLAYING

    def test_mount_without_query_shows_empty_field(self, controller):
        assert controller.field.value == ""

    def test_commit_overwrites_text_typed_during_navigation(self, router, controller):
        router.navigate("/?q=al")
        controller.field.value = "alb"  # typed while the navigation was in flight

        router.commit()

        assert controller.field.value == "al"

    def test_external_navigation_updates_field(self, router, controller):
        controller.user_input("tom")
        router.commit()

        router.navigate("/contacts/abc")
        router.commit()

        assert controller.field.value == ""
        assert controller.phase == DISPLAYING

    def test_typing_switches_to_editing_until_commit(self, router, controller):
        controller.user_input("p")
        assert controller.phase == EDITING
        assert controller.field.value == "p"

        router.commit()
        assert controller.phase == DISPLAYING

    def test_superseded_navigation_never_reaches_field(self, router, controller):
        controller.user_input("a")
        controller.user_input("al")
        controller.user_input("alm")

        router.commit()

        assert controller.field.value == "alm"
        assert router.commit() is None

    def test_unmount_stops_syncing(self, router, controller):
        controller.unmount()
        router.navigate("/?q=zed")
        router.commit()

        assert controller.field.value == ""


class TestHistoryMode:
    """Push for the first search, replace afterwards."""

    def test_first_search_pushes(self, controller):
        pending = controller.user_input("abc")

        assert pending.history_mode is HistoryMode.PUSH
        assert pending.target.url == "/?q=abc"

    def test_refining_a_search_replaces(self):
        router = MemoryRouter("/?q=abc")
        controller = SearchSyncController(router)
        controller.mount()

        pending = controller.user_input("abcd")

        assert pending.history_mode is HistoryMode.REPLACE
        assert pending.target.url == "/?q=abcd"

    def test_same_value_replaces_without_new_entry(self, router, controller):
        controller.user_input("abc")
        router.commit()
        entries_before = len(router.entries)

        pending = controller.user_input("abc")
        router.commit()

        assert pending.history_mode is HistoryMode.REPLACE
        assert len(router.entries) == entries_before

    def test_mode_uses_committed_query_not_pending_one(self, router, controller):
        first = controller.user_input("a")
        second = controller.user_input("al")  # first has not committed yet

        assert first.history_mode is HistoryMode.PUSH
        assert second.history_mode is HistoryMode.PUSH

    def test_empty_value_drops_query_param(self, router, controller):
        controller.user_input("al")
        router.commit()

        pending = controller.user_input("")

        assert pending.target.url == "/"
        assert pending.target.query is None
        assert pending.history_mode is HistoryMode.REPLACE

    def test_empty_value_on_unfiltered_page_replaces(self, router, controller):
        pending = controller.user_input("")
        router.commit()

        assert pending.history_mode is HistoryMode.REPLACE
        assert [e.url for e in router.entries] == ["/"]

    def test_typing_then_clearing_before_commit_adds_no_entry(self, router, controller):
        controller.user_input("a")
        controller.user_input("")
        router.commit()

        assert [e.url for e in router.entries] == ["/"]
        assert controller.field.value == ""

    def test_searching_again_after_clearing_pushes(self, router, controller):
        controller.user_input("al")
        router.commit()
        controller.user_input("")
        router.commit()

        pending = controller.user_input("gr")

        assert pending.history_mode is HistoryMode.PUSH

    def test_search_from_contact_page_targets_list_route(self):
        router = MemoryRouter("/contacts/abc")
        controller = SearchSyncController(router)
        controller.mount()

        pending = controller.user_input("pri")

        assert pending.target.url == "/?q=pri"


class TestSearchingState:
    def test_idle_is_not_searching(self, controller):
        assert controller.is_searching is False
        assert controller.detail_is_loading is False

    def test_pending_search_is_searching(self, router, controller):
        controller.user_input("al")

        assert controller.is_searching is True
        assert controller.detail_is_loading is False

    def test_commit_clears_searching(self, router, controller):
        controller.user_input("al")
        router.commit()

        assert controller.is_searching is False

    def test_pending_navigation_without_query_is_not_searching(self, router, controller):
        router.navigate("/contacts/abc")

        assert controller.is_searching is False
        assert controller.detail_is_loading is True

    def test_clearing_the_search_is_not_searching(self, router, controller):
        controller.user_input("al")
        router.commit()
        controller.user_input("")

        assert controller.is_searching is False


def test_search_then_backspace_then_back():
    router = MemoryRouter("/")
    controller = SearchSyncController(router)
    controller.mount()

    pending = controller.user_input("al")
    assert pending.history_mode is HistoryMode.PUSH
    assert pending.target.url == "/?q=al"
    router.commit()
    assert controller.field.value == "al"

    pending = controller.user_input("a")
    assert pending.history_mode is HistoryMode.REPLACE
    assert pending.target.url == "/?q=a"
    router.commit()
    assert controller.field.value == "a"

    assert router.back() is True
    assert router.committed_query is None
    assert controller.field.value == ""
    assert router.index == 0
