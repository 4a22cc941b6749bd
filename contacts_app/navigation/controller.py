"""Keeps the search box in step with the router.

The field shows the most recently committed query. Typing starts a
navigation to ``?q=<value>``; the first search from an unfiltered page
pushes a history entry and every later keystroke replaces it, so a single
"back" returns to the unfiltered list.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .history import MemoryRouter
from .types import HistoryMode, NavigationTarget, PendingNavigation, Query, normalize_query

logger = logging.getLogger(__name__)

DISPLAYING = "displaying"
EDITING = "editing"


class SearchField(Protocol):
    value: str


@dataclass
class InputField:
    """Stand-in for the ``<input id="q">`` element."""
    id: str = "q"
    value: str = ""


class SearchSyncController:
    def __init__(
        self,
        router: MemoryRouter,
        field: Optional[SearchField] = None,
        *,
        search_path: str = "/",
    ) -> None:
        self.router = router
        self.field = field if field is not None else InputField()
        self.search_path = search_path
        self.phase = DISPLAYING
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def committed_query(self) -> Query:
        return self.router.committed_query

    @property
    def pending_navigation(self) -> Optional[PendingNavigation]:
        return self.router.pending_navigation

    @property
    def is_searching(self) -> bool:
        """A navigation is in flight and it carries a search query."""
        pending = self.router.pending_navigation
        return pending is not None and pending.query is not None

    @property
    def detail_is_loading(self) -> bool:
        """A navigation is in flight and it is not a search."""
        return self.router.pending_navigation is not None and not self.is_searching

    def mount(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self.router.subscribe(self._on_commit)
        self._sync(self.committed_query)

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def user_input(self, value: str) -> PendingNavigation:
        """Handle a change in the field and start the matching navigation."""
        self.field.value = value
        self.phase = EDITING

        query = normalize_query(value)
        # Only a search away from an unfiltered page gets its own entry.
        if self.committed_query is None and query is not None:
            mode = HistoryMode.PUSH
        else:
            mode = HistoryMode.REPLACE
        target = NavigationTarget(path=self.search_path, query=query)
        logger.debug("Search input %r -> %s (%s)", value, target.url, mode.value)
        return self.router.navigate(target.url, history_mode=mode)

    def _on_commit(self, query: Query) -> None:
        self._sync(query)

    def _sync(self, query: Query) -> None:
        self.field.value = query or ""
        self.phase = DISPLAYING
