"""In-process router: a history stack with one pending-navigation slot.

Navigations are two-phase. ``navigate`` records the request in the pending
slot; ``commit`` settles it into the history stack and notifies subscribers
with the newly committed query. A newer ``navigate`` replaces whatever is
pending, so a superseded navigation never commits. ``back``/``forward``
move within the stack and commit immediately.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .types import (
    HistoryMode,
    Idle,
    NavigationState,
    NavigationTarget,
    Pending,
    PendingNavigation,
    Query,
)

logger = logging.getLogger(__name__)

CommitCallback = Callable[[Query], None]


class MemoryRouter:
    """Routing collaborator used by the search controller, the CLI and tests."""

    def __init__(self, initial_url: str = "/") -> None:
        self._entries: List[NavigationTarget] = [NavigationTarget.parse(initial_url)]
        self._index = 0
        self._pending: Optional[PendingNavigation] = None
        self._subscribers: List[CommitCallback] = []

    # --- read-only state ---

    @property
    def location(self) -> NavigationTarget:
        return self._entries[self._index]

    @property
    def committed_query(self) -> Query:
        return self.location.query

    @property
    def pending_navigation(self) -> Optional[PendingNavigation]:
        return self._pending

    @property
    def state(self) -> NavigationState:
        if self._pending is None:
            return Idle()
        return Pending(self._pending.query)

    @property
    def entries(self) -> Tuple[NavigationTarget, ...]:
        return tuple(self._entries)

    @property
    def index(self) -> int:
        return self._index

    # --- navigation ---

    def navigate(
        self, url: str, history_mode: HistoryMode = HistoryMode.PUSH
    ) -> PendingNavigation:
        target = NavigationTarget.parse(url, base_path=self.location.path)
        if self._pending is not None:
            logger.debug("Navigation to %s superseded by %s", self._pending.target.url, target.url)
        self._pending = PendingNavigation(target=target, history_mode=HistoryMode(history_mode))
        return self._pending

    def commit(self) -> Optional[NavigationTarget]:
        """Settle the pending navigation. Returns the committed target, or None if idle."""
        pending = self._pending
        if pending is None:
            return None
        self._pending = None

        if pending.history_mode is HistoryMode.REPLACE:
            self._entries[self._index] = pending.target
        else:
            del self._entries[self._index + 1:]
            self._entries.append(pending.target)
            self._index += 1

        logger.debug("Committed %s (%s)", pending.target.url, pending.history_mode.value)
        self._notify()
        return pending.target

    def back(self) -> bool:
        return self.go(-1)

    def forward(self) -> bool:
        return self.go(1)

    def go(self, delta: int) -> bool:
        """Move ``delta`` entries through history; False when out of range."""
        new_index = self._index + delta
        if delta == 0 or not 0 <= new_index < len(self._entries):
            return False
        self._pending = None
        self._index = new_index
        self._notify()
        return True

    # --- subscriptions ---

    def subscribe(self, callback: CommitCallback) -> Callable[[], None]:
        """Call ``callback(committed_query)`` after every commit. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        query = self.committed_query
        for callback in list(self._subscribers):
            callback(query)
