"""Search box and navigation state coordination."""
from .types import (
    HistoryMode,
    Idle,
    NavigationState,
    NavigationTarget,
    Pending,
    PendingNavigation,
    Query,
    normalize_query,
)
from .history import MemoryRouter
from .controller import InputField, SearchField, SearchSyncController
from .links import contact_href, nav_link_class

__all__ = [
    # Types
    "HistoryMode",
    "Idle",
    "NavigationState",
    "NavigationTarget",
    "Pending",
    "PendingNavigation",
    "Query",
    "normalize_query",
    # Router
    "MemoryRouter",
    # Controller
    "InputField",
    "SearchField",
    "SearchSyncController",
    # Links
    "contact_href",
    "nav_link_class",
]
