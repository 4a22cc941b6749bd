"""Value types shared by the router and the search controller."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from urllib.parse import parse_qsl, urlencode, urlsplit

Query = Optional[str]

QUERY_PARAM = "q"


def normalize_query(value: Optional[str]) -> Query:
    """Map an empty search term to an absent query."""
    if value is None or value == "":
        return None
    return value


class HistoryMode(str, Enum):
    PUSH = "push"
    REPLACE = "replace"


@dataclass(frozen=True)
class NavigationTarget:
    """A route path plus the optional search query carried in ``?q=``."""
    path: str = "/"
    query: Query = None

    @property
    def url(self) -> str:
        if self.query is None:
            return self.path
        return f"{self.path}?{urlencode({QUERY_PARAM: self.query})}"

    @classmethod
    def parse(cls, url: str, *, base_path: str = "/") -> NavigationTarget:
        """Parse ``url``; a bare ``?q=...`` resolves against ``base_path``."""
        parts = urlsplit(url)
        params = dict(parse_qsl(parts.query, keep_blank_values=True))
        return cls(path=parts.path or base_path, query=normalize_query(params.get(QUERY_PARAM)))


@dataclass(frozen=True)
class PendingNavigation:
    """A navigation that has been requested but not yet committed."""
    target: NavigationTarget
    history_mode: HistoryMode = HistoryMode.PUSH

    @property
    def query(self) -> Query:
        return self.target.query


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Pending:
    query: Query = None


NavigationState = Union[Idle, Pending]
