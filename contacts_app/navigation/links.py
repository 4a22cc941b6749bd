"""Sidebar link helpers."""
from __future__ import annotations

from typing import Optional

from .types import NavigationTarget, Query


def contact_href(contact_id: str, query: Query = None) -> str:
    """Link to a contact detail page, keeping the active search."""
    return NavigationTarget(path=f"/contacts/{contact_id}", query=query).url


def nav_link_class(is_active: bool) -> str:
    """Server-side class for a sidebar link; the browser adds ``pending`` on click."""
    return "active" if is_active else ""


def is_link_active(href_path: str, current_path: Optional[str]) -> bool:
    return current_path is not None and current_path.rstrip("/") == href_path.rstrip("/")
