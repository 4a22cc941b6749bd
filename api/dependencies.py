"""Shared dependencies and helper functions for the page routers.

Usage in routers:
    from api.dependencies import get_contact_or_404, render_page
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from fastapi import HTTPException, Request
from fastapi.templating import Jinja2Templates

from contacts_app.config import load_settings
from contacts_app.contacts import Contact, get_contact, list_contacts
from contacts_app.navigation import contact_href, nav_link_class, normalize_query
from contacts_app.navigation.links import is_link_active

API_ROOT = Path(__file__).resolve().parent
TEMPLATES_DIR = API_ROOT / "templates"
STATIC_DIR = API_ROOT / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals.update(
    contact_href=contact_href,
    nav_link_class=nav_link_class,
    is_link_active=is_link_active,
)


# =============================================================================
# Cached Functions
# =============================================================================

@lru_cache
def get_settings():
    """Get application settings (cached)."""
    return load_settings()


# =============================================================================
# Lookup Helpers
# =============================================================================

def get_contact_or_404(contact_id: str) -> Contact:
    """Fetch a contact or raise a 404."""
    contact = get_contact(contact_id)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found.")
    return contact


# =============================================================================
# Rendering
# =============================================================================

def sidebar_context(request: Request, q: Optional[str]) -> dict[str, Any]:
    """Data every page needs for the sidebar: the search term and the filtered list."""
    query = normalize_query(q)
    return {
        "q": query,
        "contacts": list_contacts(query),
        "current_path": request.url.path,
    }


def render_page(request: Request, template: str, q: Optional[str], **context: Any):
    return templates.TemplateResponse(
        request,
        template,
        {**sidebar_context(request, q), **context},
    )
