"""Root router - the contact list, search box and "New" action."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import RedirectResponse

from api.dependencies import render_page
from contacts_app.contacts import create_empty_contact

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
def index(request: Request, q: Optional[str] = Query(None)):
    return render_page(request, "index.html", q)


@router.post("/")
def create_contact() -> RedirectResponse:
    """Create a blank contact and go straight to its edit form."""
    contact = create_empty_contact()
    logger.info("New contact %s, redirecting to its edit form", contact.id)
    return RedirectResponse(url=f"/contacts/{contact.id}/edit", status_code=303)
