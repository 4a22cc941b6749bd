"""Contacts router - detail, edit, favorite and delete for a single contact."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request
from fastapi.responses import RedirectResponse

from api.dependencies import get_contact_or_404, render_page
from api.models import ContactUpdateForm
from contacts_app.contacts import (
    Contact,
    ContactNotFound,
    delete_contact,
    set_favorite,
    update_contact,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _update_form(
    first: Optional[str] = Form(None),
    last: Optional[str] = Form(None),
    twitter: Optional[str] = Form(None),
    avatar: Optional[str] = Form(None),
    notes: Optional[str] = Form(None),
) -> ContactUpdateForm:
    return ContactUpdateForm(first=first, last=last, twitter=twitter, avatar=avatar, notes=notes)


@router.get("/{contact_id}")
def show_contact(
    request: Request,
    contact: Contact = Depends(get_contact_or_404),
    q: Optional[str] = Query(None),
):
    return render_page(request, "contact.html", q, contact=contact)


@router.post("/{contact_id}")
def toggle_favorite(contact_id: str, favorite: str = Form(...)) -> RedirectResponse:
    """Set the favorite flag from the star button (``favorite=true|false``)."""
    try:
        set_favorite(contact_id, favorite == "true")
    except ContactNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    logger.info("Contact %s favorite=%s", contact_id, favorite)
    return RedirectResponse(url=f"/contacts/{contact_id}", status_code=303)


@router.get("/{contact_id}/edit")
def edit_contact_form(
    request: Request,
    contact: Contact = Depends(get_contact_or_404),
    q: Optional[str] = Query(None),
):
    return render_page(request, "edit.html", q, contact=contact)


@router.post("/{contact_id}/edit")
def edit_contact(
    contact_id: str,
    form: ContactUpdateForm = Depends(_update_form),
) -> RedirectResponse:
    try:
        update_contact(contact_id, **form.model_dump())
    except ContactNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    logger.info("Contact %s updated", contact_id)
    return RedirectResponse(url=f"/contacts/{contact_id}", status_code=303)


@router.post("/{contact_id}/destroy")
def destroy_contact(contact_id: str) -> RedirectResponse:
    if not delete_contact(contact_id):
        logger.warning("Delete requested for missing contact %s", contact_id)
        raise HTTPException(status_code=404, detail="Contact not found.")
    return RedirectResponse(url="/", status_code=303)
