"""Form and response models for the page and JSON routes."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ContactUpdateForm(BaseModel):
    """Fields posted by the edit form. Blank inputs clear the stored value."""
    first: Optional[str] = None
    last: Optional[str] = None
    twitter: Optional[str] = None
    avatar: Optional[str] = None
    notes: Optional[str] = None


class ContactModel(BaseModel):
    id: str
    first: Optional[str] = None
    last: Optional[str] = None
    avatar: Optional[str] = None
    twitter: Optional[str] = None
    notes: Optional[str] = None
    favorite: bool = False
    created_at: str = Field("", alias="createdAt")


class ContactListResponse(BaseModel):
    contacts: List[ContactModel]
    q: Optional[str] = None
    count: int
