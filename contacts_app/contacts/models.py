"""Contact record type."""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

EDITABLE_FIELDS = ("first", "last", "avatar", "twitter", "notes")


class ContactNotFound(LookupError):
    """Raised when a contact id does not exist in the store."""

    def __init__(self, contact_id: str) -> None:
        super().__init__(f"Contact {contact_id} not found.")
        self.contact_id = contact_id


@dataclass
class Contact:
    """A single entry in the address book."""
    id: str
    first: Optional[str] = None
    last: Optional[str] = None
    avatar: Optional[str] = None
    twitter: Optional[str] = None
    notes: Optional[str] = None
    favorite: bool = False
    created_at: str = ""

    @property
    def has_name(self) -> bool:
        return bool(self.first or self.last)

    @property
    def display_name(self) -> str:
        """Full name, or "No Name" for a blank contact."""
        if not self.has_name:
            return "No Name"
        return " ".join(part for part in (self.first, self.last) if part)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_api_dict(self) -> Dict[str, Any]:
        """Return camelCase dict for API responses."""
        return {
            "id": self.id,
            "first": self.first,
            "last": self.last,
            "avatar": self.avatar,
            "twitter": self.twitter,
            "notes": self.notes,
            "favorite": self.favorite,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Contact:
        return cls(
            id=data.get("id", ""),
            first=data.get("first"),
            last=data.get("last"),
            avatar=data.get("avatar"),
            twitter=data.get("twitter"),
            notes=data.get("notes"),
            favorite=bool(data.get("favorite", False)),
            created_at=data.get("created_at", ""),
        )
