"""Contact records and their storage."""
from .models import Contact, ContactNotFound
from .matching import matches_query, sort_contacts
from .store import (
    create_empty_contact,
    delete_contact,
    get_contact,
    list_contacts,
    seed_contacts,
    set_favorite,
    update_contact,
)

__all__ = [
    # Records
    "Contact",
    "ContactNotFound",
    # Filtering
    "matches_query",
    "sort_contacts",
    # Storage
    "create_empty_contact",
    "delete_contact",
    "get_contact",
    "list_contacts",
    "seed_contacts",
    "set_favorite",
    "update_contact",
]
