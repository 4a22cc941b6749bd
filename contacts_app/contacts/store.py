"""Persistent contact storage: Firestore with local JSON file fallback."""
from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional

from ..config import settings_from_env
from ..firestore import get_firestore_client
from .matching import filter_contacts
from .models import EDITABLE_FIELDS, Contact, ContactNotFound
from .seed import SEED_CONTACTS

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _db() -> Optional[Any]:
    """Return a Firestore client, or None when the file backend should be used."""
    settings = settings_from_env()
    if settings.force_file:
        return None
    try:
        return get_firestore_client()
    except Exception as exc:
        if settings.store == "firestore":
            raise
        logger.warning("Firestore unavailable, using local contact files: %s", exc)
        return None


def _with_fallback(operation: str, firestore_fn, file_fn, *args):
    db = _db()
    if db is None:
        return file_fn(*args)
    try:
        return firestore_fn(db, *args)
    except Exception as exc:
        logger.warning("Firestore %s failed, falling back to local files: %s", operation, exc)
        return file_fn(*args)


def list_contacts(query: Optional[str] = None) -> List[Contact]:
    """List contacts matching ``query`` (all when absent), ordered by last name."""
    contacts = _with_fallback("list", _list_from_firestore, _list_from_files)
    return filter_contacts(contacts, query)


def get_contact(contact_id: str) -> Optional[Contact]:
    """Get a contact by ID."""
    return _with_fallback("read", _load_from_firestore, _load_from_file, contact_id)


def create_empty_contact() -> Contact:
    """Create a contact with no fields filled in."""
    contact = Contact(id=uuid.uuid4().hex[:8], created_at=_now())
    _save(contact)
    logger.info("Created blank contact %s", contact.id)
    return contact


def update_contact(contact_id: str, **fields: Any) -> Contact:
    """Overwrite the editable fields given in ``fields``.

    Empty strings are stored as None so a cleared input removes the value.

    Raises:
        ContactNotFound: if the contact does not exist.
        TypeError: for a field that is not editable.
    """
    contact = get_contact(contact_id)
    if contact is None:
        raise ContactNotFound(contact_id)

    for name, value in fields.items():
        if name not in EDITABLE_FIELDS:
            raise TypeError(f"Field '{name}' cannot be edited.")
        if isinstance(value, str):
            value = value.strip() or None
        setattr(contact, name, value)

    _save(contact)
    return contact


def set_favorite(contact_id: str, favorite: bool) -> Contact:
    """Mark or unmark a contact as favorite.

    Raises:
        ContactNotFound: if the contact does not exist.
    """
    contact = get_contact(contact_id)
    if contact is None:
        raise ContactNotFound(contact_id)
    contact.favorite = favorite
    _save(contact)
    return contact


def delete_contact(contact_id: str) -> bool:
    """Delete a contact by ID.

    Returns:
        True if deleted, False if not found
    """
    deleted = _with_fallback("delete", _delete_from_firestore, _delete_from_file, contact_id)
    if deleted:
        logger.info("Deleted contact %s", contact_id)
    return deleted


def seed_contacts() -> int:
    """Insert the sample contacts when the store is empty.

    Returns:
        Number of contacts inserted.
    """
    if list_contacts():
        return 0
    for data in SEED_CONTACTS:
        contact = Contact.from_dict(data)
        contact.id = contact.id or uuid.uuid4().hex[:8]
        contact.created_at = contact.created_at or _now()
        _save(contact)
    logger.info("Seeded %d sample contacts", len(SEED_CONTACTS))
    return len(SEED_CONTACTS)


def _save(contact: Contact) -> None:
    _with_fallback("write", _save_to_firestore, _save_to_file, contact)


# --- Firestore helpers ---

def _collection(db: Any) -> Any:
    return db.collection(settings_from_env().collection)


def _save_to_firestore(db: Any, contact: Contact) -> None:
    _collection(db).document(contact.id).set(contact.to_dict())


def _load_from_firestore(db: Any, contact_id: str) -> Optional[Contact]:
    doc = _collection(db).document(contact_id).get()
    if doc.exists:
        return Contact.from_dict(doc.to_dict())
    return None


def _list_from_firestore(db: Any) -> List[Contact]:
    return [Contact.from_dict(doc.to_dict()) for doc in _collection(db).stream()]


def _delete_from_firestore(db: Any, contact_id: str) -> bool:
    doc_ref = _collection(db).document(contact_id)
    if doc_ref.get().exists:
        doc_ref.delete()
        return True
    return False


# --- File helpers ---

def _contacts_dir() -> Path:
    return settings_from_env().contacts_dir


def _contact_file(contact_id: str) -> Path:
    directory = _contacts_dir()
    directory.mkdir(parents=True, exist_ok=True)
    safe_id = contact_id.replace("/", "_").replace("\\", "_")
    return directory / f"{safe_id}.json"


def _save_to_file(contact: Contact) -> None:
    with open(_contact_file(contact.id), "w", encoding="utf-8") as f:
        json.dump(contact.to_dict(), f, indent=2)


def _load_from_file(contact_id: str) -> Optional[Contact]:
    filepath = _contact_file(contact_id)
    if not filepath.exists():
        return None
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return Contact.from_dict(json.load(f))
    except (json.JSONDecodeError, IOError):
        logger.warning("Unreadable contact file %s", filepath)
        return None


def _list_from_files() -> List[Contact]:
    directory = _contacts_dir()
    if not directory.exists():
        return []

    contacts = []
    for filepath in directory.glob("*.json"):
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                contacts.append(Contact.from_dict(json.load(f)))
        except (json.JSONDecodeError, IOError):
            continue
    return contacts


def _delete_from_file(contact_id: str) -> bool:
    filepath = _contact_file(contact_id)
    if filepath.exists():
        filepath.unlink()
        return True
    return False
