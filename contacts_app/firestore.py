"""Shared Firestore client helper for the contacts store."""
from __future__ import annotations

_firestore_client = None


def get_firestore_client():
    """Return a cached Firestore client instance.

    Raises:
        RuntimeError: if firebase-admin is unavailable or no app can be initialized.
    """

    global _firestore_client
    if _firestore_client is not None:
        return _firestore_client

    try:
        import firebase_admin
        from firebase_admin import firestore
    except ModuleNotFoundError as exc:  # pragma: no cover
        raise RuntimeError(
            "firebase-admin is required for the Firestore contacts store. "
            "Set CONTACTS_STORE=file to use local JSON files instead."
        ) from exc

    try:
        if not firebase_admin._apps:
            firebase_admin.initialize_app()
        _firestore_client = firestore.client()
    except ValueError as exc:  # pragma: no cover - missing credentials
        raise RuntimeError(f"Firestore is not configured: {exc}") from exc
    return _firestore_client


def reset_firestore_client() -> None:
    """Drop the cached client (tests swap in fakes through ``_firestore_client``)."""

    global _firestore_client
    _firestore_client = None
