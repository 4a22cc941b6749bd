"""Sample address book loaded into an empty store."""
from __future__ import annotations

from typing import Any, Dict, List

SEED_CONTACTS: List[Dict[str, Any]] = [
    {
        "first": "Alma",
        "last": "Ruiz",
        "avatar": "https://placecats.com/200/200",
        "twitter": "@almaruiz",
        "notes": "Organizes the spring meetup.",
        "favorite": True,
    },
    {
        "first": "Albert",
        "last": "Nakamura",
        "twitter": "@anakamura",
    },
    {
        "first": "Priya",
        "last": "Desai",
        "avatar": "https://placecats.com/201/201",
        "notes": "Prefers email over calls.",
    },
    {
        "first": "Tomasz",
        "last": "Kowalski",
        "twitter": "@tkowalski",
    },
    {
        "first": "Grace",
        "last": "Okafor",
        "favorite": True,
    },
    {
        "first": "Mary Ann",
        "last": "Lindqvist",
        "notes": "Met at the library fundraiser.",
    },
    {
        "first": "Diego",
        "last": "Alvarez",
    },
]
