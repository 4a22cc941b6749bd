"""Name matching and ordering for the contact list.

A contact matches a query when its first or last name ranks at least
``Rank.MATCHES`` against it. Ranks, best first:

- CASE_SENSITIVE_EQUAL: identical strings
- EQUAL: identical ignoring case
- STARTS_WITH: name starts with the query
- WORD_STARTS_WITH: some word of the name starts with the query
- CONTAINS: query appears anywhere in the name
- ACRONYM: query equals the initials of the name's words
- MATCHES: query characters appear in order within the name

Whitespace around the query is not significant. The ranks only decide
membership; the list itself is always ordered by last name then creation
time.
"""
from __future__ import annotations

import re
from enum import IntEnum
from typing import Iterable, List, Optional

from .models import Contact

WORD_SPLIT = re.compile(r"[\s\-_]+")


class Rank(IntEnum):
    NO_MATCH = 0
    MATCHES = 1
    ACRONYM = 2
    CONTAINS = 3
    WORD_STARTS_WITH = 4
    STARTS_WITH = 5
    EQUAL = 6
    CASE_SENSITIVE_EQUAL = 7


def _acronym(value: str) -> str:
    return "".join(word[0] for word in WORD_SPLIT.split(value) if word)


def _in_order(value: str, query: str) -> bool:
    position = 0
    for char in query:
        position = value.find(char, position)
        if position < 0:
            return False
        position += 1
    return True


def rank_value(value: Optional[str], query: str) -> Rank:
    """Rank how well a single name field matches ``query``."""
    if not value or not query:
        return Rank.NO_MATCH
    if value == query:
        return Rank.CASE_SENSITIVE_EQUAL

    lowered = value.lower()
    needle = query.lower()
    if lowered == needle:
        return Rank.EQUAL
    if lowered.startswith(needle):
        return Rank.STARTS_WITH
    if any(word.startswith(needle) for word in WORD_SPLIT.split(lowered) if word):
        return Rank.WORD_STARTS_WITH
    if needle in lowered:
        return Rank.CONTAINS
    if len(needle) > 1 and _acronym(lowered) == needle:
        return Rank.ACRONYM
    if _in_order(lowered, needle):
        return Rank.MATCHES
    return Rank.NO_MATCH


def rank_contact(contact: Contact, query: str) -> Rank:
    return max(rank_value(contact.first, query), rank_value(contact.last, query))


def matches_query(contact: Contact, query: Optional[str]) -> bool:
    """True when ``query`` is absent/blank or matches the contact's names."""
    if query is None or not query.strip():
        return True
    return rank_contact(contact, query.strip()) >= Rank.MATCHES


def sort_contacts(contacts: Iterable[Contact]) -> List[Contact]:
    """Order contacts by last name, then creation time."""
    return sorted(contacts, key=lambda c: (c.last or "", c.created_at))


def filter_contacts(contacts: Iterable[Contact], query: Optional[str]) -> List[Contact]:
    return sort_contacts(c for c in contacts if matches_query(c, query))
