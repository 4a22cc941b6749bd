"""Page routers.

- root.py: the contact list with search, and blank-contact creation (/)
- contacts.py: contact detail, edit, favorite and delete (/contacts/*)

Usage in main.py:
    from api.routers import root_router, contacts_router

    app.include_router(root_router)
    app.include_router(contacts_router, prefix="/contacts", tags=["contacts"])
"""

from .root import router as root_router
from .contacts import router as contacts_router

__all__ = [
    "root_router",
    "contacts_router",
]
