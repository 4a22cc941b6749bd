"""FastAPI service for the contacts address book."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.staticfiles import StaticFiles

from api.dependencies import STATIC_DIR, get_settings
from api.models import ContactListResponse, ContactModel
from api.routers import contacts_router, root_router
from contacts_app import __version__
from contacts_app.contacts import list_contacts, seed_contacts
from contacts_app.logging import configure_logging
from contacts_app.navigation import normalize_query

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.seed:
        inserted = seed_contacts()
        if inserted:
            logger.info("Loaded %d sample contacts (%s)", inserted, settings.environment)
    yield


app = FastAPI(
    title="Contacts",
    version=__version__,
    description="Server-rendered address book with live search.",
    lifespan=lifespan,
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.include_router(root_router)
app.include_router(contacts_router, prefix="/contacts", tags=["contacts"])


@app.get("/health")
def health_check() -> dict:
    """Health check endpoint with environment name."""
    settings = get_settings()
    return {
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
        "store": settings.store,
    }


@app.get("/api/contacts", response_model=ContactListResponse, response_model_by_alias=True)
def api_list_contacts(q: Optional[str] = Query(None)) -> ContactListResponse:
    query = normalize_query(q)
    contacts = [ContactModel(**c.to_api_dict()) for c in list_contacts(query)]
    return ContactListResponse(contacts=contacts, q=query, count=len(contacts))
