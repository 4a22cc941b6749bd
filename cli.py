#!/usr/bin/env python3
"""Contacts CLI."""
from __future__ import annotations

import argparse
import sys

from contacts_app.config import ConfigError, load_settings
from contacts_app.contacts import create_empty_contact, list_contacts
from contacts_app.logging import configure_logging
from contacts_app.navigation import MemoryRouter, SearchSyncController


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contacts",
        description="Address book with a server-rendered web UI.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the web app under uvicorn.",
    )
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change.",
    )

    list_parser = subparsers.add_parser(
        "list",
        help="List contacts, optionally filtered by a search term.",
    )
    list_parser.add_argument(
        "--query",
        "-q",
        help="Only show contacts whose first or last name matches.",
    )

    subparsers.add_parser(
        "create",
        help="Create a blank contact and print its ID.",
    )

    replay_parser = subparsers.add_parser(
        "replay",
        help="Type each value into the search box and show the resulting history.",
    )
    replay_parser.add_argument(
        "values",
        nargs="+",
        help="Successive search field values; use BACK or FORWARD to move through history.",
    )

    return parser


def _cmd_serve(host: str, port: int, reload: bool) -> int:
    import uvicorn

    uvicorn.run("api.main:app", host=host, port=port, reload=reload)
    return 0


def _cmd_list(query: str | None) -> int:
    contacts = list_contacts(query)
    if not contacts:
        print("No contacts")
        return 0
    for contact in contacts:
        star = " ★" if contact.favorite else ""
        print(f"{contact.id}  {contact.display_name}{star}")
    return 0


def _cmd_create() -> int:
    contact = create_empty_contact()
    print(contact.id)
    return 0


def _cmd_replay(values: list[str]) -> int:
    router = MemoryRouter("/")
    controller = SearchSyncController(router)
    controller.mount()

    for value in values:
        if value.upper() in ("BACK", "FORWARD"):
            moved = router.back() if value.upper() == "BACK" else router.forward()
            action = value.lower() if moved else f"{value.lower()} (no entry)"
        else:
            pending = controller.user_input(value)
            action = pending.history_mode.value
            router.commit()
        print(
            f"{action:<8} {router.location.url:<20} field={controller.field.value!r} "
            f"history={router.index + 1}/{len(router.entries)}"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)

    if args.command == "serve":
        return _cmd_serve(args.host, args.port, args.reload)
    if args.command == "list":
        return _cmd_list(args.query)
    if args.command == "create":
        return _cmd_create()
    if args.command == "replay":
        return _cmd_replay(args.values)

    parser.error(f"Unknown command {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
