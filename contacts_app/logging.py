"""Logging setup shared by the web app and the CLI."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Install a basic root handler once; later calls only adjust the level."""

    global _configured
    root = logging.getLogger()
    if not _configured:
        logging.basicConfig(format=LOG_FORMAT)
        _configured = True
    root.setLevel(level)
