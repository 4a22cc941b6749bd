"""Contacts application core: storage, search navigation and configuration."""

__version__ = "0.1.0"
