"""
Domain models.

These are plain dataclasses owned by the repository layer.  They are
kept apart from the Pydantic schemas so the HTTP representation can
change without touching the store.
"""

from .book import Book, BookFields  # noqa: F401
