"""
In‑memory repositories.

A repository owns the authoritative collection for its domain and is
the only code allowed to add, replace or remove records in it.  One
instance is created per application; there is no module‑level store.
"""

from .book_repository import BookRepository  # noqa: F401
