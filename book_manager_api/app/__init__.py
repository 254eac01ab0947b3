"""
Application package initializer.

The project is organised into small layers: ``models`` holds the
domain record, ``repositories`` the in‑memory store that owns every
record, ``services`` the logic built on top of the store, ``schemas``
the Pydantic payloads and ``api`` the versioned HTTP routes that tie
them together.
"""

from .main import app  # noqa: F401
