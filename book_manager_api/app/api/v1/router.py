"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified prefix.
The book routes keep the ``/bookmanager`` path of the original
service so existing clients only need the version prefix added.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

router.include_router(books.router, prefix="/bookmanager", tags=["books"])
