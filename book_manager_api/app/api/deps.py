"""
FastAPI dependencies shared by the routes.

The application factory stores one ``BookService`` on ``app.state``;
routes obtain it through ``get_book_service`` rather than importing a
global, so every application instance has its own collection.
"""

from fastapi import Request

from book_manager_api.app.services.book_service import BookService


def get_book_service(request: Request) -> BookService:
    return request.app.state.book_service
