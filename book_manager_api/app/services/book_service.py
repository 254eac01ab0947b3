"""
Service layer for books.

``BookService`` is a thin layer over ``BookRepository``.  Most methods
delegate directly; the service adds the two derived views (books in
stock and books checked out) and the checkout toggle.  The service
keeps no state besides its repository, so several services may share
one store.

Not‑found outcomes are reported as ``None`` or ``False`` and logged at
debug level; they never raise.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from book_manager_api.app.models.book import Book, BookFields
from book_manager_api.app.repositories.book_repository import BookRepository


logger = logging.getLogger(__name__)


class BookService:
    """Business operations for the book collection."""

    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> BookRepository:
        return self._repository

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------
    def add_book(self, book: Book) -> Book:
        created = self._repository.add(book)
        logger.info("Created book %s (%s)", created.isbn, created.title)
        return created

    def create_book(self, isbn: int, title: str, author: str) -> Book:
        created = self._repository.create(isbn, title, author)
        logger.info("Created book %s (%s)", created.isbn, created.title)
        return created

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list_books(self) -> List[Book]:
        return self._repository.list_all()

    def books_in_stock(self) -> List[Book]:
        """Return books that are not checked out, in store order."""
        return [book for book in self._repository.list_all() if not book.checked_out]

    def books_checked_out(self) -> List[Book]:
        """Return books that are checked out, in store order."""
        return [book for book in self._repository.list_all() if book.checked_out]

    def find_book(self, isbn: int) -> Optional[Book]:
        book = self._repository.find_first_by_isbn(isbn)
        if book is None:
            logger.debug("No book with ISBN %s", isbn)
        return book

    def find_all_books(self, isbn: int) -> List[Book]:
        return self._repository.find_all_by_isbn(isbn)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------
    def update_book(self, isbn: int, fields: BookFields) -> bool:
        updated = self._repository.update_first_by_isbn(isbn, fields)
        if updated:
            logger.info("Updated first book with ISBN %s", isbn)
        else:
            logger.debug("Update skipped, no book with ISBN %s", isbn)
        return updated

    def update_all_books(self, isbn: int, fields: BookFields) -> bool:
        updated = self._repository.update_all_by_isbn(isbn, fields)
        if updated:
            logger.info("Updated all books with ISBN %s", isbn)
        else:
            logger.debug("Update skipped, no book with ISBN %s", isbn)
        return updated

    def set_checked_out(self, isbn: int, status: bool) -> bool:
        """Set the checkout flag of the first book with ``isbn``.

        The flag is written directly on the stored record rather than
        through an update, since ``title``, ``author`` and ``isbn`` are
        not involved.  Returns ``False`` when no book matches; no record
        is created in that case.
        """
        with self._repository.lock:
            book = self._repository.find_first_by_isbn(isbn)
            if book is None:
                logger.debug("Checkout skipped, no book with ISBN %s", isbn)
                return False
            book.checked_out = status
        logger.info("Book %s is now %s", isbn, "checked out" if status else "in stock")
        return True

    def check_out_book(self, isbn: int) -> bool:
        return self.set_checked_out(isbn, True)

    def return_book(self, isbn: int) -> bool:
        return self.set_checked_out(isbn, False)

    # ------------------------------------------------------------------
    # Deletion
    # ------------------------------------------------------------------
    def delete_book(self, isbn: int) -> bool:
        deleted = self._repository.delete_first_by_isbn(isbn)
        if deleted:
            logger.info("Deleted first book with ISBN %s", isbn)
        return deleted

    def delete_all_books(self, isbn: int) -> bool:
        deleted = self._repository.delete_all_by_isbn(isbn)
        if deleted:
            logger.info("Deleted all books with ISBN %s", isbn)
        return deleted

    def delete_all(self) -> None:
        self._repository.clear()
        logger.info("Cleared the book collection")
