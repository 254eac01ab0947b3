"""
In‑memory store for books.

Records live in a plain list in insertion order.  ISBNs are not unique,
so every operation that acts on a single record picks the first match
in current list order.  Lookups that find nothing return ``None`` (or
an empty list) and mutations that find nothing return ``False``; a
missing book is an ordinary outcome, not an error.

All operations run under one re‑entrant lock exposed as ``lock``.
Callers that need to read a record and then change it, such as the
checkout toggle in ``BookService``, hold the same lock across both
steps.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from book_manager_api.app.models.book import Book, BookFields


logger = logging.getLogger(__name__)


class BookRepository:
    """Ordered, non‑unique collection of ``Book`` records."""

    def __init__(self) -> None:
        self._books: List[Book] = []
        self.lock = threading.RLock()

    def __len__(self) -> int:
        with self.lock:
            return len(self._books)

    def add(self, book: Book) -> Book:
        """Append a copy of ``book`` and return the stored record.

        The stored record always starts in stock, whatever the checkout
        flag of the argument.
        """
        return self.create(book.isbn, book.title, book.author)

    def create(self, isbn: int, title: str, author: str) -> Book:
        """Append a new in‑stock record built from discrete fields."""
        book = Book(isbn=isbn, title=title, author=author)
        with self.lock:
            self._books.append(book)
        logger.debug("Stored book %s (%s)", isbn, title)
        return book

    def list_all(self) -> List[Book]:
        """Return a snapshot of every record in store order."""
        with self.lock:
            return list(self._books)

    def find_first_by_isbn(self, isbn: int) -> Optional[Book]:
        with self.lock:
            index = self._first_index(isbn)
            return None if index is None else self._books[index]

    def find_all_by_isbn(self, isbn: int) -> List[Book]:
        with self.lock:
            return [book for book in self._books if book.isbn == isbn]

    def update_first_by_isbn(self, isbn: int, fields: BookFields) -> bool:
        """Overwrite the first record with ``isbn``.

        Returns ``False`` and changes nothing when no record matches.
        """
        with self.lock:
            book = self.find_first_by_isbn(isbn)
            if book is None:
                return False
            book.apply(fields)
            return True

    def update_all_by_isbn(self, isbn: int, fields: BookFields) -> bool:
        """Overwrite every record with ``isbn``.

        The matches are collected before any of them is rewritten, so a
        new ISBN equal to the old one cannot cause a record to be
        counted twice.  Returns ``False`` when nothing matched.
        """
        with self.lock:
            matches = self.find_all_by_isbn(isbn)
            if not matches:
                return False
            updated = 0
            for book in matches:
                book.apply(fields)
                updated += 1
            return updated == len(matches)

    def delete_first_by_isbn(self, isbn: int) -> bool:
        with self.lock:
            index = self._first_index(isbn)
            if index is None:
                return False
            del self._books[index]
            return True

    def delete_all_by_isbn(self, isbn: int) -> bool:
        """Remove every record with ``isbn``.

        Returns ``False`` only when no record matched.
        """
        with self.lock:
            kept = [book for book in self._books if book.isbn != isbn]
            if len(kept) == len(self._books):
                return False
            self._books[:] = kept
            return True

    def clear(self) -> None:
        with self.lock:
            self._books.clear()

    def _first_index(self, isbn: int) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book.isbn == isbn:
                return index
        return None
