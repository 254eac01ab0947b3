"""
Book record held by the in‑memory store.

A ``Book`` is identified by its ISBN, but the ISBN is not unique: the
collection may hold several records with the same number and every
single‑record operation resolves to the first one in store order.
Equality compares ``isbn``, ``title`` and ``author`` only; the
checkout flag is state, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BookFields:
    """The overwritable part of a book, used as the payload of updates."""

    isbn: int
    title: str
    author: str


@dataclass
class Book:
    """A single book in the collection."""

    isbn: int
    title: str
    author: str
    checked_out: bool = field(default=False, compare=False)

    @classmethod
    def from_fields(cls, fields: BookFields) -> "Book":
        """Build a fresh, in‑stock record from a field set."""
        return cls(isbn=fields.isbn, title=fields.title, author=fields.author)

    def apply(self, fields: BookFields) -> None:
        """Overwrite ``isbn``, ``title`` and ``author`` in place.

        The checkout flag is left untouched.
        """
        self.isbn = fields.isbn
        self.title = fields.title
        self.author = fields.author

    def __str__(self) -> str:
        return f"  ISBN: {self.isbn}\n Title: {self.title}\n Author: {self.author}\n"
