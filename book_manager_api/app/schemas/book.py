"""
Pydantic models for book data.

``BookBase`` carries the three writable fields and is used as the body
of create and update requests.  ``BookRead`` adds the checkout flag,
which is serialized as ``checkedOut`` to match the original wire
format.  A ``checkedOut`` key sent in a request body is ignored: new
books always start in stock and updates never touch the flag.
"""

from pydantic import BaseModel, Field

from book_manager_api.app.models.book import Book, BookFields


class BookBase(BaseModel):
    isbn: int = Field(..., examples=[9780441013593])
    title: str = Field(..., examples=["Dune"])
    author: str = Field(..., examples=["Frank Herbert"])

    def to_fields(self) -> BookFields:
        return BookFields(isbn=self.isbn, title=self.title, author=self.author)

    def to_book(self) -> Book:
        return Book.from_fields(self.to_fields())


class BookCreate(BookBase):
    """Schema for creating a book."""
    pass


class BookUpdate(BookBase):
    """Schema for overwriting a book.

    All three fields are required; the update replaces them as a whole.
    """
    pass


class BookRead(BookBase):
    """Schema for reading a book from the API."""

    checked_out: bool = Field(False, alias="checkedOut")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }

    @classmethod
    def from_book(cls, book: Book) -> "BookRead":
        return cls.model_validate(book)
