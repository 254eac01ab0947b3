"""
Book endpoints for API v1.

These routes expose the book collection: listing (all, in stock,
checked out), lookups by ISBN, creation, updates of the first or of
every book with an ISBN, the checkout toggle and deletions.  ISBNs are
not unique, so single‑book routes act on the first match in store
order.

Create and update routes accept the new values either as a JSON body
or as the ``isbn``, ``title`` and ``author`` query parameters.  When
all three query parameters are present they win over the body.  A
body that is sent must still be valid on its own: it is checked before
the handler runs, so a malformed body answers HTTP 400 even next to
complete query parameters.

Routes with a fixed path (``/checkedOut``, ``/deleteAll``...) are
declared before the ``/{isbn}`` routes sharing their method so they
are matched first.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, Response, status

from book_manager_api.app.api.deps import get_book_service
from book_manager_api.app.models.book import BookFields
from book_manager_api.app.schemas.book import BookBase, BookCreate, BookRead, BookUpdate
from book_manager_api.app.services.book_service import BookService

router = APIRouter()

BOOK_NOT_FOUND = "Book not found"
MISSING_FIELDS = "Provide a JSON body or the isbn, title and author query parameters"


def _resolve_fields(
    book_in: Optional[BookBase],
    isbn: Optional[int],
    title: Optional[str],
    author: Optional[str],
) -> BookFields:
    """Pick the new field values from the query string or the body."""
    if isbn is not None and title is not None and author is not None:
        return BookFields(isbn=isbn, title=title, author=author)
    if book_in is not None:
        return book_in.to_fields()
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS)


# ----------------------------------------------------------------------
# Listing and lookups
# ----------------------------------------------------------------------
@router.get("/", response_model=List[BookRead])
async def list_books(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    """Return every book in the collection, in insertion order."""
    return [BookRead.from_book(book) for book in service.list_books()]


@router.get("/checkedOut", response_model=List[BookRead])
async def list_checked_out_books(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    """Return the books that are currently checked out."""
    return [BookRead.from_book(book) for book in service.books_checked_out()]


@router.get("/inStock", response_model=List[BookRead])
async def list_books_in_stock(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    """Return the books that are currently in stock."""
    return [BookRead.from_book(book) for book in service.books_in_stock()]


@router.get("/allBooks/{isbn}", response_model=List[BookRead])
async def find_all_books_by_isbn(
    isbn: int = Path(..., description="ISBN shared by the books to return"),
    service: BookService = Depends(get_book_service),
) -> List[BookRead]:
    """Return every book with ``isbn``; an empty list if there are none."""
    return [BookRead.from_book(book) for book in service.find_all_books(isbn)]


@router.get("/{isbn}", response_model=BookRead)
async def find_book_by_isbn(
    isbn: int = Path(..., description="ISBN of the book to return"),
    service: BookService = Depends(get_book_service),
) -> BookRead:
    """Return the first book with ``isbn``, or HTTP 404."""
    book = service.find_book(isbn)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)
    return BookRead.from_book(book)


# ----------------------------------------------------------------------
# Creation
# ----------------------------------------------------------------------
@router.post("/", response_model=BookRead, status_code=status.HTTP_201_CREATED)
async def create_book(
    book_in: Optional[BookCreate] = Body(None),
    isbn: Optional[int] = Query(None),
    title: Optional[str] = Query(None),
    author: Optional[str] = Query(None),
    service: BookService = Depends(get_book_service),
) -> BookRead:
    """Add a book.  The new book always starts in stock."""
    if isbn is not None and title is not None and author is not None:
        book = service.create_book(isbn, title, author)
    elif book_in is not None:
        book = service.add_book(book_in.to_book())
    else:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS)
    return BookRead.from_book(book)


# ----------------------------------------------------------------------
# Updates
# ----------------------------------------------------------------------
@router.put("/updateAll/{isbn}", status_code=status.HTTP_204_NO_CONTENT)
async def update_all_books(
    isbn: int = Path(..., description="ISBN shared by the books to update"),
    book_in: Optional[BookUpdate] = Body(None),
    new_isbn: Optional[int] = Query(None, alias="isbn"),
    title: Optional[str] = Query(None),
    author: Optional[str] = Query(None),
    service: BookService = Depends(get_book_service),
) -> None:
    """Overwrite every book with ``isbn``; HTTP 404 if there are none."""
    fields = _resolve_fields(book_in, new_isbn, title, author)
    if not service.update_all_books(isbn, fields):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)
    return None


@router.put("/{isbn}")
async def update_book(
    isbn: int = Path(..., description="ISBN of the book to update"),
    book_in: Optional[BookUpdate] = Body(None),
    checked_out: Optional[bool] = Query(None, alias="status"),
    new_isbn: Optional[int] = Query(None, alias="isbn"),
    title: Optional[str] = Query(None),
    author: Optional[str] = Query(None),
    service: BookService = Depends(get_book_service),
) -> Response:
    """Update the first book with ``isbn``.

    With a ``status`` query parameter this sets the checkout flag and
    answers HTTP 200.  Otherwise the ISBN, title and author are
    overwritten and the answer is HTTP 204.  Either way a missing book
    gives HTTP 404.
    """
    if checked_out is not None:
        if not service.set_checked_out(isbn, checked_out):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)
        return Response(status_code=status.HTTP_200_OK)

    fields = _resolve_fields(book_in, new_isbn, title, author)
    if not service.update_book(isbn, fields):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ----------------------------------------------------------------------
# Deletion
# ----------------------------------------------------------------------
@router.delete("/deleteAll")
async def delete_all(service: BookService = Depends(get_book_service)) -> Response:
    """Empty the collection.  Always succeeds."""
    service.delete_all()
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/deleteAll/{isbn}")
async def delete_all_books_by_isbn(
    isbn: int = Path(..., description="ISBN shared by the books to delete"),
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete every book with ``isbn``; HTTP 404 if there were none."""
    if not service.delete_all_books(isbn):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{isbn}")
async def delete_book(
    isbn: int = Path(..., description="ISBN of the book to delete"),
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete the first book with ``isbn``; HTTP 404 if there is none."""
    if not service.delete_book(isbn):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BOOK_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)
