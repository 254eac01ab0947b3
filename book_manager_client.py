"""Book Manager API client.

This module defines a small client wrapper around the Book Manager
REST API.  It uses the ``requests`` library internally and exposes one
method per route:

* :meth:`list_books`, :meth:`list_checked_out`, :meth:`list_in_stock`
* :meth:`get_book` – first book with an ISBN.
* :meth:`get_all_books` – every book with an ISBN.
* :meth:`create_book`
* :meth:`update_book` / :meth:`update_all_books`
* :meth:`set_checked_out`
* :meth:`delete_book` / :meth:`delete_all_books_by_isbn` / :meth:`delete_all`

Methods never raise on HTTP or network failures.  Read operations
return ``(data, error)`` and operations without a response body return
``(success, error)``; ``error`` is ``None`` on success and otherwise a
dictionary with ``status_code`` and ``message`` keys.  A missing book
is reported as an error with ``status_code`` 404.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BookManagerAPI:
    """Client for interacting with the Book Manager API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            api_prefix: Version prefix the server mounts its routes under.
            timeout: Timeout in seconds applied to every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.books_path = f"{api_prefix.rstrip('/')}/bookmanager"
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against the book routes.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the book routes (e.g. ``/inStock``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` holds the parsed JSON
            body, or ``None`` for an empty body.
        """
        url = f"{self.base_url}{self.books_path}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            if status == 404:
                logger.info("Book not found at %s", url)
            else:
                logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _command(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[bool, Optional[Error]]:
        _, error = self._request(method, path, params=params, json_body=json_body)
        return error is None, error

    @staticmethod
    def _fields(isbn: int, title: str, author: str) -> Dict[str, Any]:
        return {"isbn": isbn, "title": title, "author": author}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list_books(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every book, in insertion order."""
        data, error = self._request("GET", "/")
        return (data or []), error

    def list_checked_out(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/checkedOut")
        return (data or []), error

    def list_in_stock(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/inStock")
        return (data or []), error

    def get_book(self, isbn: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve the first book with ``isbn``."""
        return self._request("GET", f"/{isbn}")

    def get_all_books(self, isbn: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every book with ``isbn``; empty when there are none."""
        data, error = self._request("GET", f"/allBooks/{isbn}")
        return (data or []), error

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def create_book(
        self, isbn: int, title: str, author: str, *, as_query: bool = False
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a book and return it as stored by the server.

        Args:
            as_query: Send the fields as query parameters instead of a
                JSON body.
        """
        fields = self._fields(isbn, title, author)
        if as_query:
            return self._request("POST", "/", params=fields)
        return self._request("POST", "/", json_body=fields)

    def update_book(self, isbn: int, new_isbn: int, title: str, author: str) -> Tuple[bool, Optional[Error]]:
        """Overwrite the first book with ``isbn``."""
        return self._command("PUT", f"/{isbn}", json_body=self._fields(new_isbn, title, author))

    def update_all_books(self, isbn: int, new_isbn: int, title: str, author: str) -> Tuple[bool, Optional[Error]]:
        """Overwrite every book with ``isbn``."""
        return self._command("PUT", f"/updateAll/{isbn}", json_body=self._fields(new_isbn, title, author))

    def set_checked_out(self, isbn: int, status: bool) -> Tuple[bool, Optional[Error]]:
        """Check the first book with ``isbn`` out (``True``) or back in."""
        return self._command("PUT", f"/{isbn}", params={"status": "true" if status else "false"})

    def delete_book(self, isbn: int) -> Tuple[bool, Optional[Error]]:
        return self._command("DELETE", f"/{isbn}")

    def delete_all_books_by_isbn(self, isbn: int) -> Tuple[bool, Optional[Error]]:
        return self._command("DELETE", f"/deleteAll/{isbn}")

    def delete_all(self) -> Tuple[bool, Optional[Error]]:
        return self._command("DELETE", "/deleteAll")
