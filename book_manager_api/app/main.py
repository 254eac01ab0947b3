"""
Main entrypoint for the Book Manager API.

This module assembles the FastAPI application, sets up logging and
error handlers, and includes versioned routers.  ``create_app`` builds
a fully configured app with its own, empty book collection; the
module‑level ``app`` is what uvicorn serves, e.g.::

    uvicorn book_manager_api.app.main:app --reload

The application title, version and route prefix come from
``Settings`` in ``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.error_handlers import register_error_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .repositories.book_repository import BookRepository
from .services.book_service import BookService


def create_app(repository: Optional[BookRepository] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[BookRepository]
        Store backing the application.  A new, empty store is created
        when omitted, so two apps never share their books by accident.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    register_error_handlers(app)

    app.state.book_service = BookService(repository if repository is not None else BookRepository())

    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("%s %s ready under %s", settings.project_name, settings.api_version, settings.api_prefix)
    return app


# Created at import time so that uvicorn can discover it without
# calling create_app manually.
app = create_app()
