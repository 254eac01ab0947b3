import pytest
from fastapi.testclient import TestClient

from book_manager_api.app.main import create_app
from book_manager_api.app.repositories.book_repository import BookRepository
from book_manager_api.app.services.book_service import BookService


@pytest.fixture
def repository():
    return BookRepository()


@pytest.fixture
def service(repository):
    return BookService(repository)


@pytest.fixture
def client(repository):
    # Each test gets its own app and therefore its own empty collection.
    app = create_app(repository)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded(repository):
    """Two copies of Dune under one ISBN plus an unrelated book."""
    repository.create(111, "Dune", "Herbert")
    repository.create(111, "Dune2", "Herbert2")
    repository.create(555, "Emma", "Austen")
    return repository
