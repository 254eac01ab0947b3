from book_manager_api.app.core.config import settings

BOOKS_URL = f"{settings.api_prefix}/bookmanager"


def create(client, isbn, title, author):
    response = client.post(f"{BOOKS_URL}/", json={"isbn": isbn, "title": title, "author": author})
    assert response.status_code == 201
    return response.json()


def titles(response):
    return [book["title"] for book in response.json()]


def test_list_empty(client):
    response = client.get(f"{BOOKS_URL}/")
    assert response.status_code == 200
    assert response.json() == []


def test_create_from_body(client):
    body = create(client, 111, "Dune", "Herbert")
    assert body == {"isbn": 111, "title": "Dune", "author": "Herbert", "checkedOut": False}


def test_create_ignores_checked_out_in_body(client):
    response = client.post(
        f"{BOOKS_URL}/",
        json={"isbn": 1, "title": "Dune", "author": "Herbert", "checkedOut": True},
    )
    assert response.status_code == 201
    assert response.json()["checkedOut"] is False


def test_create_from_query(client):
    response = client.post(f"{BOOKS_URL}/", params={"isbn": 42, "title": "Emma", "author": "Austen"})
    assert response.status_code == 201
    assert response.json() == {"isbn": 42, "title": "Emma", "author": "Austen", "checkedOut": False}


def test_create_without_fields_is_rejected(client):
    response = client.post(f"{BOOKS_URL}/", params={"isbn": 42})
    assert response.status_code == 400
    assert client.get(f"{BOOKS_URL}/").json() == []


def test_duplicate_isbn_scenario(client):
    create(client, 111, "Dune", "Herbert")
    create(client, 111, "Dune2", "Herbert2")

    assert titles(client.get(f"{BOOKS_URL}/allBooks/111")) == ["Dune", "Dune2"]
    assert client.get(f"{BOOKS_URL}/111").json()["title"] == "Dune"

    assert client.delete(f"{BOOKS_URL}/111").status_code == 200
    assert titles(client.get(f"{BOOKS_URL}/allBooks/111")) == ["Dune2"]


def test_get_missing_book(client):
    assert client.get(f"{BOOKS_URL}/999").status_code == 404
    response = client.get(f"{BOOKS_URL}/allBooks/999")
    assert response.status_code == 200
    assert response.json() == []


def test_non_numeric_isbn_is_bad_request(client):
    response = client.get(f"{BOOKS_URL}/abc")
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "path.isbn"


def test_update_first_from_body(client):
    create(client, 111, "Dune", "Herbert")
    create(client, 111, "Dune2", "Herbert2")

    response = client.put(f"{BOOKS_URL}/111", json={"isbn": 222, "title": "X", "author": "Y"})
    assert response.status_code == 204
    assert titles(client.get(f"{BOOKS_URL}/")) == ["X", "Dune2"]
    assert client.get(f"{BOOKS_URL}/222").json()["author"] == "Y"


def test_update_first_from_query(client):
    create(client, 111, "Dune", "Herbert")
    response = client.put(f"{BOOKS_URL}/111", params={"isbn": 112, "title": "Dune", "author": "F. Herbert"})
    assert response.status_code == 204
    assert client.get(f"{BOOKS_URL}/112").json()["author"] == "F. Herbert"


def test_update_missing_book(client):
    response = client.put(f"{BOOKS_URL}/111", json={"isbn": 222, "title": "X", "author": "Y"})
    assert response.status_code == 404


def test_update_without_fields_is_rejected(client):
    create(client, 111, "Dune", "Herbert")
    assert client.put(f"{BOOKS_URL}/111").status_code == 400


def test_update_all(client):
    create(client, 111, "Dune", "Herbert")
    create(client, 111, "Dune2", "Herbert2")
    create(client, 555, "Emma", "Austen")

    response = client.put(f"{BOOKS_URL}/updateAll/111", json={"isbn": 333, "title": "X", "author": "Y"})
    assert response.status_code == 204
    assert titles(client.get(f"{BOOKS_URL}/allBooks/333")) == ["X", "X"]
    assert client.get(f"{BOOKS_URL}/allBooks/111").json() == []


def test_update_all_from_query(client):
    create(client, 111, "Dune", "Herbert")
    response = client.put(
        f"{BOOKS_URL}/updateAll/111", params={"isbn": 333, "title": "X", "author": "Y"}
    )
    assert response.status_code == 204
    assert client.get(f"{BOOKS_URL}/333").json()["title"] == "X"


def test_update_all_missing_leaves_store_unchanged(client):
    create(client, 111, "Dune", "Herbert")
    before = client.get(f"{BOOKS_URL}/").json()
    response = client.put(f"{BOOKS_URL}/updateAll/222", json={"isbn": 333, "title": "X", "author": "Y"})
    assert response.status_code == 404
    assert client.get(f"{BOOKS_URL}/").json() == before


def test_checkout_toggle(client):
    create(client, 111, "Dune", "Herbert")
    create(client, 111, "Dune2", "Herbert2")

    response = client.put(f"{BOOKS_URL}/111", params={"status": "true"})
    assert response.status_code == 200
    assert titles(client.get(f"{BOOKS_URL}/checkedOut")) == ["Dune"]
    assert titles(client.get(f"{BOOKS_URL}/inStock")) == ["Dune2"]

    assert client.put(f"{BOOKS_URL}/111", params={"status": "false"}).status_code == 200
    assert client.get(f"{BOOKS_URL}/checkedOut").json() == []


def test_checkout_missing_book_creates_nothing(client):
    response = client.put(f"{BOOKS_URL}/999", params={"status": "true"})
    assert response.status_code == 404
    assert client.get(f"{BOOKS_URL}/").json() == []


def test_update_keeps_checkout_status(client):
    create(client, 111, "Dune", "Herbert")
    client.put(f"{BOOKS_URL}/111", params={"status": "true"})
    client.put(f"{BOOKS_URL}/111", json={"isbn": 111, "title": "Dune", "author": "Frank Herbert"})
    assert client.get(f"{BOOKS_URL}/111").json()["checkedOut"] is True


def test_delete_missing_book(client):
    assert client.delete(f"{BOOKS_URL}/111").status_code == 404


def test_delete_all_by_isbn(client):
    create(client, 111, "Dune", "Herbert")
    create(client, 111, "Dune2", "Herbert2")
    create(client, 555, "Emma", "Austen")

    assert client.delete(f"{BOOKS_URL}/deleteAll/111").status_code == 200
    assert titles(client.get(f"{BOOKS_URL}/")) == ["Emma"]
    assert client.delete(f"{BOOKS_URL}/deleteAll/111").status_code == 404


def test_delete_all(client):
    assert client.delete(f"{BOOKS_URL}/deleteAll").status_code == 200
    create(client, 111, "Dune", "Herbert")
    assert client.delete(f"{BOOKS_URL}/deleteAll").status_code == 200
    assert client.get(f"{BOOKS_URL}/").json() == []


def test_apps_do_not_share_books(client):
    from fastapi.testclient import TestClient

    from book_manager_api.app.main import create_app

    create(client, 111, "Dune", "Herbert")
    with TestClient(create_app()) as other:
        assert other.get(f"{BOOKS_URL}/").json() == []


def test_query_fields_win_over_body(client):
    response = client.post(
        f"{BOOKS_URL}/",
        params={"isbn": 1, "title": "Q", "author": "Q"},
        json={"isbn": 2, "title": "B", "author": "B"},
    )
    assert response.status_code == 201
    assert response.json()["title"] == "Q"
    assert client.get(f"{BOOKS_URL}/2").status_code == 404

    response = client.put(
        f"{BOOKS_URL}/1",
        params={"isbn": 3, "title": "Q3", "author": "Q3"},
        json={"isbn": 4, "title": "B4", "author": "B4"},
    )
    assert response.status_code == 204
    assert client.get(f"{BOOKS_URL}/3").json()["title"] == "Q3"
    assert client.get(f"{BOOKS_URL}/4").status_code == 404

    response = client.put(
        f"{BOOKS_URL}/updateAll/3",
        params={"isbn": 5, "title": "Q5", "author": "Q5"},
        json={"isbn": 6, "title": "B6", "author": "B6"},
    )
    assert response.status_code == 204
    assert client.get(f"{BOOKS_URL}/5").json()["title"] == "Q5"
    assert client.get(f"{BOOKS_URL}/6").status_code == 404


def test_status_wins_over_fields(client):
    create(client, 111, "Dune", "Herbert")
    response = client.put(
        f"{BOOKS_URL}/111",
        params={"status": "true", "isbn": 5, "title": "Z", "author": "Z"},
    )
    assert response.status_code == 200
    assert client.get(f"{BOOKS_URL}/111").json() == {
        "isbn": 111,
        "title": "Dune",
        "author": "Herbert",
        "checkedOut": True,
    }
    assert client.get(f"{BOOKS_URL}/5").status_code == 404


def test_malformed_body_is_rejected_even_with_query_fields(client):
    response = client.post(
        f"{BOOKS_URL}/",
        params={"isbn": 1, "title": "Q", "author": "Q"},
        json={"isbn": "abc"},
    )
    assert response.status_code == 400
    assert "body.isbn" in [error["field"] for error in response.json()["errors"]]
    assert client.get(f"{BOOKS_URL}/").json() == []
