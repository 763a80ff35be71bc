"""HTTP tests for the /api/books endpoints."""

import pytest
from fastapi.testclient import TestClient

BOOKS = "/api/books"


def _create(client: TestClient, payload: dict) -> dict:
    response = client.post(BOOKS, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestListBooks:
    def test_empty_store_returns_empty_list(self, client: TestClient):
        response = client.get(BOOKS)

        assert response.status_code == 200
        assert response.json() == []

    def test_list_contains_created_books(self, client: TestClient, book_payload):
        created = [
            _create(client, book_payload(title=f"Book {n}")) for n in range(3)
        ]

        response = client.get(BOOKS)

        assert response.status_code == 200
        listed_ids = {book["id"] for book in response.json()}
        assert {book["id"] for book in created} <= listed_ids


class TestGetBook:
    def test_get_existing_book(self, client: TestClient, book_payload):
        created = _create(client, book_payload())

        response = client.get(f"{BOOKS}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_book_is_404_with_empty_body(self, client: TestClient):
        response = client.get(f"{BOOKS}/999")

        assert response.status_code == 404
        assert response.content == b""

    def test_non_integer_id_is_400(self, client: TestClient):
        response = client.get(f"{BOOKS}/not-a-number")

        assert response.status_code == 400


class TestCreateBook:
    def test_create_returns_201_with_assigned_id(self, client: TestClient, book_payload):
        response = client.post(BOOKS, json=book_payload())

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body == {
            "id": body["id"],
            "title": "Dune",
            "author": "Herbert",
            "yearPublished": 1965,
        }

    def test_create_then_get_round_trip(self, client: TestClient, book_payload):
        payload = book_payload(title="Neuromancer", author="Gibson", yearPublished=1984)
        created = _create(client, payload)

        fetched = client.get(f"{BOOKS}/{created['id']}").json()

        assert fetched["id"] is not None
        assert {k: v for k, v in fetched.items() if k != "id"} == payload

    def test_client_supplied_id_is_ignored(self, client: TestClient, book_payload):
        first = _create(client, book_payload())

        second = _create(client, book_payload(id=first["id"], title="Hijack"))

        assert second["id"] != first["id"]
        original = client.get(f"{BOOKS}/{first['id']}").json()
        assert original["title"] == "Dune"

    def test_year_may_be_omitted(self, client: TestClient):
        created = _create(client, {"title": "Beowulf", "author": "Unknown"})

        assert created["yearPublished"] is None

    def test_blank_title_is_400(self, client: TestClient, book_payload):
        response = client.post(BOOKS, json=book_payload(title="   "))

        assert response.status_code == 400
        assert response.json()["detail"][0]["loc"][-1] == "title"
        assert client.get(BOOKS).json() == []

    def test_missing_author_is_400(self, client: TestClient):
        response = client.post(BOOKS, json={"title": "Dune", "yearPublished": 1965})

        assert response.status_code == 400
        assert client.get(BOOKS).json() == []

    def test_malformed_json_is_400(self, client: TestClient):
        response = client.post(
            BOOKS, content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400


class TestUpdateBook:
    def test_update_overwrites_fields_and_keeps_id(self, client: TestClient, book_payload):
        created = _create(client, book_payload())

        response = client.put(
            f"{BOOKS}/{created['id']}",
            json={"id": 4242, "title": "Dune Messiah", "author": "F. Herbert", "yearPublished": 1969},
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": created["id"],
            "title": "Dune Messiah",
            "author": "F. Herbert",
            "yearPublished": 1969,
        }
        assert client.get(f"{BOOKS}/{created['id']}").json() == response.json()
        assert client.get(f"{BOOKS}/4242").status_code == 404

    def test_update_clears_year_when_omitted(self, client: TestClient, book_payload):
        created = _create(client, book_payload())

        response = client.put(
            f"{BOOKS}/{created['id']}", json={"title": "Dune", "author": "Herbert"}
        )

        assert response.status_code == 200
        assert response.json()["yearPublished"] is None

    def test_update_missing_book_is_404_and_creates_nothing(
        self, client: TestClient, book_payload
    ):
        response = client.put(f"{BOOKS}/77", json=book_payload())

        assert response.status_code == 404
        assert response.content == b""
        assert client.get(BOOKS).json() == []

    def test_update_with_blank_author_is_400(self, client: TestClient, book_payload):
        created = _create(client, book_payload())

        response = client.put(f"{BOOKS}/{created['id']}", json=book_payload(author=""))

        assert response.status_code == 400
        assert client.get(f"{BOOKS}/{created['id']}").json()["author"] == "Herbert"


class TestDeleteBook:
    def test_delete_existing_book(self, client: TestClient, book_payload):
        created = _create(client, book_payload())

        response = client.delete(f"{BOOKS}/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BOOKS}/{created['id']}").status_code == 404

    def test_delete_missing_book_is_404_without_side_effects(
        self, client: TestClient, book_payload
    ):
        kept = _create(client, book_payload())

        response = client.delete(f"{BOOKS}/{kept['id'] + 1}")

        assert response.status_code == 404
        assert client.get(BOOKS).json() == [kept]


def test_documented_example_flow(client: TestClient):
    """POST, GET, DELETE, GET against a fresh store."""
    payload = {"title": "Dune", "author": "Herbert", "yearPublished": 1965}

    created = client.post(BOOKS, json=payload)
    assert created.status_code == 201
    assert created.json() == {"id": 1, **payload}

    fetched = client.get(f"{BOOKS}/1")
    assert fetched.status_code == 200
    assert fetched.json() == {"id": 1, **payload}

    assert client.delete(f"{BOOKS}/1").status_code == 204
    assert client.get(f"{BOOKS}/1").status_code == 404


class TestIntegerRanges:
    OUT_OF_RANGE_ID = 2**63

    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_out_of_range_id_is_400(self, client: TestClient, method: str):
        response = getattr(client, method)(f"{BOOKS}/{self.OUT_OF_RANGE_ID}")

        assert response.status_code == 400

    def test_out_of_range_id_on_update_is_400(self, client: TestClient, book_payload):
        response = client.put(f"{BOOKS}/{self.OUT_OF_RANGE_ID}", json=book_payload())

        assert response.status_code == 400

    def test_largest_id_is_404(self, client: TestClient):
        assert client.get(f"{BOOKS}/{2**63 - 1}").status_code == 404
        assert client.delete(f"{BOOKS}/{-(2**63)}").status_code == 404

    def test_out_of_range_year_is_400(self, client: TestClient, book_payload):
        response = client.post(BOOKS, json=book_payload(yearPublished=10**20))

        assert response.status_code == 400
        assert response.json()["detail"][0]["loc"][-1] == "yearPublished"
        assert client.get(BOOKS).json() == []
