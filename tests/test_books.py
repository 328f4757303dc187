"""
Tests for Books API Endpoints

Tests for /api/v1/books endpoints, including the author/genre
reference checks and ISBN uniqueness.
"""

from decimal import Decimal

from fastapi import status


class TestListBooks:
    """Tests for GET /api/v1/books endpoint."""

    def test_list_books_empty(self, client):
        """Test listing books when database is empty."""
        response = client.get("/api/v1/books")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["data"] == []
        assert data["totalCount"] == 0
        assert data["pageNumber"] == 1
        assert data["pageSize"] == 10

    def test_list_books_with_data(self, client, sample_book):
        """Test listing books returns names of author and genre."""
        response = client.get("/api/v1/books")

        data = response.json()
        assert data["totalCount"] == 1
        book = data["data"][0]
        assert book["title"] == "Dom Casmurro"
        assert book["authorName"] == "Machado de Assis"
        assert book["genreName"] == "Fiction"

    def test_list_books_pagination(self, client, multiple_books):
        """Test that pagination works correctly."""
        response = client.get("/api/v1/books", params={"pageNumber": 1, "pageSize": 5})

        data = response.json()
        assert len(data["data"]) == 5
        assert data["totalCount"] == 15
        assert data["totalPages"] == 3
        assert data["hasPreviousPage"] is False
        assert data["hasNextPage"] is True

    def test_list_books_last_page(self, client, multiple_books):
        response = client.get("/api/v1/books", params={"pageNumber": 2, "pageSize": 10})

        data = response.json()
        assert len(data["data"]) == 5
        assert data["hasPreviousPage"] is True
        assert data["hasNextPage"] is False

    def test_list_books_ordered_by_title(self, client, multiple_books):
        response = client.get("/api/v1/books", params={"pageSize": 100})

        titles = [b["title"] for b in response.json()["data"]]
        assert titles == sorted(titles)

    def test_list_books_filter_by_author(self, client, multiple_books, second_author):
        response = client.get("/api/v1/books", params={"authorId": second_author.id})

        data = response.json()
        assert data["totalCount"] == 7
        assert {b["authorName"] for b in data["data"]} == {"Clarice Lispector"}

    def test_list_books_filter_by_genre(self, client, multiple_books, second_genre):
        response = client.get("/api/v1/books", params={"genreId": second_genre.id})

        assert response.json()["totalCount"] == 5

    def test_list_books_combined_filters(
        self, client, multiple_books, sample_author, second_genre
    ):
        """Filters combine with AND: books 1, 7 and 13."""
        response = client.get(
            "/api/v1/books",
            params={"authorId": sample_author.id, "genreId": second_genre.id},
        )

        titles = [b["title"] for b in response.json()["data"]]
        assert titles == ["Test Book 01", "Test Book 07", "Test Book 13"]

    def test_list_books_search_title(self, client, multiple_books):
        response = client.get("/api/v1/books", params={"searchTerm": "book 1"})

        # Titles "Test Book 10".."15", plus book 01 through its description
        assert response.json()["totalCount"] == 7

    def test_list_books_search_isbn(self, client, sample_book):
        response = client.get("/api/v1/books", params={"searchTerm": "852540"})

        assert response.json()["totalCount"] == 1

    def test_list_books_search_publisher(self, client, sample_book):
        response = client.get("/api/v1/books", params={"searchTerm": "GLOBO"})

        assert response.json()["totalCount"] == 1

    def test_list_books_search_wildcards_are_literal(self, client, multiple_books):
        """% and _ in the search term match only themselves."""
        response = client.get("/api/v1/books", params={"searchTerm": "%"})

        assert response.json()["totalCount"] == 0

    def test_list_books_search_no_match(self, client, multiple_books):
        response = client.get("/api/v1/books", params={"searchTerm": "nothing-like-this"})

        data = response.json()
        assert data["totalCount"] == 0
        assert data["totalPages"] == 0


class TestGetBook:
    """Tests for GET /api/v1/books/{book_id} endpoint."""

    def test_get_book_success(self, client, sample_book):
        response = client.get(f"/api/v1/books/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["id"] == sample_book.id
        assert data["isbn"] == "9788525406958"
        assert data["publicationDate"] == "1899-01-01"
        assert data["pageCount"] == 208
        assert Decimal(str(data["price"])) == Decimal("29.90")
        assert data["authorId"] == sample_book.author_id
        assert data["genreId"] == sample_book.genre_id

    def test_get_book_not_found(self, client):
        response = client.get("/api/v1/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Book not found"


class TestBookExists:
    """Tests for HEAD /api/v1/books/{book_id} endpoint."""

    def test_head_existing_book(self, client, sample_book):
        assert client.head(f"/api/v1/books/{sample_book.id}").status_code == 200

    def test_head_missing_book(self, client):
        assert client.head("/api/v1/books/99999").status_code == 404


class TestCreateBook:
    """Tests for POST /api/v1/books endpoint."""

    def test_create_book(self, client, book_payload):
        response = client.post("/api/v1/books", json=book_payload)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["message"] == "Book created successfully"
        assert body["data"]["title"] == "A Hora da Estrela"
        assert body["data"]["authorName"] == "Machado de Assis"
        assert body["data"]["genreName"] == "Fiction"
        assert response.headers["location"].endswith(f"/api/v1/books/{body['data']['id']}")

    def test_create_book_minimal(self, client, sample_author, sample_genre):
        response = client.post(
            "/api/v1/books",
            json={
                "title": "Untitled",
                "authorId": sample_author.id,
                "genreId": sample_genre.id,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["data"]["isbn"] is None

    def test_create_books_without_isbn_never_conflict(self, client, book_payload):
        """Any number of books may have no ISBN."""
        book_payload["isbn"] = None
        first = client.post("/api/v1/books", json=book_payload)

        book_payload["isbn"] = "   "
        second = client.post("/api/v1/books", json=book_payload)

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_201_CREATED
        assert second.json()["data"]["isbn"] is None

    def test_create_book_duplicate_isbn(self, client, sample_book, book_payload):
        book_payload["isbn"] = sample_book.isbn

        response = client.post("/api/v1/books", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "A book with this ISBN already exists"

    def test_create_book_isbn_check_character_ignores_case(self, client, book_payload):
        """A lower-case ISBN-10 check character is stored upper-case."""
        book_payload["isbn"] = "857164062x"
        first = client.post("/api/v1/books", json=book_payload)

        book_payload["isbn"] = "857164062X"
        second = client.post("/api/v1/books", json=book_payload)

        assert first.json()["data"]["isbn"] == "857164062X"
        assert second.status_code == status.HTTP_400_BAD_REQUEST
        assert second.json()["message"] == "A book with this ISBN already exists"

    def test_create_book_missing_author(self, client, book_payload):
        """A book with an unknown author is rejected and nothing is stored."""
        book_payload["authorId"] = 99999

        response = client.post("/api/v1/books", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Author not found"
        assert client.get("/api/v1/books").json()["totalCount"] == 0

    def test_create_book_missing_genre(self, client, book_payload):
        book_payload["genreId"] = 99999

        response = client.post("/api/v1/books", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Genre not found"

    def test_create_book_isbn_checked_before_references(self, client, sample_book, book_payload):
        """A duplicate ISBN is reported even when the author is also missing."""
        book_payload["isbn"] = sample_book.isbn
        book_payload["authorId"] = 99999

        response = client.post("/api/v1/books", json=book_payload)

        assert response.json()["message"] == "A book with this ISBN already exists"

    def test_create_book_invalid_price(self, client, book_payload):
        book_payload["price"] = "0"

        response = client.post("/api/v1/books", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert any(error.startswith("price:") for error in response.json()["errors"])

    def test_create_book_invalid_page_count(self, client, book_payload):
        book_payload["pageCount"] = 0

        response = client.post("/api/v1/books", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_book_missing_references(self, client):
        response = client.post("/api/v1/books", json={"title": "Orphan"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        errors = response.json()["errors"]
        assert any(error.startswith("authorId:") for error in errors)
        assert any(error.startswith("genreId:") for error in errors)


class TestUpdateBook:
    """Tests for PUT /api/v1/books/{book_id} endpoint."""

    def test_update_book(self, client, sample_book, book_payload):
        response = client.put(f"/api/v1/books/{sample_book.id}", json=book_payload)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Book updated successfully"
        assert body["data"]["title"] == "A Hora da Estrela"
        assert body["data"]["isbn"] == "9788520925188"

    def test_update_book_keeps_own_isbn(self, client, sample_book, book_payload):
        book_payload["isbn"] = sample_book.isbn

        response = client.put(f"/api/v1/books/{sample_book.id}", json=book_payload)

        assert response.status_code == status.HTTP_200_OK

    def test_update_book_moves_to_new_author_and_genre(
        self, client, sample_book, second_author, second_genre, book_payload
    ):
        """The response carries the names of the new author and genre."""
        book_payload["authorId"] = second_author.id
        book_payload["genreId"] = second_genre.id

        response = client.put(f"/api/v1/books/{sample_book.id}", json=book_payload)

        data = response.json()["data"]
        assert data["authorName"] == "Clarice Lispector"
        assert data["genreName"] == "Romance"

    def test_update_book_isbn_conflict(self, client, multiple_books, book_payload):
        book_payload["isbn"] = multiple_books[1].isbn

        response = client.put(f"/api/v1/books/{multiple_books[0].id}", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Another book with this ISBN already exists"

    def test_update_book_missing_author_is_404(self, client, sample_book, book_payload):
        """On update a missing author or genre answers 404."""
        book_payload["authorId"] = 99999

        response = client.put(f"/api/v1/books/{sample_book.id}", json=book_payload)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Author not found"

    def test_update_book_missing_genre_is_404(self, client, sample_book, book_payload):
        book_payload["genreId"] = 99999

        response = client.put(f"/api/v1/books/{sample_book.id}", json=book_payload)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Genre not found"

    def test_update_book_not_found(self, client, book_payload):
        response = client.put("/api/v1/books/99999", json=book_payload)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Book not found"


class TestDeleteBook:
    """Tests for DELETE /api/v1/books/{book_id} endpoint."""

    def test_delete_book(self, client, sample_book):
        response = client.delete(f"/api/v1/books/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Book deleted successfully"
        assert client.get(f"/api/v1/books/{sample_book.id}").status_code == 404

    def test_delete_book_frees_genre(self, client, sample_book, sample_genre):
        """Once its last book is gone, the genre can be deleted."""
        client.delete(f"/api/v1/books/{sample_book.id}")

        response = client.delete(f"/api/v1/genres/{sample_genre.id}")

        assert response.status_code == status.HTTP_200_OK

    def test_delete_book_not_found(self, client):
        response = client.delete("/api/v1/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
