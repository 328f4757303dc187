"""
Tests for Genres API Endpoints

Tests for /api/v1/genres endpoints.
"""

from fastapi import status


class TestListGenres:
    """Tests for GET /api/v1/genres endpoint."""

    def test_list_genres_empty(self, client):
        """Test listing genres when database is empty."""
        response = client.get("/api/v1/genres")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["data"] == []
        assert data["totalCount"] == 0
        assert data["totalPages"] == 0
        assert data["hasPreviousPage"] is False
        assert data["hasNextPage"] is False

    def test_list_genres_with_data(self, client, sample_genre):
        """Test listing genres returns expected data."""
        response = client.get("/api/v1/genres")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Data retrieved successfully"
        assert len(data["data"]) == 1
        assert data["data"][0]["name"] == "Fiction"
        assert data["data"][0]["booksCount"] == 0

    def test_list_genres_ordered_by_name(self, client, sample_genre, second_genre):
        """Genres come back sorted by name."""
        client.post("/api/v1/genres", json={"name": "Biography"})

        response = client.get("/api/v1/genres")

        names = [g["name"] for g in response.json()["data"]]
        assert names == ["Biography", "Fiction", "Romance"]

    def test_list_genres_books_count(self, client, multiple_books, sample_genre, second_genre):
        """booksCount reflects the books in each genre."""
        response = client.get("/api/v1/genres")

        counts = {g["name"]: g["booksCount"] for g in response.json()["data"]}
        assert counts == {"Fiction": 10, "Romance": 5}

    def test_list_genres_search(self, client, sample_genre, second_genre):
        """Search matches name or description, ignoring case."""
        response = client.get("/api/v1/genres", params={"searchTerm": "ROMAN"})

        data = response.json()
        assert data["totalCount"] == 1
        assert data["data"][0]["name"] == "Romance"

    def test_list_genres_search_description(self, client, sample_genre, second_genre):
        response = client.get("/api/v1/genres", params={"searchTerm": "literary"})

        data = response.json()
        assert [g["name"] for g in data["data"]] == ["Fiction"]

    def test_list_genres_blank_search_returns_all(self, client, sample_genre, second_genre):
        """A whitespace-only search term applies no filter."""
        response = client.get("/api/v1/genres", params={"searchTerm": "   "})

        assert response.json()["totalCount"] == 2

    def test_list_genres_search_non_ascii(self, client):
        """Accented capitals fold like ASCII ones."""
        client.post("/api/v1/genres", json={"name": "FICÇÃO CIENTÍFICA"})

        response = client.get("/api/v1/genres", params={"searchTerm": "ção"})

        data = response.json()
        assert data["totalCount"] == 1
        assert data["data"][0]["name"] == "FICÇÃO CIENTÍFICA"


class TestGetGenre:
    """Tests for GET /api/v1/genres/{genre_id} endpoint."""

    def test_get_genre_success(self, client, sample_genre):
        """Test getting a genre by ID."""
        response = client.get(f"/api/v1/genres/{sample_genre.id}")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Operation completed successfully"
        assert body["data"]["id"] == sample_genre.id
        assert body["data"]["name"] == "Fiction"
        assert "createdAt" in body["data"]
        assert "updatedAt" in body["data"]

    def test_get_genre_with_books(self, client, sample_book, sample_genre):
        response = client.get(f"/api/v1/genres/{sample_genre.id}")

        assert response.json()["data"]["booksCount"] == 1

    def test_get_genre_not_found(self, client):
        """Test getting a non-existent genre returns 404."""
        response = client.get("/api/v1/genres/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Genre not found"
        assert body["data"] is None

    def test_error_kind_not_serialized(self, client):
        """The internal error category never reaches the client."""
        response = client.get("/api/v1/genres/99999")

        assert set(response.json()) == {"success", "message", "data", "errors"}


class TestGenreExists:
    """Tests for HEAD /api/v1/genres/{genre_id} endpoint."""

    def test_head_existing_genre(self, client, sample_genre):
        response = client.head(f"/api/v1/genres/{sample_genre.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b""

    def test_head_missing_genre(self, client):
        response = client.head("/api/v1/genres/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCreateGenre:
    """Tests for POST /api/v1/genres endpoint."""

    def test_create_genre_minimal(self, client):
        """Test creating a genre with only required fields."""
        response = client.post("/api/v1/genres", json={"name": "Mystery"})

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Genre created successfully"
        assert body["data"]["name"] == "Mystery"
        assert body["data"]["description"] is None
        assert body["data"]["booksCount"] == 0

    def test_create_genre_location_header(self, client):
        """The Location header points at the new genre."""
        response = client.post("/api/v1/genres", json={"name": "Horror"})

        genre_id = response.json()["data"]["id"]
        assert response.headers["location"].endswith(f"/api/v1/genres/{genre_id}")

        follow = client.get(response.headers["location"])
        assert follow.status_code == status.HTTP_200_OK

    def test_create_genre_trims_name(self, client):
        response = client.post("/api/v1/genres", json={"name": "  Poetry  "})

        assert response.json()["data"]["name"] == "Poetry"

    def test_create_genre_duplicate_name(self, client, sample_genre):
        """Test that duplicate genre name is rejected."""
        response = client.post("/api/v1/genres", json={"name": "Fiction"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "A genre with this name already exists"

    def test_create_genre_duplicate_name_different_case(self, client, sample_genre):
        """Uniqueness ignores case."""
        response = client.post("/api/v1/genres", json={"name": "FICTION"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

        listing = client.get("/api/v1/genres").json()
        assert listing["totalCount"] == 1

    def test_create_genre_duplicate_name_non_ascii_case(self, client):
        client.post("/api/v1/genres", json={"name": "FICÇÃO"})

        response = client.post("/api/v1/genres", json={"name": "ficção"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "A genre with this name already exists"

    def test_create_genre_empty_name(self, client):
        """Test that whitespace-only name is rejected."""
        response = client.post("/api/v1/genres", json={"name": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["message"] == "Invalid data"
        assert any(error.startswith("name:") for error in body["errors"])

    def test_create_genre_name_too_long(self, client):
        response = client.post("/api/v1/genres", json={"name": "x" * 101})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_genre_description_too_long(self, client):
        response = client.post(
            "/api/v1/genres",
            json={"name": "Essay", "description": "x" * 501},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert any(error.startswith("description:") for error in response.json()["errors"])


class TestUpdateGenre:
    """Tests for PUT /api/v1/genres/{genre_id} endpoint."""

    def test_update_genre(self, client, sample_genre):
        """Test replacing name and description."""
        response = client.put(
            f"/api/v1/genres/{sample_genre.id}",
            json={"name": "Literary Fiction", "description": "Updated description"},
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Genre updated successfully"
        assert body["data"]["name"] == "Literary Fiction"
        assert body["data"]["description"] == "Updated description"

    def test_update_genre_keeps_own_name(self, client, sample_genre):
        """Saving a genre under its current name is not a conflict."""
        response = client.put(
            f"/api/v1/genres/{sample_genre.id}",
            json={"name": "Fiction", "description": "Same name, new text"},
        )

        assert response.status_code == status.HTTP_200_OK

    def test_update_genre_refreshes_updated_at(self, client, sample_genre):
        before = client.get(f"/api/v1/genres/{sample_genre.id}").json()["data"]

        response = client.put(
            f"/api/v1/genres/{sample_genre.id}",
            json={"name": "Fiction"},
        )

        after = response.json()["data"]
        assert after["createdAt"] == before["createdAt"]
        assert after["updatedAt"] >= before["updatedAt"]

    def test_update_genre_name_conflict(self, client, sample_genre, second_genre):
        """Taking another genre's name is rejected."""
        response = client.put(
            f"/api/v1/genres/{sample_genre.id}",
            json={"name": "romance"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Another genre with this name already exists"

    def test_update_genre_not_found(self, client):
        """Test updating a non-existent genre returns 404."""
        response = client.put("/api/v1/genres/99999", json={"name": "Updated"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Genre not found"


class TestDeleteGenre:
    """Tests for DELETE /api/v1/genres/{genre_id} endpoint."""

    def test_delete_genre(self, client, sample_genre):
        response = client.delete(f"/api/v1/genres/{sample_genre.id}")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["data"] is True
        assert body["message"] == "Genre deleted successfully"

        get_response = client.get(f"/api/v1/genres/{sample_genre.id}")
        assert get_response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_genre_with_books(self, client, sample_book, sample_genre):
        """A genre that still has books cannot be deleted."""
        response = client.delete(f"/api/v1/genres/{sample_genre.id}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Cannot delete a genre that has associated books"

        still_there = client.get(f"/api/v1/genres/{sample_genre.id}")
        assert still_there.status_code == status.HTTP_200_OK
        assert still_there.json()["data"]["booksCount"] == 1

    def test_delete_genre_not_found(self, client):
        response = client.delete("/api/v1/genres/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
