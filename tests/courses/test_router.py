"""Tests for the catalog endpoints."""

from fastapi.testclient import TestClient


class TestCategories:
    """Tests for GET /api/categories."""

    def test_list(self, client: TestClient):
        response = client.get("/api/categories")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 6
        assert data[0] == {"id": 1, "name": "Web Development", "color": "primary"}


class TestCourses:
    """Tests for GET /api/courses and /api/courses/{id}."""

    def test_list_all(self, client: TestClient):
        """All courses come back with camelCase keys."""
        response = client.get("/api/courses")
        assert response.status_code == 200
        data = response.json()
        assert [c["id"] for c in data] == [1, 2, 3, 4, 5, 6]
        assert {"fullDescription", "categoryId", "studentCount", "imageUrl"} <= set(
            data[0]
        )

    def test_filter_by_category(self, client: TestClient):
        """categoryId keeps only that category's courses."""
        response = client.get("/api/courses", params={"categoryId": 2})
        assert response.status_code == 200
        data = response.json()
        assert [c["title"] for c in data] == ["Python Data Analysis"]

    def test_filter_unknown_category(self, client: TestClient):
        """An unknown category yields an empty list."""
        response = client.get("/api/courses", params={"categoryId": 99})
        assert response.status_code == 200
        assert response.json() == []

    def test_filter_rejects_non_positive(self, client: TestClient):
        response = client.get("/api/courses", params={"categoryId": 0})
        assert response.status_code == 422

    def test_detail_with_ordered_lessons(self, client: TestClient):
        """Course detail embeds its lessons by order_index."""
        response = client.get("/api/courses/1")
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Complete React Development"
        assert [lesson["orderIndex"] for lesson in data["lessons"]] == [1, 2, 3, 4, 5]
        assert data["features"]

    def test_detail_without_lessons(self, client: TestClient):
        """Courses without lessons have an empty lesson list."""
        response = client.get("/api/courses/2")
        assert response.status_code == 200
        assert response.json()["lessons"] == []

    def test_detail_not_found(self, client: TestClient):
        response = client.get("/api/courses/999")
        assert response.status_code == 404
        assert response.json()["message"] == "Course not found"

    def test_detail_non_numeric_id(self, client: TestClient):
        """Non-numeric ids fail validation instead of reaching the store."""
        response = client.get("/api/courses/abc")
        assert response.status_code == 422
        assert response.json()["details"]


class TestLessons:
    """Tests for GET /api/lessons/{id}."""

    def test_detail_with_navigation(self, client: TestClient):
        """A middle lesson links to both neighbours."""
        response = client.get("/api/lessons/3")
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Understanding Components and JSX"
        assert data["course"]["id"] == 1
        nav = data["navigation"]
        assert (nav["position"], nav["total"]) == (3, 5)
        assert nav["previous"]["id"] == 2
        assert nav["next"]["id"] == 4

    def test_first_and_last(self, client: TestClient):
        first = client.get("/api/lessons/1").json()["navigation"]
        last = client.get("/api/lessons/5").json()["navigation"]
        assert first["previous"] is None
        assert first["next"]["orderIndex"] == 2
        assert last["next"] is None
        assert last["position"] == 5

    def test_not_found(self, client: TestClient):
        response = client.get("/api/lessons/42")
        assert response.status_code == 404
        assert response.json()["message"] == "Lesson not found"
