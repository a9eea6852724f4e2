"""
Tests for project API endpoints.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_project_service
from modules.projects.models import Project


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def project() -> Project:
    return Project(
        id="8f14e45f-ceea-467f-a0e6-5c0c0e7f1a2b",
        user_id="user_owner",
        title="Weather Dashboard",
        slug="weather-dashboard",
        description="Fetch and chart forecasts",
        difficulty="intermediate",
        tags=["react", "api"],
        created_at="2024-01-15T10:30:00+00:00",
    )


class TestGetProjectBySlug:
    """Tests for GET /api/projects/slug/{slug}"""

    def test_existing_slug(self, app, project):
        """Should return 200 with the project."""
        mock_service = AsyncMock()
        mock_service.get_project_by_slug.return_value = project
        app.dependency_overrides[get_project_service] = lambda: mock_service

        response = TestClient(app).get("/api/projects/slug/weather-dashboard")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == project.id
        assert data["slug"] == "weather-dashboard"
        assert data["title"] == "Weather Dashboard"
        assert data["tags"] == ["react", "api"]
        mock_service.get_project_by_slug.assert_awaited_once_with("weather-dashboard")

    def test_missing_slug(self, app):
        """Should return 404 with the flat error body."""
        mock_service = AsyncMock()
        mock_service.get_project_by_slug.return_value = None
        app.dependency_overrides[get_project_service] = lambda: mock_service

        response = TestClient(app).get("/api/projects/slug/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Project not found"}

    def test_lookup_failure(self, app):
        """Should return 500 when the data layer fails."""
        mock_service = AsyncMock()
        mock_service.get_project_by_slug.side_effect = RuntimeError("connection reset")
        app.dependency_overrides[get_project_service] = lambda: mock_service

        response = TestClient(app).get("/api/projects/slug/weather-dashboard")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch project"}

    def test_soft_deleted_project_is_returned(self, app, project):
        """Soft-deleted projects are still served with their deleted_at."""
        deleted = project.model_copy(update={"deleted_at": "2024-02-01T00:00:00+00:00"})
        mock_service = AsyncMock()
        mock_service.get_project_by_slug.return_value = deleted
        app.dependency_overrides[get_project_service] = lambda: mock_service

        response = TestClient(app).get("/api/projects/slug/weather-dashboard")

        assert response.status_code == 200
        assert response.json()["deleted_at"] is not None

    def test_no_auth_required(self, app, project):
        """The lookup is public."""
        mock_service = AsyncMock()
        mock_service.get_project_by_slug.return_value = project
        app.dependency_overrides[get_project_service] = lambda: mock_service

        response = TestClient(app).get("/api/projects/slug/weather-dashboard")
        assert response.status_code == 200
