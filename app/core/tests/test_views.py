"""
Tests for the health check endpoint.
"""

from unittest.mock import patch

from django.db import OperationalError


class TestHealthCheck:
    def test_healthy(self, client, db):
        response = client.get("/health/")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "connected"}

    def test_database_unreachable(self, client, db):
        with patch("core.views.connection.cursor", side_effect=OperationalError):
            response = client.get("/health/")

        assert response.status_code == 503
        assert response.json() == {"status": "unhealthy", "database": "disconnected"}
