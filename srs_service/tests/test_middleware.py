import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient


@pytest.mark.django_db
class TestIdentityHeaderMiddleware:
    def setup_method(self):
        self.client = APIClient()
        self.url = reverse("summary")

    def test_request_with_user_header(self):
        """Test that the forwarded X-User-ID header identifies the caller"""
        response = self.client.get(self.url, HTTP_X_USER_ID="user_2abc")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["has_cards"] is False

    def test_request_with_malformed_user_header(self):
        """Test that a malformed user id returns 401"""
        response = self.client.get(self.url, HTTP_X_USER_ID="not a valid id!")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "Malformed user id"}

    def test_request_without_user_header(self):
        """Test that unauthenticated request returns 401"""
        response = self.client.get(self.url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "User not authenticated"}

    def test_health_needs_no_identity(self):
        response = self.client.get(reverse("health"))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ok"}
