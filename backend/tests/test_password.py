"""Tests for the password change flow."""

from tests.conftest import auth_headers, register_user


class TestChangePassword:
    """Tests for change-password endpoint."""

    def test_change_password_success(self, client):
        """Change password with correct current password should succeed."""
        test_client, _ = client
        token = register_user(test_client, "test@example.com", "oldpassword123")["token"]

        response = test_client.post(
            "/accounts/password_change/",
            json={"old_password": "oldpassword123", "new_password": "newpassword456"},
            headers=auth_headers(token),
        )
        assert response.status_code == 200
        assert "changed" in response.json()["message"].lower()

        # New password works, old one no longer does
        response = test_client.post(
            "/accounts/login/",
            json={"username": "test@example.com", "password": "newpassword456"},
        )
        assert response.status_code == 200

        response = test_client.post(
            "/accounts/login/",
            json={"username": "test@example.com", "password": "oldpassword123"},
        )
        assert response.status_code == 401

    def test_change_password_wrong_current(self, client):
        """Change password with wrong current password should fail with 400."""
        test_client, _ = client
        token = register_user(test_client, "test@example.com", "oldpassword123")["token"]

        response = test_client.post(
            "/accounts/password_change/",
            json={"old_password": "wrongpassword", "new_password": "newpassword456"},
            headers=auth_headers(token),
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Current password is incorrect"

    def test_change_password_too_short(self, client):
        test_client, _ = client
        token = register_user(test_client, "test@example.com", "oldpassword123")["token"]

        response = test_client.post(
            "/accounts/password_change/",
            json={"old_password": "oldpassword123", "new_password": "abc"},
            headers=auth_headers(token),
        )
        assert response.status_code == 400

    def test_change_password_over_72_bytes(self, client):
        test_client, _ = client
        token = register_user(test_client, "test@example.com", "oldpassword123")["token"]

        response = test_client.post(
            "/accounts/password_change/",
            json={"old_password": "oldpassword123", "new_password": "é" * 40},
            headers=auth_headers(token),
        )
        assert response.status_code == 400

        # Old password still valid
        response = test_client.post(
            "/accounts/login/",
            json={"username": "test@example.com", "password": "oldpassword123"},
        )
        assert response.status_code == 200

    def test_change_password_requires_auth(self, client):
        test_client, _ = client

        response = test_client.post(
            "/accounts/password_change/",
            json={"old_password": "oldpassword123", "new_password": "newpassword456"},
        )
        assert response.status_code == 401

    def test_change_password_deleted_account(self, client):
        """A token for a deleted account gets 404 on password change."""
        test_client, _ = client
        token = register_user(test_client, "test@example.com", "oldpassword123")["token"]
        test_client.post("/settings/delete/", headers=auth_headers(token))

        response = test_client.post(
            "/accounts/password_change/",
            json={"old_password": "oldpassword123", "new_password": "newpassword456"},
            headers=auth_headers(token),
        )
        assert response.status_code == 404
