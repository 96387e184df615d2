"""Unit tests for /api/users routes."""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from api.main import create_app
from services import auth_service

NEW_USER = {
    "email": "kim@example.com",
    "password": "s3cret",
    "firstName": "Kim",
    "lastName": "Park",
}


class TestUserRoutes(unittest.TestCase):

    def setUp(self):
        patcher = patch.object(auth_service, 'BCRYPT_ROUNDS', 4)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.app = create_app(seed=True)
        self.client = TestClient(self.app)

    def _create(self, **overrides):
        return self.client.post("/api/users", json={**NEW_USER, **overrides})

    # ── list / get ────────────────────────────────────────────

    def test_list_users_strips_passwords(self):
        response = self.client.get("/api/users")

        self.assertEqual(response.status_code, 200)
        users = response.json()
        self.assertEqual(len(users), 3)
        for user in users:
            self.assertNotIn("password", user)
            self.assertNotIn("passwordHash", user)
            self.assertIn("createdAt", user)

    def test_get_user(self):
        user_id = self._create().json()["id"]

        response = self.client.get(f"/api/users/{user_id}")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["email"], "kim@example.com")

    def test_get_unknown_user(self):
        response = self.client.get("/api/users/unknown")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "User not found")

    # ── create ────────────────────────────────────────────────

    def test_create_user(self):
        response = self._create()

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertTrue(data["id"])
        self.assertEqual(data["role"], "user")
        self.assertEqual(data["status"], "active")
        self.assertIsNone(data["lastLogin"])
        self.assertIsNone(data["avatar"])
        self.assertNotIn("password", data)

    def test_create_user_accepts_snake_case(self):
        response = self.client.post("/api/users", json={
            "email": "lee@example.com",
            "password": "pw",
            "first_name": "Lee",
            "last_name": "Chan",
        })
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["firstName"], "Lee")

    def test_create_keeps_email_exactly_as_submitted(self):
        response = self._create(email="Kim@Example.COM")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["email"], "Kim@Example.COM")

        other = self._create(email="Kim@example.com")

        self.assertEqual(other.status_code, 201)
        self.assertEqual(other.json()["email"], "Kim@example.com")
        self.assertNotEqual(other.json()["id"], response.json()["id"])

    def test_create_duplicate_email_conflicts(self):
        self.assertEqual(self._create().status_code, 201)

        response = self._create(firstName="Other")

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["detail"], "User already exists")
        self.assertEqual(len(self.client.get("/api/users").json()), 4)

    def test_create_seeded_email_conflicts(self):
        response = self._create(email="admin@example.com")
        self.assertEqual(response.status_code, 409)

    def test_create_missing_required_field(self):
        payload = dict(NEW_USER)
        del payload["lastName"]
        response = self.client.post("/api/users", json=payload)

        self.assertEqual(response.status_code, 400)
        self.assertTrue(any("lastName" in e["loc"] for e in response.json()["errors"]))

    def test_create_malformed_email(self):
        self.assertEqual(self._create(email="kim").status_code, 400)

    def test_create_overlong_password_is_invalid(self):
        self.assertEqual(self._create(password="x" * 100).status_code, 400)

    def test_created_user_can_log_in(self):
        self._create()
        response = self.client.post(
            "/api/auth/login",
            json={"email": "kim@example.com", "password": "s3cret"},
        )
        self.assertEqual(response.status_code, 200)

    # ── update ────────────────────────────────────────────────

    def test_patch_user(self):
        created = self._create().json()

        response = self.client.patch(f"/api/users/{created['id']}", json={"role": "manager"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["role"], "manager")
        self.assertEqual(data["firstName"], "Kim")
        self.assertEqual(data["createdAt"], created["createdAt"])

    def test_patch_ignores_id_and_created_at(self):
        created = self._create().json()

        response = self.client.patch(
            f"/api/users/{created['id']}",
            json={"id": "hijack", "createdAt": "2000-01-01T00:00:00Z"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["id"], created["id"])
        self.assertEqual(response.json()["createdAt"], created["createdAt"])

    def test_patch_empty_body_returns_unchanged(self):
        created = self._create().json()
        response = self.client.patch(f"/api/users/{created['id']}", json={})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), created)

    def test_patch_invalid_field(self):
        created = self._create().json()
        response = self.client.patch(f"/api/users/{created['id']}", json={"email": "bad"})
        self.assertEqual(response.status_code, 400)

    def test_patch_null_required_field(self):
        created = self._create().json()
        response = self.client.patch(f"/api/users/{created['id']}", json={"firstName": None})
        self.assertEqual(response.status_code, 400)

    def test_patch_unknown_user(self):
        response = self.client.patch("/api/users/unknown", json={"bio": "x"})
        self.assertEqual(response.status_code, 404)

    def test_patch_email_to_existing_email_conflicts(self):
        created = self._create().json()
        response = self.client.patch(
            f"/api/users/{created['id']}", json={"email": "admin@example.com"},
        )
        self.assertEqual(response.status_code, 409)

    def test_patch_password_changes_login(self):
        created = self._create().json()
        self.client.patch(f"/api/users/{created['id']}", json={"password": "n3w"})

        old = self.client.post("/api/auth/login", json={"email": "kim@example.com", "password": "s3cret"})
        new = self.client.post("/api/auth/login", json={"email": "kim@example.com", "password": "n3w"})

        self.assertEqual(old.status_code, 401)
        self.assertEqual(new.status_code, 200)

    # ── delete ────────────────────────────────────────────────

    def test_delete_user(self):
        user_id = self._create().json()["id"]

        response = self.client.delete(f"/api/users/{user_id}")

        self.assertEqual(response.status_code, 204)
        self.assertEqual(response.content, b"")
        self.assertEqual(self.client.get(f"/api/users/{user_id}").status_code, 404)
        self.assertEqual(self.client.delete(f"/api/users/{user_id}").status_code, 404)


if __name__ == '__main__':
    unittest.main()
