# users/tests/test_auth.py

from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.test import TestCase
from rest_framework.test import APIClient

User = get_user_model()


class LoginTests(TestCase):
    """
    GUARANTEES:
    - Back-office users log in with email OR username
    - Wrong passwords and inactive accounts answer 401
    - /me/ returns the role and effective capabilities
    """

    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="carla@example.com",
            username="carla",
            password="secreto-123",
            role="manager",
        )

    def test_login_by_email(self):
        res = self.client.post(
            "/api/auth/login/",
            {"email": "CARLA@example.com", "password": "secreto-123"},
            format="json",
        )

        self.assertEqual(res.status_code, 200)
        self.assertIn("access", res.data)
        self.assertIn("refresh", res.data)
        self.assertEqual(res.data["user"]["role"], "manager")

    def test_login_by_username(self):
        res = self.client.post(
            "/api/auth/login/",
            {"username": "carla", "password": "secreto-123"},
            format="json",
        )
        self.assertEqual(res.status_code, 200)

    def test_wrong_password(self):
        res = self.client.post(
            "/api/auth/login/",
            {"email": "carla@example.com", "password": "nope"},
            format="json",
        )
        self.assertEqual(res.status_code, 401)

    def test_inactive_user(self):
        self.user.is_active = False
        self.user.save()

        res = self.client.post(
            "/api/auth/login/",
            {"username": "carla", "password": "secreto-123"},
            format="json",
        )
        self.assertEqual(res.status_code, 401)

    def test_both_identifiers_rejected(self):
        res = self.client.post(
            "/api/auth/login/",
            {"email": "carla@example.com", "username": "carla", "password": "secreto-123"},
            format="json",
        )
        self.assertEqual(res.status_code, 400)

    def test_me_with_token(self):
        login = self.client.post(
            "/api/auth/login/",
            {"username": "carla", "password": "secreto-123"},
            format="json",
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")

        res = self.client.get("/api/auth/me/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["email"], "carla@example.com")
        self.assertIn("catalog.edit", res.data["capabilities"])
        self.assertNotIn("config.edit", res.data["capabilities"])

    def test_me_requires_auth(self):
        self.assertEqual(self.client.get("/api/auth/me/").status_code, 401)
