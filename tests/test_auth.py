import json
from datetime import timedelta
from decimal import Decimal

from django.test import TestCase
from rest_framework_simplejwt.tokens import AccessToken

from apps.accounts.models import User
from apps.accounts.tokens import decode_token, issue_token
from apps.medicines.models import Medicine
from apps.pharmacies.models import Pharmacy


class RegistrationAndLoginTests(TestCase):
    def test_register_then_login_yields_token_for_same_user(self):
        register_response = self.client.post(
            "/api/users/register",
            data=json.dumps(
                {
                    "name": "Asha",
                    "email": "asha@example.com",
                    "password": "secret123",
                }
            ),
            content_type="application/json",
        )
        self.assertEqual(register_response.status_code, 201)
        body = register_response.json()
        self.assertEqual(body["email"], "asha@example.com")
        self.assertEqual(body["role"], User.ROLE_USER)
        self.assertNotIn("password", body)

        user = User.objects.get(email="asha@example.com")
        self.assertEqual(str(decode_token(body["token"])["user_id"]), str(user.id))

        login_response = self.client.post(
            "/api/users/login",
            data=json.dumps({"email": "asha@example.com", "password": "secret123"}),
            content_type="application/json",
        )
        self.assertEqual(login_response.status_code, 200)
        self.assertEqual(login_response.json()["id"], user.id)
        self.assertEqual(str(decode_token(login_response.json()["token"])["user_id"]), str(user.id))

    def test_register_as_pharmacy_operator(self):
        response = self.client.post(
            "/api/users/register/",
            data=json.dumps(
                {
                    "name": "City Chemist",
                    "email": "Chemist@Example.com",
                    "password": "secret123",
                    "role": User.ROLE_PHARMACY,
                    "phone_number": "555-0100",
                }
            ),
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 201)
        user = User.objects.get(email="chemist@example.com")
        self.assertEqual(user.role, User.ROLE_PHARMACY)
        self.assertTrue(user.is_pharmacy_operator())
        self.assertTrue(user.check_password("secret123"))

    def test_duplicate_email_is_rejected(self):
        User.objects.create_user(username="taken@example.com", email="taken@example.com", password="secret123")

        response = self.client.post(
            "/api/users/register",
            data=json.dumps({"name": "Dup", "email": "taken@example.com", "password": "secret123"}),
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "User already exists")

    def test_admin_role_cannot_be_self_registered(self):
        response = self.client.post(
            "/api/users/register",
            data=json.dumps(
                {"name": "Eve", "email": "eve@example.com", "password": "secret123", "role": User.ROLE_ADMIN}
            ),
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("role", response.json()["errors"])
        self.assertFalse(User.objects.filter(email="eve@example.com").exists())

    def test_missing_fields_are_rejected(self):
        response = self.client.post(
            "/api/users/register",
            data=json.dumps({"email": "nopass@example.com"}),
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 400)
        errors = response.json()["errors"]
        self.assertIn("name", errors)
        self.assertIn("password", errors)

    def test_login_with_wrong_password(self):
        User.objects.create_user(username="bob@example.com", email="bob@example.com", password="secret123")

        response = self.client.post(
            "/api/users/login",
            data=json.dumps({"email": "bob@example.com", "password": "wrong-password"}),
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Invalid email or password")


class AuthenticationGateTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            username="gate@example.com",
            email="gate@example.com",
            password="secret123",
            name="Gate Keeper",
        )

    def test_profile_with_valid_token(self):
        for path in ("/api/users/me", "/api/users/profile"):
            response = self.client.get(path, HTTP_AUTHORIZATION=f"Bearer {issue_token(self.user)}")
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json()["email"], "gate@example.com")
            self.assertNotIn("password", response.json())

    def test_missing_header_is_unauthorized(self):
        response = self.client.get("/api/users/me")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Authorization token missing")

    def test_header_without_bearer_prefix_is_unauthorized(self):
        response = self.client.get("/api/users/me", HTTP_AUTHORIZATION=f"Token {issue_token(self.user)}")
        self.assertEqual(response.status_code, 401)

    def test_tampered_token_is_unauthorized(self):
        token = issue_token(self.user)
        response = self.client.get("/api/users/me", HTTP_AUTHORIZATION=f"Bearer {token[:-4]}abcd")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Invalid or expired token")

    def test_expired_token_is_unauthorized(self):
        token = AccessToken.for_user(self.user)
        token.set_exp(lifetime=-timedelta(minutes=1))

        response = self.client.get("/api/users/me", HTTP_AUTHORIZATION=f"Bearer {token}")
        self.assertEqual(response.status_code, 401)

    def test_token_of_deleted_user_is_not_found(self):
        token = issue_token(self.user)
        self.user.delete()

        response = self.client.get("/api/users/me", HTTP_AUTHORIZATION=f"Bearer {token}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "User not found")

    def test_token_lives_seven_days(self):
        payload = decode_token(issue_token(self.user))
        self.assertEqual(payload["exp"] - payload["iat"], int(timedelta(days=7).total_seconds()))


class PublicReadTests(TestCase):
    def setUp(self):
        self.operator = User.objects.create_user(
            username="reader@example.com",
            email="reader@example.com",
            password="secret123",
            role=User.ROLE_PHARMACY,
        )
        self.pharmacy = Pharmacy.objects.create(
            owner=self.operator, name="Corner Pharmacy", address="3 Hill Rd", phone="555-0110"
        )
        self.medicine = Medicine.objects.create(
            pharmacy=self.pharmacy, name="Paracetamol", price=Decimal("5.50"), stock=10
        )
        self.public_paths = [
            "/api/medicines",
            "/api/medicines/search?name=para",
            f"/api/medicines/{self.medicine.id}",
            f"/api/medicines/pharmacy/{self.pharmacy.id}",
            "/api/pharmacies",
            f"/api/pharmacies/{self.pharmacy.id}",
        ]

    def test_expired_token_is_ignored_on_public_reads(self):
        token = AccessToken.for_user(self.operator)
        token.set_exp(lifetime=-timedelta(minutes=1))

        for path in self.public_paths:
            with self.subTest(path=path):
                response = self.client.get(path, HTTP_AUTHORIZATION=f"Bearer {token}")
                self.assertEqual(response.status_code, 200)

    def test_token_of_deleted_user_is_ignored_on_public_reads(self):
        other = User.objects.create_user(username="gone@example.com", email="gone@example.com", password="secret123")
        token = issue_token(other)
        other.delete()

        for path in self.public_paths:
            with self.subTest(path=path):
                response = self.client.get(path, HTTP_AUTHORIZATION=f"Bearer {token}")
                self.assertEqual(response.status_code, 200)

    def test_expired_token_still_rejected_on_writes(self):
        token = AccessToken.for_user(self.operator)
        token.set_exp(lifetime=-timedelta(minutes=1))

        response = self.client.post(
            "/api/medicines",
            data=json.dumps({"name": "Ibuprofen", "price": 3, "stock": 1}),
            content_type="application/json",
            HTTP_AUTHORIZATION=f"Bearer {token}",
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["message"], "Invalid or expired token")

    def test_my_pharmacy_still_requires_a_valid_token(self):
        token = AccessToken.for_user(self.operator)
        token.set_exp(lifetime=-timedelta(minutes=1))

        response = self.client.get("/api/pharmacies/my-pharmacy", HTTP_AUTHORIZATION=f"Bearer {token}")
        self.assertEqual(response.status_code, 401)
