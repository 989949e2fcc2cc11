import json

from django.test import TestCase

from apps.accounts.models import User
from apps.accounts.tokens import issue_token
from apps.pharmacies.models import Pharmacy


def auth_header(user):
    return {"HTTP_AUTHORIZATION": f"Bearer {issue_token(user)}"}


class UserManagementTests(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user(
            username="admin@example.com",
            email="admin@example.com",
            password="pass12345",
            role=User.ROLE_ADMIN,
        )
        self.alice = User.objects.create_user(
            username="alice@example.com",
            email="alice@example.com",
            password="pass12345",
            name="Alice",
        )
        self.bob = User.objects.create_user(
            username="bob@example.com",
            email="bob@example.com",
            password="pass12345",
            name="Bob",
        )

    def test_admin_lists_everyone_and_users_only_see_themselves(self):
        admin_response = self.client.get("/api/users", **auth_header(self.admin))
        self.assertEqual(admin_response.status_code, 200)
        self.assertEqual(len(admin_response.json()), 3)

        alice_response = self.client.get("/api/users/", **auth_header(self.alice))
        self.assertEqual(alice_response.status_code, 200)
        self.assertEqual([row["id"] for row in alice_response.json()], [self.alice.id])

    def test_user_can_update_own_profile(self):
        response = self.client.patch(
            f"/api/users/{self.alice.id}",
            data=json.dumps({"name": "Alice Smith", "address": "12 Main St"}),
            content_type="application/json",
            **auth_header(self.alice),
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["name"], "Alice Smith")

        self.alice.refresh_from_db()
        self.assertEqual(self.alice.address, "12 Main St")

    def test_user_cannot_modify_another_user(self):
        update_response = self.client.put(
            f"/api/users/{self.bob.id}/",
            data=json.dumps({"name": "Hijacked"}),
            content_type="application/json",
            **auth_header(self.alice),
        )
        self.assertEqual(update_response.status_code, 403)

        delete_response = self.client.delete(f"/api/users/{self.bob.id}", **auth_header(self.alice))
        self.assertEqual(delete_response.status_code, 403)

        self.bob.refresh_from_db()
        self.assertEqual(self.bob.name, "Bob")

    def test_only_admin_can_change_roles(self):
        response = self.client.patch(
            f"/api/users/{self.alice.id}",
            data=json.dumps({"role": User.ROLE_ADMIN}),
            content_type="application/json",
            **auth_header(self.alice),
        )
        self.assertEqual(response.status_code, 400)
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.role, User.ROLE_USER)

        admin_response = self.client.patch(
            f"/api/users/{self.alice.id}",
            data=json.dumps({"role": User.ROLE_PHARMACY}),
            content_type="application/json",
            **auth_header(self.admin),
        )
        self.assertEqual(admin_response.status_code, 200)
        self.alice.refresh_from_db()
        self.assertEqual(self.alice.role, User.ROLE_PHARMACY)

    def test_email_change_keeps_login_working(self):
        response = self.client.patch(
            f"/api/users/{self.alice.id}",
            data=json.dumps({"email": "alice.new@example.com"}),
            content_type="application/json",
            **auth_header(self.alice),
        )
        self.assertEqual(response.status_code, 200)

        login_response = self.client.post(
            "/api/users/login",
            data=json.dumps({"email": "alice.new@example.com", "password": "pass12345"}),
            content_type="application/json",
        )
        self.assertEqual(login_response.status_code, 200)

    def test_email_change_to_taken_address_is_rejected(self):
        response = self.client.patch(
            f"/api/users/{self.alice.id}",
            data=json.dumps({"email": "bob@example.com"}),
            content_type="application/json",
            **auth_header(self.alice),
        )
        self.assertEqual(response.status_code, 400)

    def test_admin_deletes_user_and_second_delete_is_not_found(self):
        first = self.client.delete(f"/api/users/{self.bob.id}", **auth_header(self.admin))
        self.assertEqual(first.status_code, 200)
        self.assertEqual(first.json()["message"], "User deleted successfully")
        self.assertFalse(User.objects.filter(id=self.bob.id).exists())

        second = self.client.delete(f"/api/users/{self.bob.id}", **auth_header(self.admin))
        self.assertEqual(second.status_code, 404)

    def test_user_can_delete_own_account(self):
        response = self.client.delete(f"/api/users/{self.alice.id}", **auth_header(self.alice))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(User.objects.filter(id=self.alice.id).exists())

    def test_change_password(self):
        wrong = self.client.post(
            "/api/users/change-password",
            data=json.dumps({"current_password": "nope", "new_password": "newpass123"}),
            content_type="application/json",
            **auth_header(self.alice),
        )
        self.assertEqual(wrong.status_code, 400)

        response = self.client.post(
            "/api/users/change-password",
            data=json.dumps({"current_password": "pass12345", "new_password": "newpass123"}),
            content_type="application/json",
            **auth_header(self.alice),
        )
        self.assertEqual(response.status_code, 200)

        self.alice.refresh_from_db()
        self.assertTrue(self.alice.check_password("newpass123"))

    def test_deleting_owner_leaves_pharmacy_in_place(self):
        pharmacy = Pharmacy.objects.create(owner=self.bob, name="Bob's Chemist", address="7 Lake Rd", phone="555-0177")

        response = self.client.delete(f"/api/users/{self.bob.id}", **auth_header(self.admin))
        self.assertEqual(response.status_code, 200)
        self.assertTrue(Pharmacy.objects.filter(id=pharmacy.id).exists())

        listing = self.client.get("/api/pharmacies")
        self.assertEqual(listing.status_code, 200)
        self.assertEqual(len(listing.json()), 1)
        self.assertIsNone(listing.json()[0]["owner"])

        detail = self.client.get(f"/api/pharmacies/{pharmacy.id}")
        self.assertIsNone(detail.json()["owner"])
