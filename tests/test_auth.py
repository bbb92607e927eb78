import unittest
from unittest import mock

from sqlalchemy.exc import OperationalError

from lottery_admin import security
from lottery_admin.db import session_scope
from lottery_admin.models import Account
from tests.support import ADMIN_EMAIL, ADMIN_PASSWORD, AppTestCase


class ApiSignInTests(AppTestCase):
    def test_login_returns_identity_with_role(self):
        self.create_account()
        response = self.sign_in()
        self.assertEqual(response.status_code, 200)
        body = response.get_json()
        self.assertTrue(body["success"])
        self.assertEqual(body["data"]["user"]["email"], ADMIN_EMAIL)
        self.assertEqual(body["data"]["user"]["role"], "admin")
        self.assertIsNotNone(body["data"]["signed_in_at"])

    def test_email_lookup_is_case_insensitive(self):
        self.create_account()
        self.assertEqual(self.sign_in(email="Admin@Example.com").status_code, 200)

    def test_wrong_password_is_rejected(self):
        self.create_account()
        response = self.sign_in(password="nope")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.get_json()["error"]["message"], "Invalid login credentials")

    def test_unknown_account_is_rejected(self):
        response = self.sign_in(email="ghost@example.com")
        self.assertEqual(response.status_code, 401)

    def test_malformed_payload_is_a_validation_error(self):
        response = self.client.post("/api/auth/login", json={"email": "not-an-email", "password": ""})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"]["code"], "validation_error")

    def test_session_endpoint_follows_sign_in_and_sign_out(self):
        self.assertEqual(self.client.get("/api/auth/session").status_code, 401)

        self.sign_in_as_admin()
        current = self.client.get("/api/auth/session")
        self.assertEqual(current.status_code, 200)
        self.assertEqual(current.get_json()["data"]["user"]["email"], ADMIN_EMAIL)

        self.assertEqual(self.client.post("/api/auth/logout").status_code, 200)
        gone = self.client.get("/api/auth/session")
        self.assertEqual(gone.status_code, 401)
        self.assertEqual(gone.get_json()["error"]["message"], "Not signed in")


class AdminGateTests(AppTestCase):
    def test_anonymous_requests_get_401(self):
        for path in ("/api/draws", "/api/winning-numbers", "/api/users", "/api/tickets"):
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertEqual(response.status_code, 401)
                self.assertEqual(response.get_json()["error"]["message"], "Authentication failed")

    def test_signed_in_non_admin_gets_403(self):
        self.create_account(email="staff@example.com", role="editor")
        self.assertEqual(self.sign_in(email="staff@example.com").status_code, 200)

        response = self.client.get("/api/draws")
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.get_json()["error"]["message"], "Access denied: Admin only")

    def test_account_without_role_gets_403(self):
        self.create_account(email="norole@example.com", role=None)
        self.sign_in(email="norole@example.com")
        self.assertEqual(self.client.get("/api/tickets").status_code, 403)

    def test_admin_gets_through(self):
        self.sign_in_as_admin()
        self.assertEqual(self.client.get("/api/draws").status_code, 200)

    def test_admin_role_is_configurable(self):
        self.app.config["ADMIN_ROLE"] = "superuser"
        self.sign_in_as_admin()
        self.assertEqual(self.client.get("/api/draws").status_code, 403)

    def test_gate_blocks_mutations_before_they_run(self):
        response = self.client.post("/api/draws", json={"draw_date": "2025-01-05", "jackpot_amount": 10})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(self.client.get("/health").status_code, 200)


class DashboardAccessTests(AppTestCase):
    def test_anonymous_visitor_sees_authentication_failed(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 401)
        page = response.get_data(as_text=True)
        self.assertIn("Authentication failed", page)
        self.assertIn("Log in", page)
        self.assertNotIn("Adamas Lottery Admin Panel", page)

    def test_non_admin_sees_access_denied(self):
        self.create_account(email="staff@example.com", role="editor")
        self.sign_in(email="staff@example.com")
        response = self.client.get("/")
        self.assertEqual(response.status_code, 403)
        self.assertIn("Access denied: Admin only", response.get_data(as_text=True))

    def test_admin_sees_dashboard(self):
        self.sign_in_as_admin()
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("Adamas Lottery Admin Panel", response.get_data(as_text=True))

    def test_identity_lookup_failure_is_treated_as_signed_out(self):
        self.sign_in_as_admin()
        with mock.patch.object(
            security._auth_service, "get_user", side_effect=OperationalError("SELECT", {}, Exception("down"))
        ):
            response = self.client.get("/")
        self.assertEqual(response.status_code, 401)
        self.assertIn("Authentication failed", response.get_data(as_text=True))

    def test_non_object_metadata_counts_as_no_role(self):
        identity = self.create_account()
        self.assertEqual(self.sign_in().status_code, 200)
        with session_scope(self.app) as session:
            session.get(Account, identity.id).user_metadata = ["admin"]

        self.assertEqual(self.client.get("/").status_code, 403)
        self.assertEqual(self.client.get("/api/draws").status_code, 403)
        current = self.client.get("/api/auth/session")
        self.assertEqual(current.status_code, 200)
        self.assertIsNone(current.get_json()["data"]["user"]["role"])


class LoginPageTests(AppTestCase):
    def test_form_renders(self):
        response = self.client.get("/login")
        self.assertEqual(response.status_code, 200)
        self.assertIn("Adamas Lottery Admin Login", response.get_data(as_text=True))

    def test_good_credentials_redirect_to_dashboard(self):
        self.create_account()
        response = self.client.post("/login", data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        self.assertEqual(response.status_code, 302)
        self.assertEqual(self.client.get("/").status_code, 200)

    def test_bad_credentials_rerender_form_with_message(self):
        self.create_account()
        response = self.client.post("/login", data={"email": ADMIN_EMAIL, "password": "wrong"})
        self.assertEqual(response.status_code, 401)
        page = response.get_data(as_text=True)
        self.assertIn("Invalid login credentials", page)
        self.assertIn(ADMIN_EMAIL, page)

    def test_invalid_input_is_rejected(self):
        response = self.client.post("/login", data={"email": "nope", "password": ""})
        self.assertEqual(response.status_code, 400)

    def test_logout_clears_session_and_redirects(self):
        self.sign_in_as_admin()
        response = self.client.post("/logout")
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.headers["Location"].endswith("/login"))
        self.assertEqual(self.client.get("/").status_code, 401)


if __name__ == "__main__":
    unittest.main()
