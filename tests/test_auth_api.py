"""Phone login, code verification and session tokens"""

from datetime import timedelta

import pytest
from jose import jwt

from conftest import NEW_PHONE, USER_PHONE, WORKER_PHONE, auth_headers
from qleanme.auth import ACCOUNT_USER, create_access_token, decode_access_token
from qleanme.config import JWT_ALGORITHM, SECRET_KEY


class TestLogin:
    def test_existing_user(self, client, user):
        response = client.post("/auth/login", json={"phone_number": "(604) 555-1234"})
        assert response.status_code == 200
        body = response.json()
        assert body["account_type"] == "user"
        assert body["message"] == "User found: Jane Doe"
        assert body["phone_number"] == USER_PHONE

    def test_worker(self, client, worker):
        response = client.post("/auth/login", json={"phone_number": "604-555-9876"})
        body = response.json()
        assert body["account_type"] == "worker"
        assert body["message"] == "Worker found: Sam Cleaner is a worker"

    def test_unknown_number(self, client):
        response = client.post("/auth/login", json={"phone_number": "6045550000"})
        body = response.json()
        assert body["account_type"] == "new_user"
        assert body["message"] == "Opa! Something new"

    def test_user_wins_over_worker(self, client, user, db_session, worker):
        worker.phone_number = USER_PHONE
        db_session.commit()
        response = client.post("/auth/login", json={"phone_number": USER_PHONE})
        assert response.json()["account_type"] == "user"

    def test_invalid_phone(self, client):
        response = client.post("/auth/login", json={"phone_number": "555-1234"})
        assert response.status_code == 422
        assert "Phone number must be 10 digits" in response.text


class TestVerify:
    @pytest.mark.parametrize(
        "fixture,phone,target",
        [
            ("user", USER_PHONE, "registered_user_dashboard"),
            ("worker", WORKER_PHONE, "contractor_dashboard"),
            (None, NEW_PHONE, "registration"),
        ],
    )
    def test_navigation_target(self, request, client, fixture, phone, target):
        if fixture:
            request.getfixturevalue(fixture)
        response = client.post("/auth/verify", json={"phone_number": phone, "code": "123456"})
        assert response.status_code == 200
        body = response.json()
        assert body["navigation_target"] == target
        assert body["token_type"] == "bearer"
        assert decode_access_token(body["access_token"])["sub"] == phone

    def test_wrong_code(self, client, user):
        response = client.post("/auth/verify", json={"phone_number": USER_PHONE, "code": "654321"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Incorrect verification code"

    def test_code_must_be_six_digits(self, client):
        response = client.post("/auth/verify", json={"phone_number": USER_PHONE, "code": "1234"})
        assert response.status_code == 422

    def test_resend(self, client):
        response = client.post("/auth/resend", json={"phone_number": NEW_PHONE})
        assert response.status_code == 200
        assert response.json()["message"] == "Verification code resent"


class TestSession:
    def test_status(self, client, user_headers):
        response = client.get("/auth/status", headers=user_headers)
        assert response.status_code == 200
        assert response.json() == {
            "authenticated": True,
            "phone_number": USER_PHONE,
            "account_type": "user",
        }

    def test_missing_token(self, client):
        assert client.get("/auth/status").status_code in (401, 403)

    def test_garbage_token(self, client):
        response = client.get("/auth/status", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    def test_expired_token(self, client):
        token = create_access_token(USER_PHONE, ACCOUNT_USER, expires_delta=timedelta(seconds=-10))
        response = client.get("/auth/status", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_claims(self):
        token = create_access_token(USER_PHONE, ACCOUNT_USER)
        claims = jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])
        assert claims["sub"] == USER_PHONE
        assert claims["account_type"] == ACCOUNT_USER
        assert claims["exp"] > claims["iat"]

    def test_logout(self, client):
        response = client.post("/auth/logout")
        assert response.status_code == 200

    def test_user_endpoint_rejects_unregistered_phone(self, client):
        response = client.get("/users/me", headers=auth_headers(NEW_PHONE, "new_user"))
        assert response.status_code == 401
        assert response.json()["detail"] == "User not found. Please log in again."
