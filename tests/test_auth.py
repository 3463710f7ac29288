"""
Tests for account registration, login and token handling.

Covers:
- Registration (validation, duplicate emails, token issuing)
- Login (bad credentials, deactivated accounts, last_login tracking)
- Bearer token verification on protected routes
"""

import uuid
from datetime import timedelta

import jwt
import pytest

from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError, ConflictError
from core.utils.helpers import utcnow
from domain.enums import UserRole
from domain.models import User
from domain.schemas.auth_schemas import RegisterRequest
from services import AuthService
from test_fixtures import (
    DEFAULT_PASSWORD,
    auth_headers,
    create_user,
    unique_email,
)


# =============================================================================
# REGISTRATION
# =============================================================================


def test_register_returns_token_and_user(db_client):
    email = unique_email("maria")
    resp = db_client.post(
        "/api/auth/register",
        json={
            "email": email,
            "password": "secret123",
            "name": "Maria Lopez",
            "role": "PATIENT",
            "phone_number": "+1-555-0100",
        },
    )

    assert resp.status_code == 201
    body = resp.json()
    assert body["user"]["email"] == email
    assert body["user"]["role"] == "PATIENT"

    claims = AuthService.decode_access_token(body["token"])
    assert claims["sub"] == body["user"]["id"]
    assert claims["email"] == email
    assert claims["role"] == "PATIENT"


def test_register_short_password_is_rejected(db_client):
    resp = db_client.post(
        "/api/auth/register",
        json={
            "email": unique_email(),
            "password": "12345",
            "name": "Short Pass",
            "role": "CAREGIVER",
        },
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "Password must be at least 6 characters"}


def test_register_duplicate_email_conflicts(db_client, db_session):
    existing = create_user(db_session, UserRole.PROVIDER)

    resp = db_client.post(
        "/api/auth/register",
        json={
            "email": existing.email.upper(),
            "password": "another-secret",
            "name": "Someone Else",
            "role": "PROVIDER",
        },
    )

    assert resp.status_code == 409
    assert resp.json()["error"] == "User with this email already exists"


def test_register_missing_fields_is_bad_request(db_client):
    resp = db_client.post("/api/auth/register", json={"email": unique_email()})

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Request validation failed"
    assert isinstance(body["details"], list) and body["details"]


def test_register_service_stores_hashed_password(db_session):
    data = RegisterRequest(
        email=unique_email("hash"),
        password="plain-text-pw",
        name="Hash Check",
        role=UserRole.INSURER,
    )

    result = AuthService.register(db_session, data)
    user = db_session.get(User, result.user.id)

    assert user.password_hash != "plain-text-pw"
    assert AuthService.verify_password(user.password_hash, "plain-text-pw")


def test_register_service_rejects_duplicate(db_session):
    user = create_user(db_session)
    data = RegisterRequest(
        email=user.email, password="secret123", name="Dup", role=UserRole.PATIENT
    )

    with pytest.raises(ConflictError):
        AuthService.register(db_session, data)


def test_register_service_rejects_short_password(db_session):
    data = RegisterRequest(
        email=unique_email(), password="abc", name="Short", role=UserRole.PATIENT
    )

    with pytest.raises(ServiceValidationError):
        AuthService.register(db_session, data)


# =============================================================================
# LOGIN
# =============================================================================


def test_login_success_updates_last_login(db_client, db_session):
    user = create_user(db_session, UserRole.CAREGIVER)
    assert user.last_login is None

    resp = db_client.post(
        "/api/auth/login", json={"email": user.email, "password": DEFAULT_PASSWORD}
    )

    assert resp.status_code == 200
    assert resp.json()["user"]["id"] == str(user.id)

    db_session.expire_all()
    assert db_session.get(User, user.id).last_login is not None


def test_login_wrong_password(db_client, db_session):
    user = create_user(db_session)

    resp = db_client.post(
        "/api/auth/login", json={"email": user.email, "password": "not-the-password"}
    )

    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid email or password"}


def test_login_unknown_email(db_client):
    resp = db_client.post(
        "/api/auth/login", json={"email": unique_email("ghost"), "password": "secret123"}
    )

    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid email or password"}


def test_login_deactivated_account(db_client, db_session):
    user = create_user(db_session, is_active=False)

    resp = db_client.post(
        "/api/auth/login", json={"email": user.email, "password": DEFAULT_PASSWORD}
    )

    assert resp.status_code == 403
    assert resp.json() == {"error": "Account is deactivated"}


# =============================================================================
# PROFILE / TOKEN VERIFICATION
# =============================================================================


def test_profile_with_valid_token(db_client, db_session):
    user = create_user(db_session, UserRole.PROVIDER, name="Dr. Aisha Khan")

    resp = db_client.get("/api/auth/profile", headers=auth_headers(user))

    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == str(user.id)
    assert body["name"] == "Dr. Aisha Khan"
    assert body["role"] == "PROVIDER"
    assert "password_hash" not in body


def test_profile_without_token(db_client):
    resp = db_client.get("/api/auth/profile")

    assert resp.status_code == 401
    assert resp.json() == {"error": "No token provided"}


def test_profile_with_garbage_token(db_client):
    resp = db_client.get(
        "/api/auth/profile", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid token"}


def test_profile_with_expired_token(db_client, db_session):
    user = create_user(db_session)
    expired = jwt.encode(
        {"sub": str(user.id), "exp": utcnow() - timedelta(minutes=1)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    resp = db_client.get(
        "/api/auth/profile", headers={"Authorization": f"Bearer {expired}"}
    )

    assert resp.status_code == 401
    assert resp.json() == {"error": "Token has expired"}


def test_token_for_deactivated_user_is_rejected(db_client, db_session):
    user = create_user(db_session)
    headers = auth_headers(user)

    user.is_active = False
    db_session.commit()

    resp = db_client.get("/api/auth/profile", headers=headers)

    assert resp.status_code == 401


def test_get_profile_missing_user(db_session):
    with pytest.raises(NotFoundError):
        AuthService.get_profile(db_session, uuid.uuid4())
