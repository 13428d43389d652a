"""Tests for session token issuing and verification."""
import time

import jwt

from middleware.auth import authorize
from services.exceptions import UnauthorizedError
from utils.jwt import ALGORITHM, SECRET_KEY, create_jwt, get_email_from_token, verify_jwt

import pytest


def test_create_jwt_embeds_email_without_expiry() -> None:
    token = create_jwt("alice@example.com")
    payload = verify_jwt(token)
    assert payload == {"email": "alice@example.com"}
    assert "exp" not in payload


@pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
def test_verify_jwt_rejects_absent_or_malformed(token) -> None:
    assert verify_jwt(token) is None


def test_verify_jwt_rejects_wrong_signature() -> None:
    token = jwt.encode({"email": "alice@example.com"}, "other-secret", algorithm=ALGORITHM)
    assert verify_jwt(token) is None


def test_verify_jwt_rejects_expired_token() -> None:
    token = jwt.encode(
        {"email": "alice@example.com", "exp": int(time.time()) - 60},
        SECRET_KEY,
        algorithm=ALGORITHM,
    )
    assert verify_jwt(token) is None


def test_get_email_from_token_requires_email_claim() -> None:
    token = jwt.encode({"sub": "1"}, SECRET_KEY, algorithm=ALGORITHM)
    assert get_email_from_token(token) is None
    assert get_email_from_token(create_jwt("bob@example.com")) == "bob@example.com"


def test_authorize_returns_email() -> None:
    token = create_jwt("alice@example.com")
    assert authorize(f"Bearer {token}") == "alice@example.com"
    assert authorize(f"bearer {token}") == "alice@example.com"


@pytest.mark.parametrize(
    "header",
    [
        None,
        "",
        "Bearer",
        "Token abc",
        "Bearer abc def",
        "Bearer not-a-jwt",
    ],
)
def test_authorize_rejects_bad_headers(header) -> None:
    with pytest.raises(UnauthorizedError) as exc_info:
        authorize(header)
    assert exc_info.value.message == "Invalid JWT Token"


def test_authorize_does_not_check_user_exists() -> None:
    # Token verification is purely cryptographic
    token = create_jwt("nobody@example.com")
    assert authorize(f"Bearer {token}") == "nobody@example.com"
