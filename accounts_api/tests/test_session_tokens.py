from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from accounts_api.application.services.session_tokens import (
    COOKIE_NAME,
    SESSION_LIFETIME,
    SessionTokenService,
)
from accounts_api.domain.users.exceptions import InvalidSessionTokenError

SECRET = "unit-test-secret-0123456789abcdefgh"


def test_issue_builds_strict_http_only_cookie() -> None:
    service = SessionTokenService(SECRET, secure_cookies=True)

    cookie = service.issue("test_user_id")

    assert cookie.name == COOKIE_NAME == "jwt"
    assert cookie.http_only is True
    assert cookie.secure is True
    assert cookie.same_site == "Strict"
    assert cookie.max_age == 10 * 24 * 60 * 60
    claims = jwt.decode(cookie.value, SECRET, algorithms=["HS256"])
    assert claims["userId"] == "test_user_id"


def test_issue_is_not_secure_in_development() -> None:
    service = SessionTokenService(SECRET, secure_cookies=False)

    assert service.issue("u1").secure is False


def test_token_expires_after_ten_days() -> None:
    issued_at = datetime(2024, 1, 1, tzinfo=UTC)
    service = SessionTokenService(SECRET, secure_cookies=True, clock=lambda: issued_at)

    claims = jwt.decode(
        service.encode("u1"), SECRET, algorithms=["HS256"], options={"verify_exp": False}
    )

    assert claims["exp"] - claims["iat"] == int(SESSION_LIFETIME.total_seconds())


def test_decode_returns_user_id() -> None:
    service = SessionTokenService(SECRET, secure_cookies=True)

    assert service.decode(service.encode("abc123")) == "abc123"


def test_decode_rejects_expired_token() -> None:
    issued_at = datetime.now(UTC) - timedelta(days=11)
    stale = SessionTokenService(SECRET, secure_cookies=True, clock=lambda: issued_at)
    service = SessionTokenService(SECRET, secure_cookies=True)

    with pytest.raises(InvalidSessionTokenError):
        service.decode(stale.encode("u1"))


def test_decode_judges_expiry_with_injected_clock() -> None:
    now = datetime(2024, 1, 1, tzinfo=UTC)
    service = SessionTokenService(SECRET, secure_cookies=True, clock=lambda: now)
    token = service.encode("u1")

    now += SESSION_LIFETIME - timedelta(seconds=1)
    assert service.decode(token) == "u1"

    now += timedelta(seconds=1)
    with pytest.raises(InvalidSessionTokenError):
        service.decode(token)


def test_decode_rejects_non_numeric_expiry() -> None:
    service = SessionTokenService(SECRET, secure_cookies=True)
    token = jwt.encode({"userId": "u1", "exp": "tomorrow"}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidSessionTokenError):
        service.decode(token)


def test_decode_rejects_foreign_signature() -> None:
    other = SessionTokenService("another-secret-0123456789abcdefghij", secure_cookies=True)
    service = SessionTokenService(SECRET, secure_cookies=True)

    with pytest.raises(InvalidSessionTokenError):
        service.decode(other.encode("u1"))


def test_decode_rejects_tampered_payload() -> None:
    service = SessionTokenService(SECRET, secure_cookies=True)
    header, _, signature = service.encode("victim").split(".")
    _, forged_payload, _ = SessionTokenService(
        "attacker-secret-0123456789abcdefgh", secure_cookies=True
    ).encode("attacker").split(".")

    with pytest.raises(InvalidSessionTokenError):
        service.decode(f"{header}.{forged_payload}.{signature}")


@pytest.mark.parametrize("token", ["invalid-token", "a.b.c", ""])
def test_decode_rejects_malformed_token(token: str) -> None:
    service = SessionTokenService(SECRET, secure_cookies=True)

    with pytest.raises(InvalidSessionTokenError):
        service.decode(token)


def test_decode_requires_user_id_claim() -> None:
    service = SessionTokenService(SECRET, secure_cookies=True)
    token = jwt.encode(
        {"sub": "u1", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidSessionTokenError):
        service.decode(token)


def test_clear_overwrites_cookie_with_epoch_expiry() -> None:
    cookie = SessionTokenService(SECRET, secure_cookies=True).clear()

    assert cookie.name == "jwt"
    assert cookie.value == ""
    assert cookie.http_only is True
    assert cookie.expires == 0


def test_empty_secret_is_rejected() -> None:
    with pytest.raises(ValueError):
        SessionTokenService("", secure_cookies=True)
