# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless session tokens.

A session is a HS256 JWT carrying ``userId`` with a fixed 10 day lifetime,
delivered in the ``jwt`` cookie. Nothing is stored server side; the
signature and ``exp`` claim are the only source of truth.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from accounts_api.application.results import CookieDirective
from accounts_api.domain.users.exceptions import InvalidSessionTokenError

COOKIE_NAME = "jwt"
SESSION_LIFETIME = timedelta(days=10)
_ALGORITHM = "HS256"


class SessionTokenService:
    def __init__(
        self,
        secret: str,
        *,
        secure_cookies: bool,
        lifetime: timedelta = SESSION_LIFETIME,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not secret:
            raise ValueError("session token secret must not be empty")
        self._secret = secret
        self._secure_cookies = secure_cookies
        self._lifetime = lifetime
        self._clock = clock or (lambda: datetime.now(UTC))

    def encode(self, user_id: str) -> str:
        now = self._clock()
        claims = {"userId": user_id, "iat": now, "exp": now + self._lifetime}
        return jwt.encode(claims, self._secret, algorithm=_ALGORITHM)

    def decode(self, token: str) -> str:
        """Return the user id embedded in ``token``.

        Raises :class:`InvalidSessionTokenError` for a bad signature, a
        tampered or malformed token, missing claims, or an expired token.
        Expiry is judged against the same clock that stamps new tokens.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[_ALGORITHM],
                options={
                    "require": ["exp", "userId"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.PyJWTError as exc:
            raise InvalidSessionTokenError(str(exc)) from exc

        expires_at = claims["exp"]
        if isinstance(expires_at, bool) or not isinstance(expires_at, int | float):
            raise InvalidSessionTokenError("exp claim is not a timestamp")
        if self._clock().timestamp() >= expires_at:
            raise InvalidSessionTokenError("Signature has expired")

        user_id = claims.get("userId")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidSessionTokenError("userId claim is not a string")
        return user_id

    def issue(self, user_id: str) -> CookieDirective:
        return CookieDirective(
            name=COOKIE_NAME,
            value=self.encode(user_id),
            http_only=True,
            secure=self._secure_cookies,
            same_site="Strict",
            max_age=int(self._lifetime.total_seconds()),
        )

    def clear(self) -> CookieDirective:
        return CookieDirective(name=COOKIE_NAME, value="", http_only=True, expires=0)
