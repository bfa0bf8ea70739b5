# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from accounts_api.application.services.session_tokens import COOKIE_NAME
from accounts_api.application.use_cases.users.authorize_request import AuthorizeRequestUseCase
from accounts_api.domain.users.entities import SessionIdentity
from accounts_api.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


def current_user() -> SessionIdentity:
    """Return the identity the auth gate attached to this request."""
    return cast(SessionIdentity, g.current_user)


def make_auth_required(authorize: AuthorizeRequestUseCase) -> Callable[[F], F]:
    """Build a view decorator that admits only requests with a valid ``jwt`` cookie.

    A rejected request raises the gate's ``AppError`` before the view runs,
    so the error handler writes the 401 and nothing downstream executes.
    """

    def auth_required(f: F) -> F:
        @wraps(f)
        def inner(*a, **kw):
            token = request.cookies.get(COOKIE_NAME, "")
            if not token:
                logger.warning(
                    f"No session cookie on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
            g.current_user = authorize.execute(token)
            logger.debug(
                f"Auth OK: user={g.current_user.user_id} {request.method} {request.path}"
            )
            return f(*a, **kw)

        return cast(F, inner)

    return auth_required
