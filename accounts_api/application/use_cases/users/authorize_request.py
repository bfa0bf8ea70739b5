# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from accounts_api.application.services.credential_store import CredentialStore
from accounts_api.application.services.session_tokens import SessionTokenService
from accounts_api.domain.users.entities import SessionIdentity
from accounts_api.domain.users.exceptions import (
    InvalidSessionTokenError,
    NotAuthorizedInvalidTokenError,
    NotAuthorizedNoTokenError,
)
from accounts_api.shared.logging import logger


class AuthorizeRequestUseCase:
    """Resolve a session cookie value to the identity it was issued for.

    Only the token decides admission. A verified token whose account has
    since disappeared is still admitted, with ``profile`` left empty.
    """

    def __init__(
        self,
        *,
        credentials: CredentialStore,
        tokens: SessionTokenService,
    ) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, token: str | None) -> SessionIdentity:
        if not token:
            raise NotAuthorizedNoTokenError()

        try:
            user_id = self._tokens.decode(token)
        except InvalidSessionTokenError as exc:
            logger.warning(f"auth.gate: token rejected ({exc})")
            raise NotAuthorizedInvalidTokenError() from exc

        user = self._credentials.find_by_id(user_id)
        if user is None:
            logger.warning(f"auth.gate: token for unknown user_id={user_id}")
            return SessionIdentity(user_id=user_id)

        return SessionIdentity(user_id=user_id, profile=user.profile())
