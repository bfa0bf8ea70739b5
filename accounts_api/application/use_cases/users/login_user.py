# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from accounts_api.application.results import OperationResult
from accounts_api.application.services.credential_store import CredentialStore
from accounts_api.application.services.session_tokens import SessionTokenService
from accounts_api.domain.users.exceptions import InvalidCredentialsError
from accounts_api.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        tokens: SessionTokenService,
    ) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, email: str, password: str) -> OperationResult:
        user = self._credentials.find_by_email(email)
        # Unknown email and wrong password must stay indistinguishable.
        if user is None or not self._credentials.verify_password(user, password):
            logger.warning("users.login: invalid credentials")
            raise InvalidCredentialsError()

        logger.info(f"users.login: ok user_id={user.id}")
        return OperationResult(
            status=HTTPStatus.OK,
            body=user.profile().to_dict(),
            cookies=(self._tokens.issue(user.id),),
        )
