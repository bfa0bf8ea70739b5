# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from accounts_api.application.results import OperationResult
from accounts_api.application.services.credential_store import CredentialStore
from accounts_api.application.services.session_tokens import SessionTokenService
from accounts_api.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        tokens: SessionTokenService,
    ) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, name: str, email: str, password: str) -> OperationResult:
        user = self._credentials.create(name, email, password)
        logger.info(f"users.register: ok user_id={user.id}")
        return OperationResult(
            status=HTTPStatus.CREATED,
            body=user.profile().to_dict(),
            cookies=(self._tokens.issue(user.id),),
        )
