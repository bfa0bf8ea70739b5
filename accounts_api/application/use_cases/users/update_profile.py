# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from accounts_api.application.results import OperationResult
from accounts_api.application.services.credential_store import CredentialStore
from accounts_api.domain.users.entities import ProfileChanges
from accounts_api.domain.users.exceptions import UserNotFoundError
from accounts_api.shared.logging import logger


class UpdateProfileUseCase:
    """Apply profile changes to the account the session belongs to.

    ``user_id`` must come from the authenticated identity, never from the
    request body.
    """

    def __init__(self, *, credentials: CredentialStore) -> None:
        self._credentials = credentials

    def execute(self, user_id: str, changes: ProfileChanges) -> OperationResult:
        if self._credentials.find_by_id(user_id) is None:
            raise UserNotFoundError()

        updated = self._credentials.update(
            user_id,
            name=changes.name,
            email=changes.email,
            password=changes.password,
        )
        logger.info(
            f"users.update_profile: ok user_id={updated.id} "
            f"password_changed={changes.password is not None}"
        )
        return OperationResult(status=HTTPStatus.OK, body=updated.profile().to_dict())
