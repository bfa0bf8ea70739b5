# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from accounts_api.application.results import OperationResult
from accounts_api.domain.users.entities import SessionIdentity
from accounts_api.domain.users.exceptions import UserNotFoundError


class GetProfileUseCase:
    def execute(self, identity: SessionIdentity) -> OperationResult:
        if identity.profile is None:
            raise UserNotFoundError()

        return OperationResult(
            status=HTTPStatus.OK,
            body={"message": "User Profile", "user": identity.profile.to_dict()},
        )
