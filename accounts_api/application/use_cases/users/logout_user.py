"""Use-case for discarding the session cookie."""

from __future__ import annotations

from http import HTTPStatus

from accounts_api.application.results import OperationResult
from accounts_api.application.services.session_tokens import SessionTokenService


class LogoutUserUseCase:
    def __init__(self, *, tokens: SessionTokenService) -> None:
        self._tokens = tokens

    def execute(self) -> OperationResult:
        return OperationResult(
            status=HTTPStatus.OK,
            body={"message": "User Logged Out"},
            cookies=(self._tokens.clear(),),
        )
