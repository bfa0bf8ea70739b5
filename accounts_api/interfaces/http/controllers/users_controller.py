# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, request
from pydantic import ValidationError

from accounts_api.application.use_cases.users import (
    AuthorizeRequestUseCase,
    GetProfileUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
    UpdateProfileUseCase,
)
from accounts_api.domain.users.entities import ProfileChanges
from accounts_api.domain.users.exceptions import (
    InvalidCredentialsError,
    InvalidUserDataError,
)
from accounts_api.interfaces.http.auth import current_user, make_auth_required
from accounts_api.interfaces.http.dto.users import (
    LoginRequestDTO,
    RegisterRequestDTO,
    UpdateProfileRequestDTO,
)
from accounts_api.interfaces.http.transport import to_response
from accounts_api.shared.errors.validation import format_pydantic_errors


def _request_payload() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


class UsersController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        get_profile_use_case: GetProfileUseCase,
        update_profile_use_case: UpdateProfileUseCase,
        authorize_use_case: AuthorizeRequestUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._get_profile_use_case = get_profile_use_case
        self._update_profile_use_case = update_profile_use_case
        self._auth_required = make_auth_required(authorize_use_case)

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(_request_payload())
        except ValidationError as exc:
            raise InvalidUserDataError(context=format_pydantic_errors(exc)) from exc

        result = self._register_use_case.execute(dto.name, dto.email, dto.password)
        return to_response(result)

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(_request_payload())
        except ValidationError as exc:
            raise InvalidCredentialsError() from exc

        result = self._login_use_case.execute(dto.email, dto.password)
        return to_response(result)

    def logout(self) -> tuple[Response, int]:
        return to_response(self._logout_use_case.execute())

    def get_profile(self) -> tuple[Response, int]:
        return to_response(self._get_profile_use_case.execute(current_user()))

    def update_profile(self) -> tuple[Response, int]:
        try:
            dto = UpdateProfileRequestDTO.model_validate(_request_payload())
        except ValidationError as exc:
            raise InvalidUserDataError(context=format_pydantic_errors(exc)) from exc

        changes = ProfileChanges(name=dto.name, email=dto.email, password=dto.password)
        result = self._update_profile_use_case.execute(current_user().user_id, changes)
        return to_response(result)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("/", view_func=self.register, methods=["POST"], strict_slashes=False)
        bp.add_url_rule("/auth", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule(
            "/profile",
            endpoint="get_profile",
            view_func=self._auth_required(self.get_profile),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/profile",
            endpoint="update_profile",
            view_func=self._auth_required(self.update_profile),
            methods=["PUT"],
        )
        return bp
