# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from accounts_api.application.services.credential_store import CredentialStore
from accounts_api.application.services.password_hashing import WerkzeugPasswordHasher
from accounts_api.application.services.session_tokens import SessionTokenService
from accounts_api.application.use_cases.users import (
    AuthorizeRequestUseCase,
    GetProfileUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
    UpdateProfileUseCase,
)
from accounts_api.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from accounts_api.interfaces.http.controllers.users_controller import UsersController
from accounts_api.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self._config.password_hash_method)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def credential_store(self) -> CredentialStore:
        return CredentialStore(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def session_tokens(self) -> SessionTokenService:
        return SessionTokenService(
            self._config.jwt_secret,
            secure_cookies=self._config.secure_cookies,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            credentials=self.credential_store,
            tokens=self.session_tokens,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            credentials=self.credential_store,
            tokens=self.session_tokens,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.session_tokens)

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase()

    @cached_property
    def update_profile_use_case(self) -> UpdateProfileUseCase:
        return UpdateProfileUseCase(credentials=self.credential_store)

    @cached_property
    def authorize_request_use_case(self) -> AuthorizeRequestUseCase:
        return AuthorizeRequestUseCase(
            credentials=self.credential_store,
            tokens=self.session_tokens,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            get_profile_use_case=self.get_profile_use_case,
            update_profile_use_case=self.update_profile_use_case,
            authorize_use_case=self.authorize_request_use_case,
        )
