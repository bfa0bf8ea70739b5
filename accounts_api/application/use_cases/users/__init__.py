# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .authorize_request import AuthorizeRequestUseCase
from .get_profile import GetProfileUseCase
from .login_user import LoginUserUseCase
from .logout_user import LogoutUserUseCase
from .register_user import RegisterUserUseCase
from .update_profile import UpdateProfileUseCase

__all__ = [
    "AuthorizeRequestUseCase",
    "GetProfileUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "UpdateProfileUseCase",
]
