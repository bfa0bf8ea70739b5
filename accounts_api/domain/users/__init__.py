# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import ProfileChanges, SessionIdentity, User, UserProfile
from .exceptions import (
    InvalidCredentialsError,
    InvalidSessionTokenError,
    InvalidUserDataError,
    NotAuthorizedInvalidTokenError,
    NotAuthorizedNoTokenError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, UserRepository

__all__ = [
    "InvalidCredentialsError",
    "InvalidSessionTokenError",
    "InvalidUserDataError",
    "NotAuthorizedInvalidTokenError",
    "NotAuthorizedNoTokenError",
    "PasswordHasher",
    "ProfileChanges",
    "SessionIdentity",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserProfile",
    "UserRepository",
]
