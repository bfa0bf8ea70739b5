# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from accounts_api.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    default_message = "User already exists"


class InvalidUserDataError(DomainError):
    default_message = "Invalid User Data"


class InvalidCredentialsError(DomainError):
    default_message = "Invalid email or password"
    default_status = HTTPStatus.UNAUTHORIZED


class NotAuthorizedNoTokenError(DomainError):
    default_message = "Not authorized, no token"
    default_status = HTTPStatus.UNAUTHORIZED


class NotAuthorizedInvalidTokenError(DomainError):
    default_message = "Not authorized, invalid token"
    default_status = HTTPStatus.UNAUTHORIZED


class UserNotFoundError(DomainError):
    default_message = "User not found"
    default_status = HTTPStatus.NOT_FOUND


class InvalidSessionTokenError(Exception):
    """Raised by the token service when a session token cannot be trusted."""
