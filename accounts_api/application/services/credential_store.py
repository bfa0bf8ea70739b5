# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from accounts_api.domain.users.entities import User
from accounts_api.domain.users.exceptions import UserAlreadyExistsError
from accounts_api.domain.users.repositories import PasswordHasher, UserRepository


class CredentialStore:
    """User persistence plus password hashing.

    Uniqueness of ``email`` is ultimately enforced by the repository (a
    unique constraint); the lookup in :meth:`create` only spares a hash
    computation for the common duplicate case.
    """

    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def find_by_email(self, email: str) -> User | None:
        return self._users.find_by_email(email)

    def find_by_id(self, user_id: str) -> User | None:
        return self._users.find_by_id(user_id)

    def create(self, name: str, email: str, password: str) -> User:
        if self._users.find_by_email(email) is not None:
            raise UserAlreadyExistsError()
        now = datetime.now(UTC)
        user = User(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            password_hash=self._password_hasher.hash(password),
            created_at=now,
            updated_at=now,
        )
        return self._users.add(user)

    def update(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> User:
        password_hash = self._password_hasher.hash(password) if password else None
        return self._users.update(
            user_id, name=name, email=email, password_hash=password_hash
        )

    def verify_password(self, user: User, password: str) -> bool:
        return self._password_hasher.verify(password, user.password_hash)
