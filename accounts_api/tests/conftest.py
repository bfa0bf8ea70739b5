from __future__ import annotations

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="accounts-api-tests-")

# Settings are read once at import time by the db layer, so they must be in
# place before anything under accounts_api is imported.
os.environ["JWT_SECRET"] = "test-signing-secret-0123456789abcdef"
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'accounts.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
os.environ.pop("DEBUG_LOGGING", None)

from datetime import UTC, datetime  # noqa: E402

import pytest  # noqa: E402

from accounts_api.application.services.credential_store import CredentialStore  # noqa: E402
from accounts_api.application.services.session_tokens import SessionTokenService  # noqa: E402
from accounts_api.domain.users.entities import User  # noqa: E402
from accounts_api.domain.users.exceptions import (  # noqa: E402
    UserAlreadyExistsError,
    UserNotFoundError,
)
from accounts_api.domain.users.repositories import PasswordHasher, UserRepository  # noqa: E402

TEST_SECRET = os.environ["JWT_SECRET"]


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        if self.find_by_email(user.email) is not None:
            raise UserAlreadyExistsError()
        self._users[user.id] = user
        return user

    def update(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
        password_hash: str | None = None,
    ) -> User:
        current = self._users.get(user_id)
        if current is None:
            raise UserNotFoundError()
        if email is not None:
            owner = self.find_by_email(email)
            if owner is not None and owner.id != user_id:
                raise UserAlreadyExistsError()
        updated = User(
            id=current.id,
            name=name if name is not None else current.name,
            email=email if email is not None else current.email,
            password_hash=password_hash if password_hash is not None else current.password_hash,
            created_at=current.created_at,
            updated_at=datetime.now(UTC),
        )
        self._users[user_id] = updated
        return updated

    def delete(self, user_id: str) -> None:
        self._users.pop(user_id, None)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def credentials(users: InMemoryUserRepository) -> CredentialStore:
    return CredentialStore(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def tokens() -> SessionTokenService:
    return SessionTokenService(TEST_SECRET, secure_cookies=True)
