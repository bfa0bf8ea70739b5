# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from accounts_api.domain.users.entities import User as DomainUser
from accounts_api.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from accounts_api.domain.users.repositories import UserRepository
from accounts_api.infrastructure.db.models import UserRecord
from accounts_api.infrastructure.db.session import session_scope
from accounts_api.shared.logging import logger


def _to_domain(row: UserRecord) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.query(UserRecord).filter(UserRecord.email == email).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(UserRecord, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = UserRecord(
                    id=user.id,
                    name=user.name,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.warning("users.repository: unique constraint rejected insert")
            raise UserAlreadyExistsError() from exc

    def update(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
        password_hash: str | None = None,
    ) -> DomainUser:
        try:
            with session_scope() as session:
                row = session.get(UserRecord, user_id)
                if row is None:
                    raise UserNotFoundError()
                if name is not None:
                    row.name = name
                if email is not None:
                    row.email = email
                if password_hash is not None:
                    row.password_hash = password_hash
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.warning(f"users.repository: unique constraint rejected update user_id={user_id}")
            raise UserAlreadyExistsError() from exc
