# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class UserProfile:
    """Outward view of a user. Never carries the password hash."""

    id: str
    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(slots=True, frozen=True)
class User:

    id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def profile(self) -> UserProfile:
        return UserProfile(id=self.id, name=self.name, email=self.email)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"


@dataclass(slots=True, frozen=True)
class ProfileChanges:
    name: str | None = None
    email: str | None = None
    password: str | None = None


@dataclass(slots=True, frozen=True)
class SessionIdentity:
    """Who a verified session token speaks for.

    ``profile`` is ``None`` when the token is valid but the account it names
    no longer exists; operations that need the record decide how to answer.
    """

    user_id: str
    profile: UserProfile | None = None
