"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from accounts_api.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted, deliberately slow hashing backed by werkzeug (scrypt by default).

    ``method`` takes werkzeug's method strings, e.g. ``"scrypt"`` or
    ``"pbkdf2:sha256:600000"``; the work factor lives in that string.
    """

    def __init__(self, method: str = "scrypt") -> None:
        self._method = method

    def hash(self, password: str) -> str:
        return str(generate_password_hash(password, method=self._method))

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed or not password:
            return False
        return bool(check_password_hash(hashed, password))
