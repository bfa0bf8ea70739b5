# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .results import CookieDirective, OperationResult
from .services.credential_store import CredentialStore
from .services.password_hashing import WerkzeugPasswordHasher
from .services.session_tokens import SessionTokenService

__all__ = [
    "CookieDirective",
    "CredentialStore",
    "OperationResult",
    "SessionTokenService",
    "WerkzeugPasswordHasher",
]
