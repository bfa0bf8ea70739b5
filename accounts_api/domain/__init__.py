# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users import ProfileChanges, SessionIdentity, User, UserProfile

__all__ = ["ProfileChanges", "SessionIdentity", "User", "UserProfile"]
