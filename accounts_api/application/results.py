# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from http import HTTPStatus
from typing import Any


@dataclass(slots=True, frozen=True)
class CookieDirective:
    """Instruction for the transport layer to set or overwrite one cookie."""

    name: str
    value: str
    http_only: bool = True
    secure: bool = False
    same_site: str | None = None
    max_age: int | None = None
    expires: datetime | int | None = None
    path: str = "/"


@dataclass(slots=True, frozen=True)
class OperationResult:
    status: HTTPStatus
    body: dict[str, Any]
    cookies: tuple[CookieDirective, ...] = field(default_factory=tuple)
