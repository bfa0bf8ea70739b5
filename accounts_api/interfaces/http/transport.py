# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Response, jsonify

from accounts_api.application.results import CookieDirective, OperationResult


def apply_cookie(response: Response, cookie: CookieDirective) -> None:
    response.set_cookie(
        cookie.name,
        cookie.value,
        max_age=cookie.max_age,
        expires=cookie.expires,
        path=cookie.path,
        secure=cookie.secure,
        httponly=cookie.http_only,
        samesite=cookie.same_site,
    )


def to_response(result: OperationResult) -> tuple[Response, int]:
    response = jsonify(result.body)
    for cookie in result.cookies:
        apply_cookie(response, cookie)
    return response, int(result.status)
