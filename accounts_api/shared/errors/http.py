# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import traceback
from http import HTTPStatus

from flask import Response, jsonify, request
from werkzeug.exceptions import HTTPException, NotFound

from accounts_api.shared.config import AppConfig, load_config
from accounts_api.shared.logging import logger

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def register_error_handler(
    app,
    *,
    config: AppConfig | None = None,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    config = config or load_config()
    debug_mode = config.debug_logging
    expose_stack = config.is_development()

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.context:
            logger.warning(
                f"{request.method} {request.path} -> {int(exc.status)} {exc.message} "
                f"context={dict(exc.context)}"
            )
        else:
            logger.warning(f"{request.method} {request.path} -> {int(exc.status)} {exc.message}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        if isinstance(exc, NotFound):
            message = f"Not Found - {request.path}"
        else:
            message = exc.name
        response = jsonify({"error": message})
        return response, exc.code or default_status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        ip_address = request.headers.get("X-Forwarded-For", "").split(",")[0].strip() if request.headers.get("X-Forwarded-For") else (request.remote_addr or "unknown")

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {ip_address}, query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        payload: dict[str, object] = {"error": "Internal Server Error"}
        if expose_stack:
            payload["stack"] = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )
        return jsonify(payload), default_status
