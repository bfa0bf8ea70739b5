from .base import AppError, DomainError
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "handle_app_error",
    "register_error_handler",
]
