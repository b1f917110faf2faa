from .base import (
    AppError,
    AuthError,
    ConflictError,
    DomainError,
    HashError,
    InfrastructureError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthError",
    "ConflictError",
    "DomainError",
    "HashError",
    "InfrastructureError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
