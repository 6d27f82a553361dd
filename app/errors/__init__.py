"""Error handling utilities for hello-demo."""

from app.errors.mapper import (
    ErrorResponse,
    map_exception_to_response,
    get_exit_code_for_error,
    get_recovery_strategy,
)

__all__ = [
    "ErrorResponse",
    "map_exception_to_response",
    "get_exit_code_for_error",
    "get_recovery_strategy",
]
