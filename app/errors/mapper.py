"""Error response mapping for the hello-demo entry point.

Converts exceptions raised during startup into a structured ErrorResponse
with a machine-readable error code, a recovery strategy and the process
exit code to terminate with.
"""

import errno as errno_codes
from dataclasses import dataclass
from typing import Dict, Any, Optional

from app.exceptions import (
    HelloDemoError,
    ConfigurationError,
    ServerBindError,
)


@dataclass
class ErrorResponse:
    """Structured error description for logs."""

    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    recovery_strategy: Optional[str] = None


# Recovery strategy templates for common error types
RECOVERY_STRATEGIES: Dict[str, str] = {
    "CONFIGURATION_ERROR": "Check the HELLODEMO_* environment variables and correct the values listed in the details.",
    "SERVER_BIND_ERROR": "Make sure the address is valid and the port is free, or choose another one with HELLODEMO_HOST / HELLODEMO_PORT.",
    "ADDRESS_IN_USE": "Another process is already listening on this port. Stop it or set HELLODEMO_PORT to a free port.",
    "PERMISSION_DENIED": "Ports below 1024 need elevated privileges. Run as root or set HELLODEMO_PORT to 1024 or above.",
}

EXIT_CODE_CONFIGURATION = 2
EXIT_CODE_FAILURE = 1


def get_recovery_strategy(error_code: str) -> str:
    """Get recovery strategy for an error code.

    Args:
        error_code: The error code

    Returns:
        Recovery strategy string
    """
    return RECOVERY_STRATEGIES.get(
        error_code, "Review the error message, adjust the configuration, and try again."
    )


def _bind_strategy_code(error: ServerBindError) -> str:
    if error.errno == errno_codes.EADDRINUSE:
        return "ADDRESS_IN_USE"
    if error.errno in (errno_codes.EACCES, errno_codes.EPERM):
        return "PERMISSION_DENIED"
    return error.code


def map_exception_to_response(error: Exception) -> ErrorResponse:
    """Convert an exception to a structured ErrorResponse.

    Args:
        error: The exception to convert

    Returns:
        ErrorResponse with structured error information
    """
    if isinstance(error, ServerBindError):
        return ErrorResponse(
            error_code=error.code,
            message=error.message,
            details=error.details,
            recovery_strategy=get_recovery_strategy(_bind_strategy_code(error)),
        )

    if isinstance(error, HelloDemoError):
        return ErrorResponse(
            error_code=error.code,
            message=error.message,
            details=error.details if error.details else None,
            recovery_strategy=get_recovery_strategy(error.code),
        )

    # Generic exceptions - wrap with minimal structure
    return ErrorResponse(
        error_code="INTERNAL_ERROR",
        message=str(error),
        details={"exception_type": type(error).__name__},
        recovery_strategy="An unexpected error occurred. Please report this issue if it persists.",
    )


def get_exit_code_for_error(error: Exception) -> int:
    """Determine the process exit code for a fatal error.

    Args:
        error: The exception

    Returns:
        Non-zero exit status
    """
    if isinstance(error, ConfigurationError):
        return EXIT_CODE_CONFIGURATION
    return EXIT_CODE_FAILURE
