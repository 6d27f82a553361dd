"""Exception classes for the hello-demo application.

Every error carries a machine-readable code, a human-readable message and
optional structured details so it can be logged and mapped to an exit code.
"""

from typing import Any, Dict, Optional


class HelloDemoError(Exception):
    """Base for all hello-demo errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} ({self.details})"
        return f"{self.code}: {self.message}"


class ConfigurationError(HelloDemoError):
    """Raised when settings from the environment are missing or invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


class ServerBindError(HelloDemoError):
    """Raised when the listening socket cannot be bound (port in use, no privileges)."""

    def __init__(self, host: str, port: int, errno: Optional[int], reason: str):
        super().__init__(
            code="SERVER_BIND_ERROR",
            message=f"Failed to bind listening socket on {host}:{port}: {reason}",
            details={"host": host, "port": port, "errno": errno},
        )
        self.host = host
        self.port = port
        self.errno = errno
