"""Custom exceptions for the hello-demo application."""

from app.exceptions.base import (
    HelloDemoError,
    ConfigurationError,
    ServerBindError,
)

__all__ = [
    "HelloDemoError",
    "ConfigurationError",
    "ServerBindError",
]
