"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a clean HELLODEMO_* environment,
a web server instance, an in-process test client and free ports.
"""

import os
import socket

import pytest
from starlette.testclient import TestClient

from app.config import reset_settings
from app.web_server.web_server import HelloDemoWebServer


# ============================================================================
# ENVIRONMENT ISOLATION
# ============================================================================


@pytest.fixture(scope="function", autouse=True)
def clean_environment(monkeypatch):
    """
    Remove any HELLODEMO_* variables inherited from the shell and reset cached
    settings before and after each test.
    """
    for name in list(os.environ):
        if name.startswith("HELLODEMO_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings()

    yield

    reset_settings()


# ============================================================================
# SERVER FIXTURES
# ============================================================================


@pytest.fixture(scope="function")
def free_port():
    """
    Find a TCP port on 127.0.0.1 that nothing is listening on.

    Returns:
        int: Port number (released before the test uses it)
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture(scope="function")
def web_server(free_port):
    """Provide a HelloDemoWebServer on loopback that has not been bound yet."""
    return HelloDemoWebServer(host="127.0.0.1", port=free_port, log_level="warning")


@pytest.fixture(scope="function")
def client(web_server):
    """
    Provide a Starlette TestClient for the server's ASGI app.

    Usage:
        def test_root(client):
            response = client.get("/")
    """
    with TestClient(web_server.get_app()) as test_client:
        yield test_client
