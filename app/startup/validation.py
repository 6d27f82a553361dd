"""Server startup validation utilities."""

import os

from app.config import Settings
from app.logger import Logger

PRIVILEGED_PORT_LIMIT = 1024


def _running_as_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return False
    return geteuid() == 0


def validate_listen_settings(settings: Settings, logger: Logger) -> None:
    """
    Report the effective listen address and flag settings likely to fail at bind.

    Args:
        settings: Loaded application settings
        logger: Logger instance for reporting status
    """
    host = settings.server.host
    port = settings.server.port

    logger.info("Listen address configured", host=host, port=port)

    if 0 < port < PRIVILEGED_PORT_LIMIT and not _running_as_root():
        logger.warning(
            "Port is privileged and process is not running as root; bind will likely fail",
            port=port,
        )

    if port == 0:
        logger.warning("Port 0 requested; the OS will choose an ephemeral port", host=host)
