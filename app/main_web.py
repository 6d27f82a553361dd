"""hello-demo web server entry point."""

import sys
from typing import NoReturn

from app.config import get_settings
from app.errors import get_exit_code_for_error, map_exception_to_response
from app.exceptions import HelloDemoError
from app.logger import session_logger
from app.startup.validation import validate_listen_settings
from app.web_server.web_server import HelloDemoWebServer

logger = session_logger


def _fail(error: Exception) -> NoReturn:
    response = map_exception_to_response(error)
    logger.error(
        f"FATAL: {response.message}",
        error_code=response.error_code,
        details=response.details,
        recovery=response.recovery_strategy,
    )
    sys.exit(get_exit_code_for_error(error))


def main() -> None:
    try:
        settings = get_settings(reload=True)
    except HelloDemoError as e:
        _fail(e)

    logger.configure(
        level=settings.log.level_number,
        log_file=settings.log.file,
        json_format=settings.log.json_format,
    )
    validate_listen_settings(settings, logger)

    server = HelloDemoWebServer(
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.log.level,
        logger=logger,
    )

    try:
        sock = server.bind()
    except HelloDemoError as e:
        _fail(e)

    print(f"Running on {server.url}", flush=True)
    try:
        server.start(sock)
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        sys.exit(0)
    finally:
        sock.close()

    logger.info("Web server shutdown complete")


if __name__ == "__main__":
    main()
