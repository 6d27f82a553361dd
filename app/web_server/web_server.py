"""hello-demo web server: a single static greeting on the root path."""

import socket
from typing import Optional, Any

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route

from app.config import DEFAULT_HOST, DEFAULT_PORT
from app.exceptions import ServerBindError
from app.logger import Logger, session_logger

GREETING_HTML = "<html><body>\n<h2>Hello Demo Gods!</h2>\n</body></html>"


class HelloDemoWebServer:
    """Web server that answers ``GET /`` with a fixed HTML greeting.

    Everything else (unknown paths, other methods) is left to Starlette's
    default 404/405 handling.
    """

    SERVICE_NAME = "hello-demo-web"

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        log_level: str = "info",
        backlog: int = 2048,
        logger: Optional[Logger] = None,
    ):
        self.host = host
        self.port = port
        self.backlog = backlog
        self.logger = logger or session_logger
        self.app = self._create_app()
        self.server = uvicorn.Server(
            uvicorn.Config(
                self.app,
                host=host,
                port=port,
                log_level=log_level.lower(),
                backlog=backlog,
            )
        )

    def _create_app(self) -> Any:
        """Create the Starlette application."""
        routes = [
            Route("/", endpoint=self.root, methods=["GET"]),
        ]

        return Starlette(debug=False, routes=routes)

    async def root(self, request: Request) -> HTMLResponse:
        """Root endpoint. Request content is never consulted."""
        return HTMLResponse(GREETING_HTML)

    def get_app(self) -> Any:
        """Return the ASGI application."""
        return self.app

    def bind(self) -> socket.socket:
        """Create, bind and listen on the server socket.

        The bound port is written back to ``self.port`` so that port 0 resolves
        to the ephemeral port the OS picked.

        Raises:
            ServerBindError: If the address is in use, privileges are
                insufficient or the host cannot be resolved
        """
        family = socket.AF_INET6 if ":" in self.host else socket.AF_INET
        sock = socket.socket(family=family, type=socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self.port))
            sock.listen(self.backlog)
        except OSError as e:
            sock.close()
            self.logger.debug(
                "Socket bind failed",
                host=self.host,
                port=self.port,
                errno=e.errno,
            )
            raise ServerBindError(
                host=self.host,
                port=self.port,
                errno=e.errno,
                reason=e.strerror or str(e),
            ) from e

        self.port = sock.getsockname()[1]
        self.logger.debug("Listening socket bound", host=self.host, port=self.port)
        return sock

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def start(self, sock: Optional[socket.socket] = None) -> None:
        """Serve on ``sock`` (binding one first if not given) until stopped."""
        if sock is None:
            sock = self.bind()
        self.server.run(sockets=[sock])

    def stop(self) -> None:
        """Ask a running server to exit its serve loop."""
        self.server.should_exit = True
