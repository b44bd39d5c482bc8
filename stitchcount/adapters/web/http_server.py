"""HTTP server adapter for the browser surface.

Serves the counter page and a small JSON API using Python's built-in
http.server module. The blocking server runs in a worker thread and
hands each request to the asyncio loop that owns the core.

Endpoints:
- GET  /            counter page
- GET  /api/state   current digits
- GET  /health      liveness check
- POST /api/session select the input tier for a page load
- POST /api/event   process one raw DOM event
"""

import asyncio
import json
import logging
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path
from typing import Any, Coroutine

from stitchcount.adapters.web.receiver import WebReceiver

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"
MAX_BODY_SIZE = 64 * 1024


def make_tally_handler(
    receiver: WebReceiver,
    event_loop: asyncio.AbstractEventLoop,
    page: bytes,
) -> type[BaseHTTPRequestHandler]:
    """Factory to create a TallyHTTPHandler class with instance-specific state.

    Args:
        receiver: Receiver for page requests.
        event_loop: Event loop that owns the core.
        page: HTML served at ``/``.

    Returns:
        A TallyHTTPHandler class configured with the provided dependencies.
    """

    class TallyHTTPHandler(BaseHTTPRequestHandler):
        """HTTP request handler for the counter page and its API."""

        def do_GET(self) -> None:
            if self.path in ("/", "/index.html"):
                self._send_bytes(page, "text/html; charset=utf-8")
            elif self.path == "/api/state":
                self._respond(receiver.handle_state())
            elif self.path == "/health":
                self._send_json({"status": "healthy"})
            else:
                self.send_error(404, "Not found")

        def do_POST(self) -> None:
            try:
                content_length = int(self.headers.get("Content-Length", 0))
            except ValueError:
                content_length = -1
            if content_length < 0:
                self.send_error(400, "Invalid Content-Length")
                return
            if content_length > MAX_BODY_SIZE:
                self.send_error(413, "Request body too large")
                return

            body = self.rfile.read(content_length) if content_length > 0 else b""
            try:
                data = json.loads(body) if body else {}
            except json.JSONDecodeError:
                self.send_error(400, "Invalid JSON body")
                return
            if not isinstance(data, dict):
                self.send_error(400, "JSON body must be an object")
                return

            if self.path == "/api/event":
                self._respond(receiver.handle_event(data))
            elif self.path == "/api/session":
                self._respond(receiver.handle_session(data))
            else:
                self.send_error(404, "Not found")

        def _respond(self, coro: Coroutine[Any, Any, dict[str, Any]]) -> None:
            """Run a receiver coroutine on the core's loop and send its result."""
            future = asyncio.run_coroutine_threadsafe(coro, event_loop)
            try:
                result = future.result(timeout=30)
            except Exception as e:
                logger.error(f"Error handling request {self.path}: {e}", exc_info=True)
                self.send_error(500, "Internal server error")
                return
            self._send_json(result)

        def _send_json(self, data: dict[str, Any]) -> None:
            self._send_bytes(json.dumps(data).encode(), "application/json")

        def _send_bytes(self, payload: bytes, content_type: str) -> None:
            self.send_response(200)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(payload)))
            self.send_header("Cache-Control", "no-store")
            self.end_headers()
            self.wfile.write(payload)

        def log_message(self, format: str, *args: Any) -> None:
            """Log HTTP request."""
            logger.debug(f"HTTP {self.client_address[0]}: {format % args}")

    return TallyHTTPHandler


class TallyHTTPServer:
    """HTTP server adapter for the browser surface."""

    def __init__(
        self,
        receiver: WebReceiver,
        host: str = "127.0.0.1",
        port: int = 8080,
    ):
        """Initialize the HTTP server.

        Args:
            receiver: WebReceiver instance to handle requests.
            host: Host to listen on (default 127.0.0.1).
            port: Port to listen on (default 8080). 0 picks a free port,
                available as `port` after start().
        """
        self.receiver = receiver
        self.host = host
        self.port = port
        self.server: HTTPServer | None = None
        self._server_task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        """Bind the socket and start serving in a worker thread."""
        page = await asyncio.to_thread((STATIC_DIR / "index.html").read_bytes)
        handler_class = make_tally_handler(
            receiver=self.receiver,
            event_loop=asyncio.get_running_loop(),
            page=page,
        )

        self.server = HTTPServer((self.host, self.port), handler_class)
        self.port = self.server.server_address[1]

        self._server_task = asyncio.create_task(self._run_server())
        logger.info(f"Counter page served at http://{self.host}:{self.port}/")

    async def _run_server(self) -> None:
        """Run the HTTP server loop in a thread pool."""
        if not self.server:
            return

        try:
            await asyncio.to_thread(self.server.serve_forever)
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error(f"HTTP server error: {e}", exc_info=True)

    async def stop(self) -> None:
        """Stop the HTTP server."""
        if self.server:
            await asyncio.to_thread(self.server.shutdown)
            self.server.server_close()
        if self._server_task:
            self._server_task.cancel()
            try:
                await self._server_task
            except asyncio.CancelledError:
                pass
        logger.info("HTTP server stopped")
