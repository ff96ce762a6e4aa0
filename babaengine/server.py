"""HTTP API through which clients steer the game and read its status."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from .commands import Command, CommandQueue, CommandType, StatusCommand

_MOVES = {
    "up": CommandType.UP,
    "down": CommandType.DOWN,
    "left": CommandType.LEFT,
    "right": CommandType.RIGHT,
    "still": CommandType.STILL,
}

_ACTIONS = {
    "restart": CommandType.RESTART,
    "next": CommandType.NEXT,
}

_TEXT = "text/plain; charset=utf-8"
_JSON = "application/json"


@dataclass(frozen=True)
class Response:
    status: int
    body: str
    content_type: str = _TEXT


class GameServer:
    """Turns HTTP requests into commands on ``command_queue``.

    ``status_timeout`` bounds how long a status request waits for the game
    loop; None waits for ever. ``host`` is the address the server binds to.
    """

    def __init__(
        self,
        command_queue: CommandQueue,
        status_timeout: float | None = None,
        host: str = "",
    ) -> None:
        self.command_queue = command_queue
        self.status_timeout = status_timeout
        self.host = host
        self._httpd: ThreadingHTTPServer | None = None
        self._thread: threading.Thread | None = None

    def handle(self, method: str, path: str) -> Response:
        """Answer one request; pushes the matching command if there is one."""
        method = method.upper()
        path = urlsplit(path).path

        if path in ("/hello", "/status"):
            if method != "GET":
                return Response(405, "")
            if path == "/hello":
                return Response(200, "Hello from Crow API!")
            return self._status()

        parts = path.split("/")
        if len(parts) == 3 and parts[0] == "" and parts[2] and parts[1] in ("move", "level"):
            if method not in ("GET", "POST"):
                return Response(405, "")
            if parts[1] == "move":
                return self._move(parts[2])
            return self._level(parts[2])

        return Response(404, "Route not found")

    def _status(self) -> Response:
        command = StatusCommand()
        self.command_queue.push(command)
        try:
            report = command.wait_status(self.status_timeout)
        except TimeoutError:
            return Response(503, "Status not available")
        return Response(200, json.dumps(report.to_json()), _JSON)

    def _move(self, direction: str) -> Response:
        command_type = _MOVES.get(direction)
        if command_type is None:
            return Response(
                400,
                f"Invalid direction: {direction}"
                "\n Valid directions are: ['up', 'down', 'left', 'right', 'still']",
            )
        self.command_queue.push(Command(command_type))
        return Response(200, f"Moved {direction}")

    def _level(self, action: str) -> Response:
        command_type = _ACTIONS.get(action)
        if command_type is None:
            return Response(
                400, f"Invalid actions: {action}\n Valid directions are: ['restart', 'next']"
            )
        self.command_queue.push(Command(command_type))
        return Response(200, f"Action: '{action}' executed")

    def _bind(self, port: int) -> ThreadingHTTPServer:
        if self._httpd is not None:
            raise RuntimeError("server is already running")
        httpd = ThreadingHTTPServer((self.host, port), _make_handler(self))
        httpd.daemon_threads = True
        self._httpd = httpd
        return httpd

    def run(self, port: int = 8000) -> None:
        """Serve requests on ``port`` until ``shutdown`` is called."""
        httpd = self._bind(port)
        print(f"API service started on port {httpd.server_address[1]}")
        httpd.serve_forever()

    def run_in_background(self, port: int = 8000) -> int:
        """Serve on a background thread; return the port actually bound."""
        httpd = self._bind(port)
        self._thread = threading.Thread(target=httpd.serve_forever, daemon=True)
        self._thread.start()
        bound = httpd.server_address[1]
        print(f"API service started on port {bound}")
        return bound

    def shutdown(self) -> None:
        """Stop serving and release the port."""
        httpd, self._httpd = self._httpd, None
        if httpd is None:
            return
        httpd.shutdown()
        httpd.server_close()
        if self._thread is not None:
            self._thread.join()
            self._thread = None


def _make_handler(server: GameServer) -> type[BaseHTTPRequestHandler]:
    class _Handler(BaseHTTPRequestHandler):
        def _dispatch(self) -> None:
            response = server.handle(self.command, self.path)
            data = response.body.encode("utf-8")
            self.send_response(response.status)
            self.send_header("Content-Type", response.content_type)
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = _dispatch

        def log_message(self, format, *args):  # noqa: A002
            pass

    return _Handler