"""Mock server for serving local portal fixture pages."""

import http.server
import socketserver
import threading
from pathlib import Path
from typing import Any
from urllib.parse import urlparse


class MockRequestHandler(http.server.SimpleHTTPRequestHandler):
    """Static handler that maps clean URLs onto fixture files."""

    def __init__(self, *args: Any, pages_dir: Path, **kwargs: Any) -> None:
        self.pages_dir = pages_dir
        super().__init__(*args, directory=str(pages_dir), **kwargs)

    def do_GET(self) -> None:
        """Handle GET, rewriting clean paths to their .html fixture.

        ``/`` serves index.html, ``/search?query=x`` serves search.html and
        ``/benefits`` serves benefits.html when that file exists. Anything
        else falls through to the static file handler (and 404s normally).
        """
        parsed = urlparse(self.path)
        path = parsed.path.rstrip("/")

        if not path:
            self.path = "/index.html"
        elif "." not in Path(path).name:
            candidate = self.pages_dir / f"{path.lstrip('/')}.html"
            if candidate.is_file():
                self.path = f"{path}.html"

        super().do_GET()

    def log_message(self, format: str, *args: Any) -> None:
        """Suppress logging unless verbose."""
        pass  # Silent by default


class MockServer:
    """Local HTTP server serving portal fixture pages."""

    def __init__(self, pages_dir: Path, port: int = 8000):
        self.pages_dir = pages_dir
        self.port = port
        self._server: socketserver.TCPServer | None = None
        self._thread: threading.Thread | None = None

    def _create_handler(self) -> type[MockRequestHandler]:
        """Create a request handler class with pages_dir bound."""
        pages_dir = self.pages_dir

        class BoundHandler(MockRequestHandler):
            def __init__(self, *args: Any, **kwargs: Any) -> None:
                super().__init__(*args, pages_dir=pages_dir, **kwargs)

        return BoundHandler

    def start(self) -> None:
        """Start mock server in background thread."""
        handler_class = self._create_handler()
        self._server = socketserver.ThreadingTCPServer(
            ("localhost", self.port), handler_class
        )
        self._server.daemon_threads = True
        self._thread = threading.Thread(target=self._server.serve_forever)
        self._thread.daemon = True
        self._thread.start()

    def stop(self) -> None:
        """Stop mock server."""
        if self._server:
            self._server.shutdown()
            self._server.server_close()
            if self._thread:
                self._thread.join(timeout=5)
            self._server = None
            self._thread = None

    @property
    def base_url(self) -> str:
        """Get base URL for the mock server."""
        return f"http://localhost:{self.port}"
