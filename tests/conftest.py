"""Pytest conftest: path setup and a local profile server."""

import sys
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from types import SimpleNamespace

import pytest

# Repo root for `import player_stats_report`, tests/ for `from helpers import ...`
ROOT_DIR = Path(__file__).resolve().parent.parent
TESTS_DIR = Path(__file__).resolve().parent
for directory in (ROOT_DIR, TESTS_DIR):
    if str(directory) not in sys.path:
        sys.path.insert(0, str(directory))

PROXY_VARS = ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy")


@pytest.fixture
def profile_server(monkeypatch):
    """Serve canned profile pages on localhost.

    Register pages with ``server.pages[identifier] = (status, body)``;
    unknown identifiers get a 404.
    """
    for var in PROXY_VARS:
        monkeypatch.delenv(var, raising=False)

    pages = {}
    requested = []

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            identifier = self.path.rsplit("/", 1)[-1]
            requested.append(identifier)
            status, body = pages.get(identifier, (404, "<html>Not found</html>"))
            data = body.encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", "text/html; charset=utf-8")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield SimpleNamespace(
            pages=pages,
            requested=requested,
            base_url=f"http://127.0.0.1:{server.server_port}/en/profile/",
        )
    finally:
        server.shutdown()
        server.server_close()
