"""Shared fixtures: JSON documents and an in-process telemetry server."""

from __future__ import annotations

import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest

TESTDATA = Path(__file__).parent / "telemetry" / "testdata"


def load_testdata(name: str) -> bytes:
    return (TESTDATA / name).read_bytes()


class _TelemetryHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:  # noqa: N802
        self.server.paths.append(self.path)
        status, body = self.server.respond(self.path)
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args) -> None:  # keep pytest output quiet
        pass


class TelemetryServer(ThreadingHTTPServer):
    """Serves ``respond(path) -> (status, body)`` on an ephemeral port."""

    daemon_threads = True
    request_queue_size = 64

    def __init__(self) -> None:
        super().__init__(("127.0.0.1", 0), _TelemetryHandler)
        self.paths: list[str] = []
        self.respond = lambda path: (200, load_testdata("driving.json"))

    @property
    def base_url(self) -> str:
        host, port = self.server_address[:2]
        return f"http://{host}:{port}"


@pytest.fixture
def disconnected_json() -> bytes:
    return load_testdata("disconnected.json")


@pytest.fixture
def driving_json() -> bytes:
    return load_testdata("driving.json")


@pytest.fixture
def telemetry_server():
    server = TelemetryServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)
