"""Root-level pytest configuration for all tests.

Provides a small JSON-RPC server running on a background thread. It serves
``/rpc`` only; any other path answers 404.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

import pytest
import structlog


def _mock_methods(params: Any) -> dict[str, Any]:
    return {
        "Mock.Echo": {"result": params},
        "Mock.Null": {"result": None},
        "Mock.Fail": {
            "result": None,
            "error": {"code": -32000, "message": "mock failure", "data": {"why": params}},
        },
        "Mock.BadError": {"result": None, "error": {"malformed": True}},
    }


class JsonRpcHandler(BaseHTTPRequestHandler):
    """Answers JSON-RPC 2.0 requests for the Mock service."""

    def do_POST(self) -> None:  # noqa: N802
        length = int(self.headers.get("Content-Length", 0))
        raw = self.rfile.read(length)

        if self.path != "/rpc":
            self._reply(404, b"404 page not found\n", "text/plain")
            return

        self.server.requests.append(  # type: ignore[attr-defined]
            {"content_type": self.headers.get("Content-Type"), "body": raw}
        )
        request = json.loads(raw)
        request_id = request.get("id")
        method = request.get("method")

        if method == "Mock.WrongId":
            payload = {"result": request.get("params"), "id": request_id + 100}
        else:
            outcome = _mock_methods(request.get("params")).get(method)
            if outcome is None:
                outcome = {
                    "result": None,
                    "error": {"code": -32601, "message": f"rpc: can't find method {method}"},
                }
            payload = {"error": None, **outcome, "id": request_id}

        body = json.dumps({"jsonrpc": "2.0", **payload}).encode("utf-8")
        self._reply(200, body, "application/json")

    def _reply(self, status: int, body: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        pass


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def rpc_server() -> Iterator[ThreadingHTTPServer]:
    """Start the mock JSON-RPC server for the test session."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), JsonRpcHandler)
    server.requests = []  # type: ignore[attr-defined]
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield server

    server.shutdown()
    server.server_close()


@pytest.fixture
def rpc_url(rpc_server: ThreadingHTTPServer) -> str:
    """URL of the mock server's JSON-RPC endpoint."""
    host, port = rpc_server.server_address[:2]
    return f"http://{host}:{port}/rpc"


@pytest.fixture
def missing_url(rpc_server: ThreadingHTTPServer) -> str:
    """URL on the mock server that answers 404."""
    host, port = rpc_server.server_address[:2]
    return f"http://{host}:{port}/missing"
