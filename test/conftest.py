"""Shared fixtures for gateway tests."""

import io
import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
from rich.console import Console

from pyagentgate.tools.base import ToolContext
from pyagentgate.tools.builtin import builtin_catalog
from pyagentgate.tools.gateway import ExecutionGateway
from pyagentgate.tools.permissions import ApprovalGate, TrustPolicy


class ScriptedOperator:
    """Stands in for the human at the approval prompt."""

    def __init__(self, answer=True):
        self.answer = answer
        self.prompts = []

    def __call__(self, action, details):
        self.prompts.append((action, details))
        return self.answer


@pytest.fixture
def quiet_console():
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def tool_ctx(tmp_path):
    return ToolContext(cwd=str(tmp_path))


@pytest.fixture
def make_gateway(tool_ctx, quiet_console):
    """Build a gateway over the builtin catalog with a scripted operator."""

    def _make(policy=TrustPolicy.FULL_AUTO, answer=True, ctx=None):
        operator = ScriptedOperator(answer)
        gate = ApprovalGate(policy, output=quiet_console, confirm=operator)
        gw = ExecutionGateway(builtin_catalog(), gate, ctx or tool_ctx, output=quiet_console)
        return gw, operator

    return _make


class _EchoHandler(BaseHTTPRequestHandler):
    def _reply(self, status, body, content_type):
        raw = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(raw)))
        self.end_headers()
        self.wfile.write(raw)

    def _handle(self):
        if self.path == "/missing":
            self._reply(404, "not here", "text/plain")
            return
        if self.path == "/text":
            self._reply(200, "plain body", "text/plain; charset=utf-8")
            return
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length).decode("utf-8") if length else None
        payload = {
            "method": self.command,
            "path": self.path,
            "content_type": self.headers.get("Content-Type"),
            "x_token": self.headers.get("X-Token"),
            "body": json.loads(body) if body else None,
        }
        self._reply(200, json.dumps(payload), "application/json")

    do_GET = do_POST = do_PUT = do_DELETE = _handle

    def log_message(self, format, *args):
        pass


@pytest.fixture
def http_server(monkeypatch):
    monkeypatch.setenv("no_proxy", "127.0.0.1,localhost")
    monkeypatch.setenv("NO_PROXY", "127.0.0.1,localhost")
    server = ThreadingHTTPServer(("127.0.0.1", 0), _EchoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()
