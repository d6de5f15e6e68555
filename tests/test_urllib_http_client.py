from __future__ import annotations

import json
import threading
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from effigy.advisory.client import AdvisoryClient
from effigy.advisory.http import UrllibHttpClient
from effigy.core.types import AdvisoryRequest


class AdvisoryHandler(BaseHTTPRequestHandler):
    def _send(self, status: int, body: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_POST(self) -> None:  # noqa: N802
        length = int(self.headers.get("Content-Length", "0"))
        received = self.rfile.read(length)
        self.server.received.append((self.headers.get("Content-Type"), received))  # type: ignore[attr-defined]

        if self.path == "/oneshot":
            self._send(200, json.dumps({"latest_os_version": {"msg": "10.1"}}).encode("utf-8"))
            return
        self._send(503, b"maintenance")

    def log_message(self, format: str, *args: object) -> None:
        return


@pytest.fixture()
def server() -> Iterator[HTTPServer]:
    httpd = HTTPServer(("127.0.0.1", 0), AdvisoryHandler)
    httpd.received = []  # type: ignore[attr-defined]
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield httpd
    finally:
        httpd.shutdown()
        httpd.server_close()


def base_url(httpd: HTTPServer) -> str:
    host, port = httpd.server_address[:2]
    return f"http://{host}:{port}"


def test_post_returns_success_response(server: HTTPServer):
    resp = UrllibHttpClient(timeout_seconds=5).post(
        f"{base_url(server)}/oneshot",
        b'{"a":"b"}',
        {"Content-Type": "application/json"},
    )

    assert resp.status == 200
    assert json.loads(resp.body) == {"latest_os_version": {"msg": "10.1"}}
    assert server.received == [("application/json", b'{"a":"b"}')]  # type: ignore[attr-defined]


def test_post_returns_error_statuses_instead_of_raising(server: HTTPServer):
    resp = UrllibHttpClient(timeout_seconds=5).post(f"{base_url(server)}/down", b"{}", {})

    assert resp.status == 503
    assert resp.reason == "Service Unavailable"
    assert resp.body == b"maintenance"


def test_advisory_client_over_real_transport(server: HTTPServer):
    client = AdvisoryClient(http=UrllibHttpClient(timeout_seconds=5), url=f"{base_url(server)}/oneshot")

    resp = client.call(AdvisoryRequest(build_number="19H2"))

    assert resp.latest_os_version.msg == "10.1"
    content_type, body = server.received[0]  # type: ignore[attr-defined]
    assert content_type == "application/json"
    assert json.loads(body)["build_num"] == "19H2"


def test_connection_refused_is_an_os_error():
    httpd = HTTPServer(("127.0.0.1", 0), AdvisoryHandler)
    url = base_url(httpd)
    httpd.server_close()

    with pytest.raises(OSError):
        UrllibHttpClient(timeout_seconds=2).post(url, b"{}", {})
