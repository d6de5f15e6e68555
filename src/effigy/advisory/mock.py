"""
Static http client.

This client is used for tests and local demos.
It answers every post with the same canned response and records what it was sent.

Features
- Returns a fixed HttpResponse
- Can raise a fixed error instead, to simulate transport failures
- Keeps every request so tests can inspect the wire body
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from effigy.advisory.http import HttpClient, HttpResponse


@dataclass(frozen=True)
class RecordedRequest:
    url: str
    body: bytes
    headers: dict[str, str]

    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))


@dataclass
class StaticHttpClient(HttpClient):
    """
    Canned http client.

    response
    Returned for every post.

    error
    When set, raised for every post instead of returning response.
    """

    response: HttpResponse = field(default_factory=lambda: HttpResponse(200, "OK", b"{}"))
    error: Exception | None = None
    requests: list[RecordedRequest] = field(default_factory=list)

    def post(self, url: str, body: bytes, headers: dict[str, str]) -> HttpResponse:
        self.requests.append(RecordedRequest(url=url, body=body, headers=dict(headers)))
        if self.error is not None:
            raise self.error
        return self.response

    @classmethod
    def json_ok(cls, payload: Any) -> StaticHttpClient:
        """Client that answers 200 with payload encoded as json."""
        body = json.dumps(payload).encode("utf-8")
        return cls(response=HttpResponse(status=200, reason="OK", body=body))
