"""
HTTP transport.

This is a minimal http client approach with no third party deps.

The advisory client depends on the HttpClient protocol only, so tests and
demos can substitute StaticHttpClient from advisory.mock.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from urllib.error import HTTPError
from urllib.request import Request, urlopen


@dataclass(frozen=True)
class HttpResponse:
    """
    Transport neutral response.

    status is the numeric status code.
    reason is the status text, for example "Service Unavailable".
    body is the raw response body.
    """

    status: int
    reason: str
    body: bytes


class HttpClient(Protocol):
    """Post only http client interface, narrow so tests can fake it."""

    def post(self, url: str, body: bytes, headers: dict[str, str]) -> HttpResponse:
        """
        Send body to url and return the response for any status.

        Raises OSError when no response could be obtained.
        """


@dataclass(frozen=True)
class UrllibHttpClient(HttpClient):
    """
    Http client backed by urllib.

    It holds no per request state, so one instance can be shared by
    concurrent table invocations.
    """

    timeout_seconds: float = 10

    def post(self, url: str, body: bytes, headers: dict[str, str]) -> HttpResponse:
        req = Request(url, data=body, headers=headers, method="POST")
        try:
            with urlopen(req, timeout=self.timeout_seconds) as resp:
                return HttpResponse(status=resp.status, reason=resp.reason or "", body=resp.read())
        except HTTPError as exc:
            # urllib raises for non 2xx statuses, but they are still responses
            return HttpResponse(status=exc.code, reason=str(exc.reason or ""), body=exc.read())
