"""
Advisory client.

Sends one AdvisoryRequest to the EFIgy oneshot endpoint and decodes the answer.

Behavior
1) Encode the request as compact json
2) Post it once through the injected HttpClient, no retry
3) On a status other than 200, copy the body to the diagnostic stream and raise
   AdvisoryHttpError
4) On 200, decode the body, raising AdvisoryDecodeError when it is malformed

Transport errors from the HttpClient propagate unchanged.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import BinaryIO

from effigy.advisory.http import HttpClient, HttpResponse, UrllibHttpClient
from effigy.core.errors import AdvisoryHttpError
from effigy.core.serialization import request_to_bytes, response_from_bytes
from effigy.core.types import AdvisoryRequest, AdvisoryResponse

logger = logging.getLogger(__name__)

ADVISORY_URL = "https://api.efigy.io/apple/oneshot"


@dataclass(frozen=True)
class AdvisoryClient:
    """
    Client for the advisory service.

    http
    Transport used for the single post.

    url
    Advisory endpoint.

    diagnostics
    Binary stream that receives error bodies. None means stderr at call time.
    """

    http: HttpClient = field(default_factory=UrllibHttpClient)
    url: str = ADVISORY_URL
    diagnostics: BinaryIO | None = None

    def call(self, request: AdvisoryRequest) -> AdvisoryResponse:
        body = request_to_bytes(request)
        resp = self.http.post(self.url, body, {"Content-Type": "application/json"})

        if resp.status != 200:
            self._report_error_body(resp)
            raise AdvisoryHttpError(resp.status, resp.reason)

        return response_from_bytes(resp.body)

    def _report_error_body(self, resp: HttpResponse) -> None:
        logger.warning("advisory service answered %s %s", resp.status, resp.reason)
        stream = self.diagnostics if self.diagnostics is not None else sys.stderr.buffer
        try:
            stream.write(resp.body)
            stream.flush()
        except OSError as exc:
            # the error body is a debugging aid, the status error still goes up
            logger.warning("could not write advisory error body: %s", exc)
