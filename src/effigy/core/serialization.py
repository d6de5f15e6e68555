"""
Advisory wire codec.

The request goes out as compact JSON with the wire names below, in this order.
The response comes back as three {"msg": "..."} objects.

Decoding is strict about types and lenient about absence:
a field that is missing decodes to an empty message, which is what the service
means by "nothing to report", but a field of the wrong type is an error.
"""

from __future__ import annotations

import json
from typing import Any

from effigy.core.errors import AdvisoryDecodeError
from effigy.core.types import AdvisoryMessage, AdvisoryRequest, AdvisoryResponse

REQUEST_WIRE_NAMES: tuple[tuple[str, str], ...] = (
    ("board_id", "board_id"),
    ("smc_ver", "smc_version"),
    ("build_num", "build_number"),
    ("rom_ver", "rom_version"),
    ("hw_ver", "hardware_version"),
    ("os_ver", "os_version"),
    ("sys_uuid", "system_uuid"),
    ("mac_addr", "mac_address"),
    ("hashed_uuid", "hashed_uuid"),
)

RESPONSE_FIELDS: tuple[str, ...] = (
    "latest_efi_version",
    "latest_os_version",
    "latest_build_number",
)


def _require_dict(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise AdvisoryDecodeError(f"{name} must be an object")
    return value


def _optional_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise AdvisoryDecodeError(f"{name} must be a string")
    return value


def encode_request(req: AdvisoryRequest) -> dict[str, str]:
    return {wire: getattr(req, attr) for wire, attr in REQUEST_WIRE_NAMES}


def request_to_bytes(req: AdvisoryRequest) -> bytes:
    """Serialize a request to the compact JSON body the service expects."""
    return json.dumps(encode_request(req), separators=(",", ":")).encode("utf-8")


def _decode_message(value: Any, name: str) -> AdvisoryMessage:
    if value is None:
        return AdvisoryMessage()
    obj = _require_dict(value, name)
    return AdvisoryMessage(msg=_optional_str(obj.get("msg"), f"{name}.msg"))


def decode_response(payload: Any) -> AdvisoryResponse:
    obj = _require_dict(payload, "response")
    messages = {name: _decode_message(obj.get(name), name) for name in RESPONSE_FIELDS}
    return AdvisoryResponse(**messages)


def response_from_bytes(body: bytes) -> AdvisoryResponse:
    """Parse a 200 response body. Raises AdvisoryDecodeError on malformed input."""
    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise AdvisoryDecodeError(f"response is not valid json: {exc}") from exc
    return decode_response(payload)
