"""
Request builder.

Turns collected facts into one AdvisoryRequest.

Field sources
build_number       os_version.build
smc_version        smc_keys.value
hardware_version   system_info.hardware_model
os_version         os_version.version
rom_version        platform_info.version

board_id, system_uuid, mac_address and hashed_uuid are not read from inventory
yet. They come from an UnsourcedFieldsProvider, and the default provider
returns fixed placeholder literals. Swap the provider to source them for real.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from effigy.core.types import AdvisoryRequest, InventoryFacts, UnsourcedFields

PLACEHOLDER_BOARD_ID = "Mac-66E35819EE2D0D05"
PLACEHOLDER_SYSTEM_UUID = "12345678-1234-1234-1234-1234567890AB"
PLACEHOLDER_MAC_ADDRESS = "b4:bf:b4:b1:b6:bc"
PLACEHOLDER_HASHED_UUID = "foobar"


class UnsourcedFieldsProvider(Protocol):
    """Supplies the request fields that inventory does not provide."""

    def unsourced_fields(self) -> UnsourcedFields:
        """Return the fields for one request."""


@dataclass(frozen=True)
class PlaceholderFields(UnsourcedFieldsProvider):
    """Fixed placeholder values, used until the fields are sourced from inventory."""

    def unsourced_fields(self) -> UnsourcedFields:
        return UnsourcedFields(
            board_id=PLACEHOLDER_BOARD_ID,
            system_uuid=PLACEHOLDER_SYSTEM_UUID,
            mac_address=PLACEHOLDER_MAC_ADDRESS,
            hashed_uuid=PLACEHOLDER_HASHED_UUID,
        )


def build_request(
    facts: InventoryFacts,
    unsourced: UnsourcedFieldsProvider | None = None,
) -> AdvisoryRequest:
    """Build the advisory request. Empty facts pass through unchanged."""
    extra = (unsourced or PlaceholderFields()).unsourced_fields()

    return AdvisoryRequest(
        board_id=extra.board_id,
        smc_version=facts.smc_version,
        build_number=facts.os_build,
        rom_version=facts.rom_version,
        hardware_version=facts.hardware_model,
        os_version=facts.os_release,
        system_uuid=extra.system_uuid,
        mac_address=extra.mac_address,
        hashed_uuid=extra.hashed_uuid,
    )
