"""
Core types.

This file defines the shared data structures used across the pipeline.

Important design choice
Every record here is a frozen dataclass with a fixed shape.
The host wants loosely keyed string rows, but we only convert to that format at
the boundary, so a typo in a column name cannot drift into the data silently.

Lifecycle
Every object is created fresh for one table invocation and discarded after it.
Nothing here is cached or shared across calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

STATUS_SUCCESS = "success"

TABLE_NAME = "effigy"

COLUMNS: tuple[str, ...] = (
    "latest_efi_version",
    "efi_version",
    "efi_version_status",
    "latest_os_version",
    "os_version",
    "os_version_status",
    "latest_build_number",
    "build_number",
    "build_number_status",
)


@dataclass(frozen=True)
class InventoryFacts:
    """
    Raw rows collected from the inventory source.

    system_info
    Row from system_info, provides hardware_model.

    os_version
    Row from os_version, provides build and version.

    smc_keys
    Row from smc_keys filtered to the RVBF key, provides value.

    platform_info
    Row from platform_info, provides version which is the ROM version.
    """

    system_info: dict[str, str] = field(default_factory=dict)
    os_version: dict[str, str] = field(default_factory=dict)
    smc_keys: dict[str, str] = field(default_factory=dict)
    platform_info: dict[str, str] = field(default_factory=dict)

    @property
    def hardware_model(self) -> str:
        return self.system_info.get("hardware_model", "")

    @property
    def os_build(self) -> str:
        return self.os_version.get("build", "")

    @property
    def os_release(self) -> str:
        return self.os_version.get("version", "")

    @property
    def smc_version(self) -> str:
        return self.smc_keys.get("value", "")

    @property
    def rom_version(self) -> str:
        return self.platform_info.get("version", "")


@dataclass(frozen=True)
class UnsourcedFields:
    """
    Request fields that are not derived from inventory yet.

    These are filled by an UnsourcedFieldsProvider.
    """

    board_id: str
    system_uuid: str
    mac_address: str
    hashed_uuid: str


@dataclass(frozen=True)
class AdvisoryRequest:
    """
    Outbound advisory request.

    Attribute names are pythonic. The wire names live in core.serialization.
    Every field is a string and may be empty.
    """

    board_id: str = ""
    smc_version: str = ""
    build_number: str = ""
    rom_version: str = ""
    hardware_version: str = ""
    os_version: str = ""
    system_uuid: str = ""
    mac_address: str = ""
    hashed_uuid: str = ""


@dataclass(frozen=True)
class AdvisoryMessage:
    """One advisory message. The service wraps every value as {"msg": "..."}."""

    msg: str = ""


@dataclass(frozen=True)
class AdvisoryResponse:
    """
    Advisory response.

    The service always answers with these three messages, possibly empty.
    """

    latest_efi_version: AdvisoryMessage = AdvisoryMessage()
    latest_os_version: AdvisoryMessage = AdvisoryMessage()
    latest_build_number: AdvisoryMessage = AdvisoryMessage()


@dataclass(frozen=True)
class ResultRow:
    """
    One row of the effigy table.

    current values come from the request, latest values from the response.
    The status columns are always STATUS_SUCCESS in this version; they are not
    computed from a comparison of current and latest.
    """

    latest_efi_version: str
    efi_version: str
    efi_version_status: str
    latest_os_version: str
    os_version: str
    os_version_status: str
    latest_build_number: str
    build_number: str
    build_number_status: str

    def as_dict(self) -> dict[str, str]:
        """Return the host row, keyed by column name in table order."""
        return {name: getattr(self, name) for name in COLUMNS}
