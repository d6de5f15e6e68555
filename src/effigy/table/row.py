"""
Row assembler.

Merges the request (current values) and the response (latest values) into the
single effigy table row. This is a pure field copy: the same inputs always give
the same row.
"""

from __future__ import annotations

from effigy.core.types import STATUS_SUCCESS, AdvisoryRequest, AdvisoryResponse, ResultRow


def assemble_row(request: AdvisoryRequest, response: AdvisoryResponse) -> ResultRow:
    # status columns are fixed, no current/latest comparison is made yet
    return ResultRow(
        latest_efi_version=response.latest_efi_version.msg,
        efi_version=request.rom_version,
        efi_version_status=STATUS_SUCCESS,
        latest_os_version=response.latest_os_version.msg,
        os_version=request.os_version,
        os_version_status=STATUS_SUCCESS,
        latest_build_number=response.latest_build_number.msg,
        build_number=request.build_number,
        build_number_status=STATUS_SUCCESS,
    )
