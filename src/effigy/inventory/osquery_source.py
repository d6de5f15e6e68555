"""
osquery inventory source.

Reads core osquery tables through the extension manager socket.

The client is opened once at startup with the configured timeout and reused
for every query. osquery extension servers handle one call at a time, so the
client is never used concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from thrift.Thrift import TException

from effigy.core.errors import InventorySourceError
from effigy.inventory.base import InventorySource

logger = logging.getLogger(__name__)


def open_client(socket_path: str, timeout_seconds: int) -> Any:
    """
    Open an osquery extension client on socket_path.

    Raises InventorySourceError when osquery does not answer within timeout_seconds.
    """
    import osquery

    client = osquery.ExtensionClient(path=socket_path)
    if not client.open(timeout=timeout_seconds):
        raise InventorySourceError(f"could not connect to osquery at {socket_path}")
    logger.debug("connected to osquery at %s", socket_path)
    return client


@dataclass(frozen=True)
class OsqueryInventorySource(InventorySource):
    """
    Inventory source backed by a live osquery.

    client is an opened osquery.ExtensionClient.
    """

    client: Any

    def query_row(self, sql: str) -> dict[str, str]:
        try:
            response = self.client.extension_client().query(sql)
        except TException as exc:
            # socket not open or dropped, for example after an osquery restart
            raise InventorySourceError(str(exc) or type(exc).__name__) from exc

        status = response.status
        if status is not None and status.code != 0:
            raise InventorySourceError(status.message or f"osquery status {status.code}")

        rows = response.response or []
        if len(rows) != 1:
            raise InventorySourceError(f"expected 1 row, got {len(rows)}")
        return dict(rows[0])
