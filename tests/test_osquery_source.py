from types import SimpleNamespace

import pytest

pytest.importorskip("thrift")

from thrift.transport.TTransport import TTransportException  # noqa: E402

from effigy.core.errors import InventoryQueryError, InventorySourceError  # noqa: E402
from effigy.inventory.collector import collect_facts  # noqa: E402
from effigy.inventory.osquery_source import OsqueryInventorySource  # noqa: E402


class FakeExtensionClient:
    """Stands in for osquery.ExtensionClient, answering every query the same way."""

    def __init__(self, code: int, rows: list[dict[str, str]], message: str = "OK") -> None:
        self.response = SimpleNamespace(
            status=SimpleNamespace(code=code, message=message),
            response=rows,
        )
        self.queries: list[str] = []

    def extension_client(self) -> "FakeExtensionClient":
        return self

    def query(self, sql: str) -> SimpleNamespace:
        self.queries.append(sql)
        return self.response


def test_query_row_returns_the_single_row():
    client = FakeExtensionClient(0, [{"build": "19H2", "version": "10.15.7"}])

    row = OsqueryInventorySource(client=client).query_row("select * from os_version")

    assert row == {"build": "19H2", "version": "10.15.7"}
    assert client.queries == ["select * from os_version"]


def test_query_row_raises_on_error_status():
    client = FakeExtensionClient(1, [], message="no such table: smc_keys")

    with pytest.raises(InventorySourceError, match="no such table: smc_keys"):
        OsqueryInventorySource(client=client).query_row("select value from smc_keys")


@pytest.mark.parametrize("rows", [[], [{"value": "1"}, {"value": "2"}]])
def test_query_row_requires_exactly_one_row(rows):
    client = FakeExtensionClient(0, rows)

    with pytest.raises(InventorySourceError, match=f"expected 1 row, got {len(rows)}"):
        OsqueryInventorySource(client=client).query_row("select value from smc_keys")


class DroppedSocketClient:
    """Behaves like an ExtensionClient whose socket closed after osquery restarted."""

    def extension_client(self) -> "DroppedSocketClient":
        return self

    def query(self, sql: str) -> SimpleNamespace:
        raise TTransportException(TTransportException.NOT_OPEN, "Transport not open")


def test_query_row_wraps_transport_errors():
    with pytest.raises(InventorySourceError, match="Transport not open") as excinfo:
        OsqueryInventorySource(client=DroppedSocketClient()).query_row("select * from system_info")

    assert isinstance(excinfo.value.__cause__, TTransportException)


def test_dropped_socket_fails_collection_with_query_name():
    with pytest.raises(InventoryQueryError) as excinfo:
        collect_facts(OsqueryInventorySource(client=DroppedSocketClient()))

    assert excinfo.value.query == "system_info"
    assert "Transport not open" in str(excinfo.value)
