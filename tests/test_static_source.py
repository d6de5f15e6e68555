import json
from pathlib import Path

import pytest

from effigy.core.errors import InventorySourceError
from effigy.inventory.static import StaticInventorySource, table_name


def test_table_name_from_select():
    assert table_name("select * from system_info") == "system_info"
    assert table_name("select value from smc_keys where key = 'RVBF'") == "smc_keys"
    assert table_name("SELECT * FROM OS_VERSION") == "os_version"


def test_table_name_without_from_fails():
    with pytest.raises(InventorySourceError):
        table_name("select 1")


def test_from_json_file_stringifies_values(tmp_path: Path):
    path = tmp_path / "facts.json"
    path.write_text(
        json.dumps({"os_version": {"build": "19H2", "major": 10}}),
        encoding="utf-8",
    )

    source = StaticInventorySource.from_json_file(path)

    assert source.query_row("select * from os_version") == {"build": "19H2", "major": "10"}
    assert source.queries == ["select * from os_version"]


def test_from_json_file_rejects_bad_shapes(tmp_path: Path):
    path = tmp_path / "facts.json"

    path.write_text("[]", encoding="utf-8")
    with pytest.raises(InventorySourceError):
        StaticInventorySource.from_json_file(path)

    path.write_text('{"os_version": "19H2"}', encoding="utf-8")
    with pytest.raises(InventorySourceError):
        StaticInventorySource.from_json_file(path)

    path.write_text("{", encoding="utf-8")
    with pytest.raises(InventorySourceError):
        StaticInventorySource.from_json_file(path)


def test_from_json_file_maps_null_to_empty_string(tmp_path: Path):
    path = tmp_path / "facts.json"
    path.write_text(json.dumps({"platform_info": {"version": None}}), encoding="utf-8")

    source = StaticInventorySource.from_json_file(path)

    assert source.query_row("select * from platform_info") == {"version": ""}
