"""
Static inventory source.

Answers inventory queries from canned rows instead of a live osquery.
This is useful for dev, tests, and running a report on another machine's facts.

Schema example
{
  "system_info": {"hardware_model": "MacBookPro15,1"},
  "os_version": {"build": "19H2", "version": "10.15.7"},
  "smc_keys": {"value": "1.23"},
  "platform_info": {"version": "426.0.0.0.0"}
}

Rows are matched to queries by the table named in the FROM clause.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from effigy.core.errors import InventorySourceError
from effigy.inventory.base import InventorySource

_FROM_TABLE = re.compile(r"\bfrom\s+([A-Za-z_][A-Za-z0-9_]*)", re.IGNORECASE)


def table_name(sql: str) -> str:
    """Return the table a simple select reads from."""
    match = _FROM_TABLE.search(sql)
    if match is None:
        raise InventorySourceError(f"cannot find table name in query: {sql}")
    return match.group(1).lower()


@dataclass
class StaticInventorySource(InventorySource):
    """
    In memory inventory source.

    rows
    Mapping of table name to the single row that table returns.
    A table that is missing behaves like a query that returned no rows.

    queries
    Every statement received, in order. Tests use it to check what was asked.
    """

    rows: dict[str, dict[str, str]] = field(default_factory=dict)
    queries: list[str] = field(default_factory=list)

    def query_row(self, sql: str) -> dict[str, str]:
        self.queries.append(sql)
        table = table_name(sql)
        row = self.rows.get(table)
        if row is None:
            raise InventorySourceError("expected 1 row, got 0")
        return dict(row)

    @classmethod
    def from_json_file(cls, path: Path) -> StaticInventorySource:
        """Load rows from a json file that matches the module docstring schema."""
        try:
            data: Any = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise InventorySourceError(f"{path} is not valid json: {exc}") from exc
        if not isinstance(data, dict):
            raise InventorySourceError(f"{path} must contain a json object")

        rows: dict[str, dict[str, str]] = {}
        for table, row in data.items():
            if not isinstance(row, dict):
                raise InventorySourceError(f"{path}: row for {table} must be an object")
            rows[str(table).lower()] = {str(k): "" if v is None else str(v) for k, v in row.items()}
        return cls(rows=rows)
