"""
Inventory source interfaces.

Goal
Keep the fact collector independent of how osquery is reached.

A source answers one SQL statement with one row. The real source talks to
osquery over its extension socket, the static source answers from a dict.

We keep the interface narrow so it is easy to mock in tests.
"""

from __future__ import annotations

from typing import Protocol


class InventorySource(Protocol):
    """
    Inventory source interface.

    query_row runs a read only query that must produce exactly one row.
    It raises InventorySourceError when the query fails or returns a different
    number of rows.
    """

    def query_row(self, sql: str) -> dict[str, str]:
        """Run sql and return its single row."""
