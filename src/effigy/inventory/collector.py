"""
Fact collector.

Runs the four read only queries the advisory request is built from.

Behavior
Queries run one at a time, in a fixed order.
The first failure stops collection, so a caller never sees partial facts.
Every failure names the table that could not be read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from effigy.core.errors import InventoryQueryError, InventorySourceError
from effigy.core.types import InventoryFacts
from effigy.inventory.base import InventorySource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FactQuery:
    """
    One inventory query.

    name is the table name used in errors and as the InventoryFacts field.
    required_columns must all be present in the returned row.
    """

    name: str
    sql: str
    required_columns: tuple[str, ...]


FACT_QUERIES: tuple[FactQuery, ...] = (
    FactQuery("system_info", "select * from system_info", ("hardware_model",)),
    FactQuery("os_version", "select * from os_version", ("build", "version")),
    FactQuery("smc_keys", "select value from smc_keys where key = 'RVBF'", ("value",)),
    FactQuery("platform_info", "select * from platform_info", ("version",)),
)


def _normalize_row(row: dict[object, object]) -> dict[str, str]:
    return {str(k): "" if v is None else str(v) for k, v in row.items()}


def run_query(source: InventorySource, query: FactQuery) -> dict[str, str]:
    """Run one fact query and check that the row has the columns we need."""
    try:
        raw = source.query_row(query.sql)
    except (InventorySourceError, OSError) as exc:
        raise InventoryQueryError(query.name, str(exc)) from exc

    row = _normalize_row(raw)
    missing = [c for c in query.required_columns if c not in row]
    if missing:
        raise InventoryQueryError(query.name, f"missing column {', '.join(missing)}")
    return row


def collect_facts(source: InventorySource) -> InventoryFacts:
    """Collect every fact query into one InventoryFacts."""
    rows: dict[str, dict[str, str]] = {}
    for query in FACT_QUERIES:
        rows[query.name] = run_query(source, query)
        logger.debug("collected %s", query.name)
    return InventoryFacts(**rows)
