"""
effigy table facade.

This is the composition layer of the extension.
It wires the inventory source, request builder, advisory client and row
assembler for one table invocation.

advise is the pure pipeline and knows nothing about osquery.
EffigyTable adapts it to the table contract: one row per call, or an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from effigy.advisory.builder import PlaceholderFields, UnsourcedFieldsProvider, build_request
from effigy.advisory.client import AdvisoryClient
from effigy.core.types import COLUMNS, TABLE_NAME, ResultRow
from effigy.inventory.base import InventorySource
from effigy.inventory.collector import collect_facts
from effigy.table.row import assemble_row

logger = logging.getLogger(__name__)


def advise(
    source: InventorySource,
    advisory: AdvisoryClient,
    unsourced: UnsourcedFieldsProvider | None = None,
) -> ResultRow:
    """
    Run collection, request building, the advisory call and row assembly.

    Any failure propagates, so an inventory error means no advisory call is made.
    """
    facts = collect_facts(source)
    request = build_request(facts, unsourced)
    logger.debug("calling advisory service at %s", advisory.url)
    response = advisory.call(request)
    return assemble_row(request, response)


@dataclass(frozen=True)
class EffigyTable:
    """
    The effigy table.

    source
    Where facts come from.

    advisory
    Advisory service client.

    unsourced
    Provider for request fields not read from inventory.
    """

    source: InventorySource
    advisory: AdvisoryClient = field(default_factory=AdvisoryClient)
    unsourced: UnsourcedFieldsProvider = field(default_factory=PlaceholderFields)

    name: str = TABLE_NAME

    def columns(self) -> tuple[str, ...]:
        return COLUMNS

    def generate(self, query_context: Any = None) -> list[dict[str, str]]:
        """
        Produce the table rows for one query.

        query_context is accepted for the host contract and ignored;
        there is no constraint pushdown.
        """
        row = advise(self.source, self.advisory, self.unsourced)
        return [row.as_dict()]
